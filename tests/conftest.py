"""Pytest configuration and fixtures for stencil-docx tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from datetime import date
from pathlib import Path
import pytest

from stencil_docx.logger import reset_logger
from stencil_docx.models import ComponentDoc, DocsTag, PropDoc, SlotDoc

COVER_DATE = date(2024, 3, 1)


@pytest.fixture(autouse=True)
def _clean_logger() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Keep logger configuration from leaking between tests."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def fixed_clock() -> Callable[[], date]:
    """Clock that always returns the same cover date."""
    return lambda: COVER_DATE


@pytest.fixture
def fixtures_dir() -> Path:
    """Get the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def make_prop() -> Callable[..., PropDoc]:
    """Factory for properties with optional doc-tag names."""

    def _make(
        name: str,
        *,
        attr: str | None = None,
        type: str = "string",  # noqa: A002 - mirrors the metadata field
        docs: str = "",
        tags: Sequence[str] = (),
    ) -> PropDoc:
        return PropDoc(
            name=name,
            attr=attr,
            type=type,
            docs=docs,
            docs_tags=[DocsTag(name=tag) for tag in tags],
        )

    return _make


@pytest.fixture
def make_component() -> Callable[..., ComponentDoc]:
    """Factory for components with optional doc-tag names."""

    def _make(
        tag: str,
        *,
        docs: str = "",
        tags: Sequence[str] = (),
        props: Sequence[PropDoc] = (),
        slots: Sequence[SlotDoc] = (),
    ) -> ComponentDoc:
        return ComponentDoc(
            tag=tag,
            docs=docs,
            docs_tags=[DocsTag(name=t) for t in tags],
            props=list(props),
            slots=list(slots),
        )

    return _make
