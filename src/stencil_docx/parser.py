"""Loader for docs-json component metadata."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .models import ComponentDoc, DocsSet, DocsTag, PropDoc, SlotDoc
from .schemas import ComponentSchema, DocsSetSchema, DocsTagSchema


def load_docs(file_path: Path | str) -> DocsSet:
    """Load a docs-json file into a DocsSet.

    Raises:
        ParseError: If the file is missing or unreadable, is not valid JSON, or has the wrong shape
    """
    path = Path(file_path)
    if not path.exists():
        raise ParseError(f"File not found: {file_path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to read {file_path}: {e}") from e

    return parse_docs(data)


def parse_docs(data: Any) -> DocsSet:
    """Convert raw docs-json data (already decoded) into a DocsSet."""
    if not isinstance(data, dict):
        raise ParseError("Docs JSON must contain an object at the root level")

    try:
        schema = DocsSetSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid component metadata: {e}") from e

    return DocsSet(components=[_to_component(c) for c in schema.components])


def _to_tags(tags: list[DocsTagSchema]) -> list[DocsTag]:
    return [DocsTag(name=t.name, text=t.text) for t in tags]


def _to_component(schema: ComponentSchema) -> ComponentDoc:
    return ComponentDoc(
        tag=schema.tag,
        docs=schema.docs,
        docs_tags=_to_tags(schema.docs_tags),
        props=[
            PropDoc(
                name=p.name,
                attr=p.attr or None,
                type=p.type,
                docs=p.docs,
                docs_tags=_to_tags(p.docs_tags),
            )
            for p in schema.props
        ],
        slots=[SlotDoc(name=s.name, docs=s.docs) for s in schema.slots],
    )
