"""Tests for verbosity-levelled logging."""

from io import StringIO

import pytest

from stencil_docx.logger import get_logger, setup_logger


@pytest.mark.parametrize(
    ("verbosity", "expected"),
    [
        (0, []),
        (1, ["Rendering 2 of 3 components"]),
        (2, ["Rendering 2 of 3 components", "Skipping component sqm-internal"]),
        (3, ["Rendering 2 of 3 components", "Skipping component sqm-internal", "style lookup"]),
    ],
)
def test_verbosity_levels(verbosity: int, expected: list[str]) -> None:
    stream = StringIO()
    setup_logger(verbosity, stream)
    logger = get_logger()

    logger.progress("Rendering 2 of 3 components")
    logger.details("Skipping component sqm-internal")
    logger.debug("style lookup")

    assert stream.getvalue().splitlines() == expected


def test_errors_always_shown() -> None:
    stream = StringIO()
    setup_logger(0, stream)

    get_logger().error("cannot write docs.docx")

    assert stream.getvalue() == "cannot write docs.docx\n"


def test_reconfigure_replaces_handler() -> None:
    first, second = StringIO(), StringIO()
    setup_logger(1, first)
    setup_logger(1, second)

    get_logger().progress("Writing docs.docx")

    assert first.getvalue() == ""
    assert second.getvalue() == "Writing docs.docx\n"
