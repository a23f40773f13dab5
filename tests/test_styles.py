"""Tests for the style registry."""

from stencil_docx.styles import build_styles


def test_style_ids_in_order() -> None:
    styles = build_styles("Calibri")

    assert [s.style_id for s in styles] == [
        "Normal",
        "Heading1",
        "Heading2",
        "Title",
        "Subtitle",
        "Heading1NoOutline",
    ]


def test_every_style_uses_configured_font() -> None:
    assert {s.font for s in build_styles("Georgia")} == {"Georgia"}


def test_heading_outline_levels() -> None:
    styles = {s.style_id: s for s in build_styles("Calibri")}

    assert styles["Heading1"].outline_level == 1
    assert styles["Heading2"].outline_level == 2
    assert styles["Normal"].outline_level is None
    assert styles["Title"].outline_level is None


def test_no_outline_heading_matches_heading1_visually() -> None:
    styles = {s.style_id: s for s in build_styles("Calibri")}
    heading, caption = styles["Heading1"], styles["Heading1NoOutline"]

    assert caption.outline_level is None
    assert not caption.quick_format
    assert (caption.size, caption.bold, caption.spacing_before, caption.spacing_after) == (
        heading.size,
        heading.bold,
        heading.spacing_before,
        heading.spacing_after,
    )


def test_sizes() -> None:
    sizes = {s.style_id: s.size for s in build_styles("Calibri")}

    assert sizes == {
        "Normal": 24,
        "Heading1": 32,
        "Heading2": 28,
        "Title": 64,
        "Subtitle": 36,
        "Heading1NoOutline": 32,
    }
