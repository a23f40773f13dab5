"""Named paragraph styles used by the generated document."""

from __future__ import annotations

from .layout import StyleDef

NORMAL = "Normal"
HEADING_1 = "Heading1"
HEADING_2 = "Heading2"
TITLE = "Title"
SUBTITLE = "Subtitle"
HEADING_1_NO_OUTLINE = "Heading1NoOutline"

HEADING_SPACING = (240, 120)


def build_styles(font_name: str) -> tuple[StyleDef, ...]:
    """Build the style set for a document, all using one font family.

    Heading1/Heading2 carry outline levels so a table of contents can find
    them. Heading1NoOutline looks like Heading1 but has no outline level; it
    captions the table of contents so the TOC does not list itself.
    """
    before, after = HEADING_SPACING
    return (
        StyleDef(NORMAL, "Normal", font_name, size=24),
        StyleDef(
            HEADING_1,
            "Heading 1",
            font_name,
            size=32,
            bold=True,
            spacing_before=before,
            spacing_after=after,
            outline_level=1,
        ),
        StyleDef(
            HEADING_2,
            "Heading 2",
            font_name,
            size=28,
            bold=True,
            spacing_before=before,
            spacing_after=after,
            outline_level=2,
        ),
        StyleDef(
            TITLE,
            "Title",
            font_name,
            size=64,
            bold=True,
            spacing_before=480,
            spacing_after=240,
        ),
        StyleDef(
            SUBTITLE,
            "Subtitle",
            font_name,
            size=36,
            bold=True,
            spacing_before=360,
            spacing_after=180,
        ),
        StyleDef(
            HEADING_1_NO_OUTLINE,
            "Heading 1 No Outline",
            font_name,
            size=32,
            bold=True,
            spacing_before=before,
            spacing_after=after,
            quick_format=False,
        ),
    )
