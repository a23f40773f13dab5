"""Assembly of the complete document model from component metadata."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from .components import make_component
from .config import GeneratorConfig
from .filtering import filter_components
from .layout import (
    LANDSCAPE_PAGE_WIDTH,
    Alignment,
    Block,
    Cell,
    Document,
    Footer,
    Orientation,
    PageBreak,
    PageNumber,
    Paragraph,
    Row,
    Section,
    Table,
    TableOfContents,
)
from .logger import get_logger
from .models import ComponentDoc, DocsSet
from .styles import HEADING_1_NO_OUTLINE, SUBTITLE, TITLE, build_styles

TOC_CAPTION = "Table of Contents"
TOC_HEADING_RANGE = (1, 2)

Clock = Callable[[], date]


def format_subtitle(author: str, today: date) -> str:
    """Cover subtitle attributing the document to its author."""
    return f"Generated by {author} on {today.isoformat()}"


class DocumentGenerator:
    """Build a Document from a DocsSet.

    The document has two sections: a portrait cover page and a landscape body
    holding the table of contents followed by one section per component.
    """

    def __init__(self, config: GeneratorConfig | None = None, clock: Clock | None = None):
        """Initialize with configuration and an optional clock.

        Args:
            config: Generator configuration (defaults if omitted)
            clock: Returns the date shown on the cover (defaults to date.today)
        """
        self.config = config or GeneratorConfig()
        self.clock = clock or date.today

    def generate(self, docs: DocsSet) -> Document:
        """Generate the complete document model."""
        logger = get_logger()
        components = filter_components(docs.components, self.config.exclude_set)
        logger.progress(f"Rendering {len(components)} of {len(docs.components)} components")

        return Document(
            styles=build_styles(self.config.text_font),
            sections=(self._cover_section(), self._body_section(components)),
            title=self.config.title,
            creator=self.config.author,
        )

    def _cover_section(self) -> Section:
        return Section(
            blocks=(
                Paragraph(self.config.title, style=TITLE),
                Paragraph(format_subtitle(self.config.author, self.clock()), style=SUBTITLE),
            ),
        )

    def _body_section(self, components: list[ComponentDoc]) -> Section:
        blocks: list[Block] = [
            Paragraph(TOC_CAPTION, style=HEADING_1_NO_OUTLINE),
            TableOfContents(hyperlink=True, heading_range=TOC_HEADING_RANGE),
            PageBreak(),
        ]
        for component in components:
            get_logger().debug(f"Rendering component {component.tag}")
            blocks.extend(make_component(component, self.config))

        return Section(
            blocks=tuple(blocks),
            orientation=Orientation.LANDSCAPE,
            footer=self._footer(),
        )

    def _footer(self) -> Footer:
        """Title on the left, page number on the right, no borders."""
        half = LANDSCAPE_PAGE_WIDTH // 2
        row = Row(
            cells=(
                Cell(content=self.config.title, borders=False),
                Cell(content=PageNumber(), alignment=Alignment.RIGHT, borders=False),
            )
        )
        table = Table(
            column_widths=(half, LANDSCAPE_PAGE_WIDTH - half),
            rows=(row,),
            width=LANDSCAPE_PAGE_WIDTH,
        )
        return Footer(blocks=(table,))
