"""Abstract document model handed from the renderer to a serialization backend.

Widths, margins and spacing are in twips (1/20 pt, "DXA"); font sizes are in
half-points, matching WordprocessingML.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LANDSCAPE_PAGE_WIDTH = 13768

DEFAULT_CELL_MARGIN = 64


class Orientation(str, Enum):
    """Page orientation of a section."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class Alignment(str, Enum):
    """Horizontal paragraph alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class StyleDef:
    """A named paragraph style."""

    style_id: str
    name: str
    font: str
    size: int  # half-points
    bold: bool = False
    spacing_before: int | None = None
    spacing_after: int | None = None
    outline_level: int | None = None  # 1-based heading level seen by the TOC
    quick_format: bool = True


@dataclass(frozen=True)
class Margins:
    """Cell margins."""

    top: int = DEFAULT_CELL_MARGIN
    bottom: int = DEFAULT_CELL_MARGIN
    left: int = DEFAULT_CELL_MARGIN
    right: int = DEFAULT_CELL_MARGIN


@dataclass(frozen=True)
class PageNumber:
    """Field that renders as the current page number."""


CellContent = str | PageNumber


@dataclass(frozen=True)
class Cell:
    """A single table cell holding one paragraph."""

    content: CellContent = ""
    margins: Margins | None = None
    shaded: bool = False
    bold: bool = False
    alignment: Alignment = Alignment.LEFT
    borders: bool = True

    @property
    def text(self) -> str:
        """Plain text of the cell (empty for fields)."""
        return self.content if isinstance(self.content, str) else ""


@dataclass(frozen=True)
class Row:
    """A table row. Header rows repeat at the top of each page."""

    cells: tuple[Cell, ...]
    header: bool = False


@dataclass(frozen=True)
class Table:
    """A table with fixed column widths."""

    column_widths: tuple[int, ...]
    rows: tuple[Row, ...]
    width: int | None = None
    style: str | None = None

    @property
    def header_row(self) -> Row | None:
        """The leading header row, repeated at the top of each page when rendered."""
        return self.rows[0] if self.rows and self.rows[0].header else None

    @property
    def data_rows(self) -> tuple[Row, ...]:
        """Rows below the header."""
        return tuple(row for row in self.rows if not row.header)


@dataclass(frozen=True)
class Heading:
    """An outlined heading (level 1 or 2)."""

    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    """A paragraph of plain text with an optional named style."""

    text: str
    style: str | None = None
    alignment: Alignment = Alignment.LEFT


@dataclass(frozen=True)
class PageBreak:
    """Forces the following content onto a new page."""


@dataclass(frozen=True)
class TableOfContents:
    """Placeholder the word processor fills with a table of contents."""

    hyperlink: bool = True
    heading_range: tuple[int, int] = (1, 2)


Block = Heading | Paragraph | Table | PageBreak | TableOfContents


@dataclass(frozen=True)
class Footer:
    """Footer content repeated on each page of a section."""

    blocks: tuple[Block, ...]


@dataclass(frozen=True)
class Section:
    """A run of pages sharing orientation and footer."""

    blocks: tuple[Block, ...]
    orientation: Orientation = Orientation.PORTRAIT
    footer: Footer | None = None


@dataclass(frozen=True)
class Document:
    """A complete document: styles plus ordered sections."""

    styles: tuple[StyleDef, ...]
    sections: tuple[Section, ...]
    title: str = ""
    creator: str = ""

    def heading_style(self, level: int) -> StyleDef | None:
        """The style used for headings of the given outline level."""
        return next((s for s in self.styles if s.outline_level == level), None)
