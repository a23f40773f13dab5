"""Builders for table cells and the property/slot tables."""

from __future__ import annotations

from collections.abc import Sequence

from .config import GeneratorConfig
from .filtering import filter_props
from .layout import LANDSCAPE_PAGE_WIDTH, Cell, Margins, Row, Table
from .models import PropDoc, SlotDoc

PROP_TABLE_RATIOS = (0.25, 0.15, 0.6)
PROP_TABLE_HEADERS = ("Attribute Name", "Type", "Description")

SLOT_TABLE_RATIOS = (0.2, 0.8)
SLOT_TABLE_HEADERS = ("Name", "Description")

CELL_MARGINS = Margins()


def column_widths(ratios: Sequence[float], total: int = LANDSCAPE_PAGE_WIDTH) -> tuple[int, ...]:
    """Scale width ratios to whole twips.

    The last column takes the rounding remainder so the widths always sum to
    ``total``.
    """
    widths = [round(total * ratio) for ratio in ratios[:-1]]
    widths.append(total - sum(widths))
    return tuple(widths)


PROP_TABLE_WIDTHS = column_widths(PROP_TABLE_RATIOS)
SLOT_TABLE_WIDTHS = column_widths(SLOT_TABLE_RATIOS)


def make_header_cell(text: str | None) -> Cell:
    """A shaded, bold header cell."""
    return Cell(content=text or "", margins=CELL_MARGINS, shaded=True, bold=True)


def make_cell(text: str | None) -> Cell:
    """A plain data cell."""
    return Cell(content=text or "", margins=CELL_MARGINS)


def _header_row(titles: Sequence[str]) -> Row:
    return Row(cells=tuple(make_header_cell(title) for title in titles), header=True)


def prop_to_cells(prop: PropDoc) -> tuple[Cell, ...]:
    return (
        make_cell(prop.attribute_name),
        make_cell(prop.type),
        make_cell(prop.docs),
    )


def slot_to_cells(slot: SlotDoc) -> tuple[Cell, ...]:
    return (make_cell(slot.name), make_cell(slot.docs))


def make_prop_table(props: Sequence[PropDoc], config: GeneratorConfig) -> Table:
    """Build the property table, dropping props with an excluded doc-tag."""
    rows = [_header_row(PROP_TABLE_HEADERS)]
    rows.extend(Row(cells=prop_to_cells(prop)) for prop in filter_props(props, config.exclude_set))
    return Table(column_widths=PROP_TABLE_WIDTHS, rows=tuple(rows), style=config.table_style)


def make_slot_table(slots: Sequence[SlotDoc], config: GeneratorConfig | None = None) -> Table:
    """Build the slot table. Slots are never filtered."""
    config = config or GeneratorConfig()
    rows = [_header_row(SLOT_TABLE_HEADERS)]
    rows.extend(Row(cells=slot_to_cells(slot)) for slot in slots)
    return Table(column_widths=SLOT_TABLE_WIDTHS, rows=tuple(rows), style=config.table_style)
