"""Rendering of a single component into document blocks."""

from __future__ import annotations

from .config import GeneratorConfig
from .layout import Block, Heading, Paragraph
from .logger import get_logger
from .models import ComponentDoc
from .tables import make_prop_table, make_slot_table

NO_DOCS_FALLBACK = "No top-level documentation for this component."


def make_component(component: ComponentDoc, config: GeneratorConfig) -> list[Block]:
    """Render one component: heading, description, then props and slots tables.

    Table presence follows the raw prop/slot lists, before tag filtering, so a
    component whose props are all excluded still gets a header-only table.
    """
    blocks: list[Block] = [
        Heading(level=1, text=component.tag),
        Paragraph(text=component.docs or NO_DOCS_FALLBACK),
    ]

    if component.props:
        blocks.append(Heading(level=2, text="Props"))
        table = make_prop_table(component.props, config)
        get_logger().details(
            f"{component.tag}: documenting {len(table.data_rows)} of {len(component.props)} props"
        )
        blocks.append(table)

    if component.slots:
        blocks.append(Heading(level=2, text="Slots"))
        blocks.append(make_slot_table(component.slots, config))

    return blocks
