"""Doc-tag based exclusion of components and properties."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from .logger import get_logger
from .models import ComponentDoc, DocsTag, PropDoc


def is_excluded(tags: Iterable[DocsTag], exclude: Collection[str]) -> bool:
    """Return True if any doc-tag name is in the exclusion set (exact, case-sensitive)."""
    return any(tag.name in exclude for tag in tags)


def filter_components(
    components: Iterable[ComponentDoc], exclude: Collection[str]
) -> list[ComponentDoc]:
    """Drop components carrying an excluded doc-tag, preserving order."""
    logger = get_logger()
    kept: list[ComponentDoc] = []
    for component in components:
        if is_excluded(component.docs_tags, exclude):
            logger.details(f"Skipping component {component.tag} (excluded by doc-tag)")
            continue
        kept.append(component)
    return kept


def filter_props(props: Iterable[PropDoc], exclude: Collection[str]) -> list[PropDoc]:
    """Drop properties carrying an excluded doc-tag, preserving order."""
    return [prop for prop in props if not is_excluded(prop.docs_tags, exclude)]
