"""Data models for component metadata."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocsTag:
    """A named doc-tag annotation (e.g. ``@undocumented``)."""

    name: str
    text: str = ""


@dataclass(frozen=True)
class PropDoc:
    """Documentation for a single component property."""

    name: str
    type: str = ""
    docs: str = ""
    attr: str | None = None
    docs_tags: list[DocsTag] = field(default_factory=list[DocsTag])

    @property
    def attribute_name(self) -> str:
        """The HTML attribute name, falling back to the property name."""
        return self.attr or self.name


@dataclass(frozen=True)
class SlotDoc:
    """Documentation for a single component slot."""

    name: str
    docs: str = ""


@dataclass(frozen=True)
class ComponentDoc:
    """Documentation for one component."""

    tag: str
    docs: str = ""
    docs_tags: list[DocsTag] = field(default_factory=list[DocsTag])
    props: list[PropDoc] = field(default_factory=list[PropDoc])
    slots: list[SlotDoc] = field(default_factory=list[SlotDoc])


@dataclass(frozen=True)
class DocsSet:
    """The full metadata set produced by the docs extractor."""

    components: list[ComponentDoc] = field(default_factory=list[ComponentDoc])
