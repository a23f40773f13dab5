"""Pydantic schemas for docs-json data validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _text(v: Any) -> str:
    """Coerce a possibly-missing text value to a string."""
    if v is None:
        return ""
    return str(v)


class DocsTagSchema(BaseModel):
    """Schema for a doc-tag entry (``{"name": ..., "text": ...}``)."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    text: str = ""

    @field_validator("name", "text", mode="before")
    @classmethod
    def ensure_text(cls, v: Any) -> str:
        """Missing or null strings become empty strings."""
        return _text(v)


class PropSchema(BaseModel):
    """Schema for a component property."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    attr: str | None = None
    type: str = ""
    docs: str = ""
    docs_tags: list[DocsTagSchema] = Field(default_factory=list, alias="docsTags")

    @field_validator("name", "type", "docs", mode="before")
    @classmethod
    def ensure_text(cls, v: Any) -> str:
        """Missing or null strings become empty strings."""
        return _text(v)

    @field_validator("docs_tags", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[Any]:
        """A null tag list is treated as empty."""
        return [] if v is None else v


class SlotSchema(BaseModel):
    """Schema for a component slot."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    docs: str = ""

    @field_validator("name", "docs", mode="before")
    @classmethod
    def ensure_text(cls, v: Any) -> str:
        """Missing or null strings become empty strings."""
        return _text(v)


class ComponentSchema(BaseModel):
    """Schema for one component entry of a docs-json file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    tag: str = ""
    docs: str = ""
    docs_tags: list[DocsTagSchema] = Field(default_factory=list, alias="docsTags")
    props: list[PropSchema] = Field(default_factory=list)
    slots: list[SlotSchema] = Field(default_factory=list)

    @field_validator("tag", "docs", mode="before")
    @classmethod
    def ensure_text(cls, v: Any) -> str:
        """Missing or null strings become empty strings."""
        return _text(v)

    @field_validator("docs_tags", "props", "slots", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[Any]:
        """Null lists are treated as empty."""
        return [] if v is None else v


class DocsSetSchema(BaseModel):
    """Schema for the root of a docs-json file."""

    model_config = ConfigDict(extra="ignore")

    components: list[ComponentSchema] = Field(default_factory=list)

    @field_validator("components", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[Any]:
        """A null component list is treated as empty."""
        return [] if v is None else v
