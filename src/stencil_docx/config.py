"""Generator configuration: defaults, YAML loading and override merging.

A configuration file (stencil_docx.yaml) is a flat mapping of the fields of
GeneratorConfig. Keys may be written in snake_case (``out_dir``) or in the
camelCase used by docs-json tooling (``outDir``).
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import ConfigError

CONFIG_FILE_NAME = "stencil_docx.yaml"


class GeneratorConfig(BaseModel):
    """Configuration for DOCX generation. Every field has a default."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    out_dir: str = "docs"
    out_file: str = "docs.docx"
    text_font: str = "Calibri"
    exclude_tags: list[str] = Field(default_factory=lambda: ["undocumented"])
    title: str = "Component Documentation"
    author: str = "SaaSquatch"
    table_style: str = "Table Grid"  # Word built-in table style name

    @field_validator("exclude_tags", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list of tag names."""
        if v is None:
            return []
        if isinstance(v, (list, tuple, set, frozenset)):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]

    @property
    def exclude_set(self) -> frozenset[str]:
        """Exclusion tag names as a set for membership tests."""
        return frozenset(self.exclude_tags)

    @property
    def output_path(self) -> Path:
        """Full path of the document to write."""
        return Path(self.out_dir) / self.out_file

    def merged(self, overrides: Mapping[str, Any] | None) -> GeneratorConfig:
        """Return a new config with non-None overrides applied on top of this one.

        Raises:
            ConfigError: If an override names an unknown field or has the wrong type
        """
        names = {field.alias or name: name for name, field in type(self).model_fields.items()}
        data = self.model_dump()
        for key, value in (overrides or {}).items():
            if value is None:
                continue
            data[names.get(key, key)] = value
        try:
            return type(self).model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def build_config(options: GeneratorConfig | Mapping[str, Any] | None = None) -> GeneratorConfig:
    """Merge an options object or mapping with the defaults."""
    if isinstance(options, GeneratorConfig):
        return options
    return GeneratorConfig().merged(options)


def load_config(config_path: Path | str) -> GeneratorConfig:
    """Load a generator configuration from a YAML file.

    Args:
        config_path: Path to a stencil_docx.yaml file

    Returns:
        GeneratorConfig with file values merged over the defaults

    Raises:
        ConfigError: If the file doesn't exist, can't be read, or its contents are invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {config_path}: {e}") from e

    if data is None:
        return GeneratorConfig()

    if not isinstance(data, dict):
        raise ConfigError("Config must contain a mapping at the root level")

    return GeneratorConfig().merged(data)  # type: ignore[arg-type]


def discover_config(
    docs_path: Path | str,
    config_path: Path | None = None,
) -> GeneratorConfig | None:
    """Discover a config file for a docs-json file.

    Search order:
    1. Explicit config_path argument (must exist)
    2. docs-json directory / stencil_docx.yaml
    3. Current directory / stencil_docx.yaml
    """
    if config_path is not None:
        return load_config(config_path)

    dir_config = Path(docs_path).parent / CONFIG_FILE_NAME
    if dir_config.exists():
        return load_config(dir_config)

    cwd_config = Path(CONFIG_FILE_NAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return None
