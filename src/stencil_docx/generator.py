"""Entry point: build a configured generator function."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from .backends import DocxBackend
from .backends.base import DocumentBackend
from .config import GeneratorConfig, build_config
from .document import Clock, DocumentGenerator
from .models import DocsSet
from .output import write_document

DocsGenerator = Callable[[DocsSet], Path]


def create_docx_generator(
    options: GeneratorConfig | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
    backend: DocumentBackend | None = None,
) -> DocsGenerator:
    """Create a function that renders a DocsSet to a .docx file.

    Args:
        options: Config object or mapping of overrides (snake_case or camelCase);
            unset fields keep their defaults
        clock: Date source for the cover subtitle (defaults to date.today)
        backend: Serialization backend (defaults to DocxBackend)

    Returns:
        A function taking the component metadata and returning the written path

    Raises:
        ConfigError: If the options are invalid
    """
    config = build_config(options)

    def generate(docs: DocsSet) -> Path:
        document = DocumentGenerator(config, clock=clock).generate(docs)
        return write_document(document, config, backend or DocxBackend())

    return generate
