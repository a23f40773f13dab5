"""Writing serialized documents to disk."""

from __future__ import annotations

from pathlib import Path

from .backends.base import DocumentBackend
from .config import GeneratorConfig
from .layout import Document
from .logger import get_logger


def ensure_dir(path: Path | str) -> None:
    """Create a directory (and its parents) if it does not exist yet."""
    Path(path).mkdir(parents=True, exist_ok=True)


def write_file(path: Path | str, data: bytes) -> None:
    """Write bytes to a file, replacing any existing content."""
    Path(path).write_bytes(data)


def write_document(
    document: Document,
    config: GeneratorConfig,
    backend: DocumentBackend,
) -> Path:
    """Serialize a document and write it to ``<out_dir>/<out_file>``.

    Serialization and filesystem errors propagate to the caller unchanged.

    Returns:
        Path of the written file
    """
    data = backend.render(document)
    ensure_dir(config.out_dir)
    out_path = config.output_path
    get_logger().progress(f"Writing .docx component documentation to {out_path}...")
    write_file(out_path, data)
    return out_path
