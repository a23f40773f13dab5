"""Options from the top-level ``stencil-docx`` command, read by its subcommands."""

from __future__ import annotations

from pathlib import Path


class _Context:
    """Holds the ``--config`` path until ``generate`` runs config discovery."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


_context = _Context()


def get_config_path() -> Path | None:
    """Config file passed with --config; None means search beside the docs file, then cwd."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    """Record the --config path given to the top-level command."""
    _context.config_path = path
