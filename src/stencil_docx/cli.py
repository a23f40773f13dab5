"""Command-line interface for stencil-docx."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Annotated, Any

import typer

from . import context
from .config import GeneratorConfig, discover_config
from .exceptions import StencilDocxError
from .generator import create_docx_generator
from .logger import setup_logger
from .parser import load_docs

app = typer.Typer(
    name="stencil-docx",
    help="Generate Word documentation from component docs-json metadata",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=progress, 2=details, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: stencil_docx.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for stencil-docx commands."""
    setup_logger(verbose)
    context.set_config_path(config)


@app.command()
def generate(  # noqa: PLR0913 - CLI command needs multiple options
    file: Annotated[Path, typer.Argument(help="Path to the docs-json file")] = Path("docs.json"),
    *,
    out_dir: Annotated[
        str | None, typer.Option("--out-dir", "-o", help="Output directory")
    ] = None,
    out_file: Annotated[
        str | None, typer.Option("--out-file", help="Output file name (.docx)")
    ] = None,
    text_font: Annotated[
        str | None, typer.Option("--text-font", help="Font used for all text")
    ] = None,
    exclude_tags: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude-tag",
            help="Doc-tag that excludes a component or prop (repeatable, replaces config)",
        ),
    ] = None,
    title: Annotated[str | None, typer.Option("--title", help="Title page text")] = None,
    author: Annotated[str | None, typer.Option("--author", help="Title page author")] = None,
    as_of: Annotated[
        str | None,
        typer.Option("--date", help="Date shown on the title page (YYYY-MM-DD, default: today)"),
    ] = None,
) -> None:
    """Generate a .docx document from component metadata."""
    cover_date = _parse_date_option(as_of, "--date")

    overrides: dict[str, Any] = {
        "out_dir": out_dir,
        "out_file": out_file,
        "text_font": text_font,
        "exclude_tags": exclude_tags or None,
        "title": title,
        "author": author,
    }

    try:
        base_config = discover_config(file, context.get_config_path()) or GeneratorConfig()
        config = base_config.merged(overrides)
        docs = load_docs(file)
        generator = create_docx_generator(
            config, clock=(lambda: cover_date) if cover_date else None
        )
        out_path = generator(docs)
    except StencilDocxError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Documentation written to {out_path}")


def _parse_date_option(date_str: str | None, option_name: str) -> date | None:
    """Parse a date string from CLI option.

    Args:
        date_str: Date string in YYYY-MM-DD format or None
        option_name: Name of the option for error messages

    Returns:
        Parsed date object or None if date_str is None
    """
    if date_str is None:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        typer.echo(
            f"Error: Invalid {option_name} format '{date_str}'. Use YYYY-MM-DD",
            err=True,
        )
        raise typer.Exit(1) from None


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
