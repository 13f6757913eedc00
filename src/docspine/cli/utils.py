"""
CLI utility helpers - output formatting and startup wiring.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from docspine.core.errors import DocSpineError
from docspine.core.logging import configure_logging
from docspine.core.settings import get_settings

console = Console()
err_console = Console(stderr=True)


def setup_logging() -> None:
    """Configure structlog from DOCSPINE_* settings."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


def fail(error: DocSpineError) -> None:
    """Print a DocSpineError and exit with code 1."""
    err_console.print(f"[bold red]Error[/bold red] ({error.category.value}): {error.message}")
    raise typer.Exit(code=1)


def output_rows(
    rows: list[dict[str, Any]],
    *,
    columns: list[str],
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render a list of dicts as a Rich table or as JSON."""
    if as_json:
        typer.echo(json.dumps(rows, indent=2, default=str))
        return

    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    table = Table(title=title or None)
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for row in rows:
        table.add_row(*(str(row.get(col, "")) for col in columns))
    console.print(table)
