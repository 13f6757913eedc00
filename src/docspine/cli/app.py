"""
Root Typer application for the docspine CLI.

Usage:
    docspine apply --topic sorting
    docspine show builtins.sorted
    docspine show sys.maxsize --kind variable
    docspine list --json
"""

from __future__ import annotations

import typer
from typer import Typer

from docspine.catalog import apply_catalog, entries_for
from docspine.cli.utils import console, fail, output_rows, setup_logging
from docspine.core.appender import DocAppender, get_default_appender
from docspine.core.enums import AppendMode, DocKind
from docspine.core.errors import DocSpineError

app = Typer(
    name="docspine",
    help="docspine - usage examples appended to standard-library documentation.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from docspine import __version__

        typer.echo(f"docspine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """docspine CLI - apply, inspect, and list documentation augmentations."""
    setup_logging()


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("apply")
def apply_cmd(
    topic: list[str] = typer.Option([], "--topic", "-t", help="Only these topics (repeatable)."),
    mode: AppendMode | None = typer.Option(None, "--mode", help="Override DOCSPINE_APPEND_MODE."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Apply catalog entries and summarize what changed."""
    appender = get_default_appender()
    if mode is not None and mode is not appender.mode:
        appender = DocAppender(appender.registry, cache=appender.cache, mode=mode)
    try:
        applied = apply_catalog(appender, entries_for(topic))
    except DocSpineError as e:
        fail(e)
    output_rows(
        [a.to_dict() for a in applied],
        columns=["identifier", "kind", "topic", "baseline_len", "live_len"],
        as_json=json_out,
        title="Applied augmentations",
    )


@app.command("show")
def show_cmd(
    identifier: str = typer.Argument(..., help="Dotted name, e.g. builtins.sorted"),
    kind: DocKind = typer.Option(DocKind.CALLABLE, "--kind", "-k"),
    original: bool = typer.Option(False, "--original", help="Show the text before augmentation."),
) -> None:
    """Print the documentation of IDENTIFIER after applying the catalog."""
    appender = get_default_appender()
    try:
        # Baseline first so --original is the pre-augmentation text.
        baseline = appender.get_original(identifier, kind)
        apply_catalog(appender)
        text = baseline if original else (appender.registry.read(identifier, kind) or "")
    except DocSpineError as e:
        fail(e)
    if not text:
        console.print("[dim]No documentation.[/dim]")
        return
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command("list")
def list_cmd(
    topic: list[str] = typer.Option([], "--topic", "-t", help="Only these topics (repeatable)."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List catalog entries."""
    try:
        entries = entries_for(topic)
    except DocSpineError as e:
        fail(e)
    rows = [
        {
            "identifier": e.identifier,
            "kind": e.kind.value,
            "topic": e.topic,
            "chars": len(e.text),
        }
        for e in entries
    ]
    output_rows(rows, columns=["identifier", "kind", "topic", "chars"], as_json=json_out, title="Catalog")


def run() -> None:
    """Entry point for the ``docspine`` console script."""
    app()
