"""CLI for the path editor - replay event scripts, export and inspect documents.

Usage:
    python -m pen_editor.cli replay events.json --out drawing.svg --png preview.png
    python -m pen_editor.cli normalize overlay.svg
    python -m pen_editor.cli info document.json
"""

import asyncio
from pathlib import Path as FilePath

import typer
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from pen_editor.files import EditorIOError, load_document, read_text_file, write_text_file
from pen_editor.logging_config import setup_dev_logging
from pen_editor.router import EditorController
from pen_editor.session import EditorSession
from pen_editor.svg import ensure_svg_dimensions, serialize_path
from pen_editor.types import Document, event_list_adapter

app = typer.Typer(
    name="pen-editor",
    help="CLI for the cubic Bezier path editor",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
) -> None:
    """Cubic Bezier path editor tools."""
    if verbose:
        setup_dev_logging()


def _paths_table(document: Document, title: str) -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Path", style="cyan", justify="right")
    table.add_column("Anchors", style="green", justify="right")
    table.add_column("Path data", style="dim")

    for i, path in enumerate(document.paths):
        d = serialize_path(path)
        if len(d) > 60:
            d = d[:57] + "..."
        table.add_row(str(i), str(len(path)), d or "-")
    return table


async def _replay_async(
    events_file: FilePath,
    out: FilePath | None,
    save: FilePath | None,
) -> EditorController:
    raw = await read_text_file(events_file)
    events = event_list_adapter.validate_json(raw)
    controller = EditorController(EditorSession())
    await controller.replay(events)
    if out is not None:
        await controller.export_to(out)
    if save is not None:
        await controller.save_document(save)
    return controller


@app.command("replay")
def replay(
    events_file: FilePath = typer.Argument(..., help="JSON list of editor events"),
    out: FilePath | None = typer.Option(None, "--out", "-o", help="Write SVG export here"),
    png: FilePath | None = typer.Option(None, "--png", help="Write a PNG preview here"),
    save: FilePath | None = typer.Option(None, "--save", help="Save the document as JSON"),
) -> None:
    """Replay an event script and export the result.

    Examples:
        pen-editor replay events.json
        pen-editor replay events.json -o drawing.svg --png preview.png
    """
    try:
        controller = asyncio.run(_replay_async(events_file, out, save))
    except EditorIOError as e:
        console.print(f"[red]File error: {e}[/red]")
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print(f"[red]Invalid event script: {e.error_count()} errors[/red]")
        raise typer.Exit(1) from e

    session = controller.session
    if png is not None:
        from pen_editor.rendering import RenderOptions, render_session

        options = RenderOptions(
            width=session.settings.canvas_width,
            height=session.settings.canvas_height,
            steps_per_unit=session.settings.path_steps_per_unit,
        )
        png.write_bytes(render_session(session, options))
        console.print(f"[green]Preview written to {png}[/green]")

    summary = session.summary()
    console.print(_paths_table(session.current_document, "Paths"))
    console.print(
        f"Mode: [cyan]{summary.mode.value}[/cyan]  "
        f"undo: {summary.undo_depth}  redo: {summary.redo_depth}"
    )
    if out is not None:
        console.print(f"[green]SVG written to {out}[/green]")
    elif not session.has_exportable_paths:
        console.print("[yellow]Nothing to export[/yellow]")
    else:
        console.print(session.export_svg(), markup=False, highlight=False)


@app.command("normalize")
def normalize(
    svg_file: FilePath = typer.Argument(..., help="SVG file to prepare as an overlay"),
    out: FilePath | None = typer.Option(None, "--out", "-o", help="Write result here"),
) -> None:
    """Add a default viewBox to an SVG that has none."""
    try:
        text = asyncio.run(read_text_file(svg_file))
        normalized = ensure_svg_dimensions(text)
        if out is not None:
            asyncio.run(write_text_file(out, normalized))
    except EditorIOError as e:
        console.print(f"[red]File error: {e}[/red]")
        raise typer.Exit(1) from e

    if out is not None:
        console.print(f"[green]Normalized SVG written to {out}[/green]")
    else:
        console.print(normalized, markup=False, highlight=False)


@app.command("info")
def info(
    document_file: FilePath = typer.Argument(..., help="Document JSON saved by replay --save"),
) -> None:
    """Show the paths of a saved document."""
    try:
        document = asyncio.run(load_document(document_file))
    except EditorIOError as e:
        console.print(f"[red]Failed to load document: {e}[/red]")
        raise typer.Exit(1) from e

    console.print(_paths_table(document, f"Document: {document_file.name}"))
    console.print(f"{len(document.paths)} paths, {document.anchor_count} anchors")


# Entry point
if __name__ == "__main__":
    app()
