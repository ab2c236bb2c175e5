"""
clipwatch.cli
Command line entry point for watching the system clipboard.

Commands:
- watch: Poll the clipboard and print every new history entry.
- settings: Print the resolved ClipboardHistorySettings.
"""

import threading
from typing import Optional

import typer  # pyright: ignore[reportMissingImports]
from rich.console import Console  # pyright: ignore[reportMissingImports]
from rich.table import Table  # pyright: ignore[reportMissingImports]

from clipwatch.clipboard import SystemClipboard
from clipwatch.config import ClipboardHistorySettings, get_settings
from clipwatch.logger import configure_logging
from clipwatch.models.history_entry import HistoryEntry
from clipwatch.services.watcher import ClipboardWatcher

console = Console(
    width=120,
    color_system="auto",
)

app = typer.Typer(name="clipwatch", help="Clipboard history watcher.")


def _history_table(history: tuple[HistoryEntry, ...]) -> Table:
    table = Table(title="Clipboard History")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Content")
    table.add_column("Copied At", style="green")
    for index, entry in enumerate(history):
        summary = entry.summary
        table.add_row(str(index), summary["kind"], summary["label"], summary["created_at"])
    return table


@app.command(name="watch", help="Watch the system clipboard and print new entries.")
def watch(
    capacity: Optional[int] = typer.Option(None, min=0, help="History capacity."),
    preview_height: Optional[int] = typer.Option(
        None, min=1, help="Image preview height in pixels."
    ),
    interval: Optional[float] = typer.Option(None, min=0.01, help="Poll interval in seconds."),
    cycles: Optional[int] = typer.Option(
        None, min=1, help="Stop after this many polls. Runs until interrupted by default."
    ),
):
    base = get_settings(ClipboardHistorySettings)
    overrides = {
        key: value
        for key, value in (
            ("capacity", capacity),
            ("preview_height", preview_height),
            ("poll_interval", interval),
        )
        if value is not None
    }
    settings = base.model_copy(update=overrides)
    logger = configure_logging(settings)

    def _print_history(history: tuple[HistoryEntry, ...]) -> None:
        console.print(_history_table(history))

    watcher = ClipboardWatcher(
        SystemClipboard(logger=logger),
        settings=settings,
        on_change=_print_history,
        logger=logger,
    )
    stop_event = threading.Event()
    console.print("[bold green]Watching the clipboard. Press Ctrl+C to stop.[/bold green]")
    try:
        watcher.run(stop_event, max_cycles=cycles)
    except KeyboardInterrupt:
        stop_event.set()
    finally:
        watcher.store.close()
    console.print("[bold green]Stopped.[/bold green]")


@app.command(name="settings", help="Print the resolved clipboard history settings.")
def show_settings():
    settings = get_settings(ClipboardHistorySettings)
    table = Table(title="ClipboardHistorySettings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise e
