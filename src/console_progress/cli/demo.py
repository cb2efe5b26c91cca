"""Demo commands: run a simulated task, list spinner animations."""

import logging
import time
from typing import Optional

import typer
from rich.table import Table

from ..animations import ANIMATIONS, get_animation
from ..config import load_display_config
from ..exceptions import ConsoleProgressError
from ..logging_config import setup_logging
from ..progress_bar import ConsoleProgressBar
from ..terminal import Terminal
from . import app
from ._common import console

logger = logging.getLogger(__name__)


@app.command()
def demo(
    duration: float = typer.Option(
        5.0,
        "--duration",
        "-d",
        help="Seconds the simulated task takes",
        min=0.0,
    ),
    steps: int = typer.Option(
        50,
        "--steps",
        "-n",
        help="Number of progress reports",
        min=1,
    ),
    label: str = typer.Option(
        "Working...",
        "--label",
        help="Text printed before the bar",
    ),
    blocks: Optional[int] = typer.Option(
        None,
        "--blocks",
        "-b",
        help="Number of cells in the bar",
        min=0,
    ),
    animation: Optional[str] = typer.Option(
        None,
        "--animation",
        "-a",
        help="Named spinner sequence (see `animations`)",
    ),
    color: Optional[str] = typer.Option(
        None,
        "--color",
        help="Foreground color (any rich color name)",
    ),
    bar: Optional[bool] = typer.Option(None, "--bar/--no-bar", help="Show the bar graphic"),
    percent: Optional[bool] = typer.Option(
        None, "--percent/--no-percent", help="Show the percentage"
    ),
    spinner: Optional[bool] = typer.Option(
        None, "--spinner/--no-spinner", help="Show the spinner"
    ),
    runtime: Optional[bool] = typer.Option(
        None, "--runtime/--no-runtime", help="Show elapsed time"
    ),
    eta: Optional[bool] = typer.Option(None, "--eta/--no-eta", help="Show time left"),
    redraw: Optional[bool] = typer.Option(
        None,
        "--redraw/--diff",
        help="Rewrite the whole line each tick instead of diffing",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also append log records to this file"
    ),
):
    """Run a simulated task and render its progress in place."""
    setup_logging(verbose=verbose, log_file=log_file)

    overrides = {
        "number_of_blocks": blocks,
        "foreground_color": color,
        "display_bar": bar,
        "display_percent": percent,
        "display_animation": spinner,
        "display_runtime": runtime,
        "display_eta": eta,
        "redraw_whole_bar": redraw,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    try:
        if animation is not None:
            overrides["animation_sequence"] = get_animation(animation)
        config = load_display_config(**overrides)
    except ConsoleProgressError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    terminal = Terminal(console)
    terminal.write(f"{label} ")

    start = time.monotonic()
    with ConsoleProgressBar(config, terminal=terminal) as progress:
        logger.debug("Demo started: %d steps over %.1fs", steps, duration)
        for i in range(steps):
            time.sleep(duration / steps)
            progress.report((i + 1) / steps)
        progress.refresh()
    terminal.write("\n")

    console.print(f"[green]Done[/green] in {time.monotonic() - start:.1f}s")


@app.command()
def animations():
    """List the named spinner sequences."""
    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Name", style="bold")
    table.add_column("Glyphs")

    for name, sequence in ANIMATIONS.items():
        table.add_row(name, " ".join(sequence))

    console.print(table)
