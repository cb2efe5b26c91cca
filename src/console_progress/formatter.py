"""Build the progress line text from a fraction and the display settings."""

from __future__ import annotations

import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .config import DisplayConfig
from .state import ProgressState

NBSP = "\u00a0"
PERCENT_WIDTH = 4

# Longest duration shown; anything beyond (including inf) renders as this
MAX_DURATION_SECONDS = 99 * 3600 + 59 * 60 + 59


def format_progress_text(
    fraction: float,
    start_time: float,
    animation_index: int,
    config: DisplayConfig,
    now: Optional[float] = None,
) -> str:
    """Return the exact text of the progress line.

    Layout: ``[bar] pct spinner runtime (eta left)`` with every part
    optional. Runtime and ETA only appear while the task is running
    (0 < fraction < 1); the spinner disappears once fraction reaches 1.

    Args:
        fraction: Fraction complete in [0, 1]
        start_time: Clock value runtime is measured from
        animation_index: Spinner position, reduced modulo the sequence length
        config: Display settings
        now: Current clock value (defaults to time.monotonic())
    """
    if now is None:
        now = time.monotonic()

    running = 0.0 < fraction < 1.0
    elapsed = max(0.0, now - start_time)

    bar = ""
    if config.display_bar:
        blocks = config.number_of_blocks
        completed = min(blocks, int(fraction * blocks))
        bar = (
            config.start_bracket
            + config.completed_block * completed
            + config.incomplete_block * (blocks - completed)
            + config.end_bracket
            + " "
        )

    percent = ""
    if config.display_percent:
        # Fixed width keeps the cursor column steady as 9% becomes 10%
        percent = format_percent(fraction).rjust(PERCENT_WIDTH, NBSP) + " "

    spinner = ""
    sequence = config.animation_sequence
    if config.display_animation and sequence and fraction != 1.0:
        spinner = sequence[animation_index % len(sequence)]

    runtime = ""
    if config.display_runtime and running:
        runtime = " " + format_duration(elapsed, tenths=True)

    eta = ""
    if config.display_eta and running:
        remaining = (1.0 - fraction) * (elapsed / fraction)
        eta = f" ({format_duration(remaining)} left)"

    return (bar + percent + spinner + runtime + eta).rstrip()


def format_percent(fraction: float) -> str:
    """Whole-number percentage with halves rounded up (0.125 -> '13%')."""
    percent = Decimal(fraction * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{percent}%"


def format_duration(seconds: float, tenths: bool = False) -> str:
    """Render a duration as ``h:mm:ss[.f]`` without leading zero fields.

    >>> format_duration(5.37, tenths=True)
    '05.3'
    >>> format_duration(754)
    '12:34'
    >>> format_duration(3723)
    '1:02:03'
    """
    # max() first so NaN becomes 0
    seconds = min(max(0.0, seconds), MAX_DURATION_SECONDS)
    if tenths:
        total_tenths = int(seconds * 10)
        hours, rest = divmod(total_tenths, 36000)
        minutes, rest = divmod(rest, 600)
        secs, tenth = divmod(rest, 10)
        text = f"{hours}:{minutes:02d}:{secs:02d}.{tenth}"
    else:
        hours, rest = divmod(int(seconds), 3600)
        minutes, secs = divmod(rest, 60)
        text = f"{hours}:{minutes:02d}:{secs:02d}"

    for prefix in ("0:", "00:"):
        if text.startswith(prefix):
            text = text[len(prefix):]
    return text


class TextFormatter:
    """Formats the line for the render thread.

    Each :meth:`format` call reads a fresh snapshot and consumes one spinner
    position, so consecutive ticks animate even when progress stalls.
    """

    def __init__(self, state: ProgressState, config: DisplayConfig) -> None:
        self.state = state
        self.config = config

    def format(self) -> str:
        snapshot = self.state.snapshot()
        return format_progress_text(
            snapshot.fraction,
            snapshot.start_time,
            self.state.next_animation_index(),
            self.config,
            now=self.state.clock(),
        )
