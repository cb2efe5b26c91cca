"""In-place animated progress line for long-running console tasks.

Example:
    >>> with ConsoleProgressBar() as bar:
    ...     for i, item in enumerate(items):
    ...         process(item)
    ...         bar.report((i + 1) / len(items))
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from .config import RENDER_INTERVAL_SECONDS, DisplayConfig
from .formatter import TextFormatter
from .renderer import DiffRenderer
from .scheduler import RenderScheduler, SchedulerState
from .state import ProgressState
from .terminal import Terminal


class _ConfigField:
    """Exposes a DisplayConfig field as a validated property of the bar."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return getattr(obj.config, self.name)

    def __set__(self, obj: Any, value: Any) -> None:
        old = getattr(obj.config, self.name)
        setattr(obj.config, self.name, value)
        try:
            obj.config.validate()
        except Exception:
            setattr(obj.config, self.name, old)
            raise


class ConsoleProgressBar:
    """Single-line progress indicator redrawn in place eight times a second.

    Host threads call :meth:`report` whenever progress changes; a background
    thread renders the latest value on its own cadence, so reporting never
    waits on terminal I/O. Rendering starts on construction unless output
    is redirected, in which case the bar stays silent.

    The render column is anchored to the terminal's cursor column at
    construction; assign :attr:`column` afterwards to move it.
    """

    number_of_blocks = _ConfigField()
    start_bracket = _ConfigField()
    end_bracket = _ConfigField()
    completed_block = _ConfigField()
    incomplete_block = _ConfigField()
    animation_sequence = _ConfigField()
    display_bar = _ConfigField()
    display_percent = _ConfigField()
    display_runtime = _ConfigField()
    display_eta = _ConfigField()
    display_animation = _ConfigField()
    redraw_whole_bar = _ConfigField()
    column = _ConfigField()
    foreground_color = _ConfigField()

    def __init__(
        self,
        config: Optional[DisplayConfig] = None,
        terminal: Optional[Terminal] = None,
        interval: float = RENDER_INTERVAL_SECONDS,
        autostart: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or DisplayConfig()
        self.terminal = terminal or Terminal()
        self.config.column = self.terminal.cursor_column

        self.state = ProgressState(clock=clock)
        self.formatter = TextFormatter(self.state, self.config)
        self.renderer = DiffRenderer(self.terminal, self.config)
        self.scheduler = RenderScheduler(self.formatter, self.renderer, interval=interval)

        if autostart:
            self.scheduler.start()

    def report(self, value: float) -> None:
        """Record progress (clamped into [0, 1]). Never blocks on rendering."""
        self.state.report(value)

    def start(self, inline: bool = True) -> "ConsoleProgressBar":
        """Anchor the line at the current cursor column when `inline`."""
        if inline:
            self.config.column = self.terminal.cursor_column
        return self

    def refresh(self) -> None:
        """Render the latest progress now instead of waiting for the next tick."""
        if self.is_rendering:
            self.scheduler.tick()

    @property
    def is_rendering(self) -> bool:
        return self.scheduler.state is SchedulerState.ACTIVE

    @property
    def disposed(self) -> bool:
        return self.scheduler.state is SchedulerState.DISPOSED

    def dispose(self) -> None:
        """Halt rendering. Idempotent and safe from any thread."""
        self.scheduler.dispose()

    close = dispose

    def __enter__(self) -> "ConsoleProgressBar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
