"""Background render loop for the progress line."""

from __future__ import annotations

import enum
import logging
import threading

from .config import RENDER_INTERVAL_SECONDS
from .formatter import TextFormatter
from .renderer import DiffRenderer

logger = logging.getLogger(__name__)

# How long dispose() waits for the render thread to exit
JOIN_TIMEOUT_SECONDS = 2.0


class SchedulerState(enum.Enum):
    IDLE = "idle"
    ACTIVE = "active"
    DISPOSED = "disposed"


class RenderScheduler:
    """Redraws the line on a fixed cadence from one dedicated thread.

    The thread sleeps one interval, renders, and sleeps again, so a slow
    render delays the next tick instead of overlapping it. Ticks and
    disposal share one lock: a tick already running finishes, and none
    starts after :meth:`dispose` returns.

    Output that is not an interactive terminal keeps the scheduler IDLE
    for good, so piped or redirected output never fills up with
    backspaces.
    """

    def __init__(
        self,
        formatter: TextFormatter,
        renderer: DiffRenderer,
        interval: float = RENDER_INTERVAL_SECONDS,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")

        self.formatter = formatter
        self.renderer = renderer
        self.interval = interval

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._state = SchedulerState.IDLE

    @property
    def state(self) -> SchedulerState:
        with self._lock:
            return self._state

    def start(self) -> bool:
        """Begin ticking. Returns True if the render thread is running."""
        with self._lock:
            if self._state is not SchedulerState.IDLE:
                return self._state is SchedulerState.ACTIVE
            if not self.renderer.terminal.is_interactive:
                logger.debug("Output is not a terminal; progress rendering disabled")
                return False
            self._state = SchedulerState.ACTIVE

        self._thread = threading.Thread(
            target=self._run,
            name="console-progress-render",
            daemon=True,
        )
        self._thread.start()
        logger.debug("Render thread started (interval %.3fs)", self.interval)
        return True

    def tick(self) -> bool:
        """Run one render cycle. Returns False if nothing was rendered."""
        with self._lock:
            if self._state is not SchedulerState.ACTIVE:
                return False
            text = self.formatter.format()
            try:
                self.renderer.render(text)
            except (OSError, ValueError) as exc:
                # Closed or broken stream: drop this frame, retry next tick
                logger.debug("Progress render failed: %s", exc)
                return False
            return True

    def dispose(self) -> None:
        """Stop rendering. Safe to call repeatedly and from any thread."""
        with self._lock:
            if self._state is SchedulerState.DISPOSED:
                return
            self._state = SchedulerState.DISPOSED
            self._stop_event.set()

        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return

        thread.join(timeout=JOIN_TIMEOUT_SECONDS)
        if thread.is_alive():
            logger.warning(
                "Render thread did not exit within %.1f seconds", JOIN_TIMEOUT_SECONDS
            )
        else:
            logger.debug("Render thread stopped")

    def _run(self) -> None:
        last_failure = None
        while not self._stop_event.wait(self.interval):
            try:
                self.tick()
            except Exception as exc:
                failure = (type(exc), str(exc))
                if failure == last_failure:
                    logger.debug("Progress render tick failed again: %s", exc)
                else:
                    logger.exception("Progress render tick failed")
                last_failure = failure
            else:
                last_failure = None
