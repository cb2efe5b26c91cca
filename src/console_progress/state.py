"""Thread-safe progress state shared by the host and the render thread."""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

# Fractions this close to 0 or 1 count as "task boundary": the runtime
# clock restarts so a reused bar measures the next task from scratch.
BOUNDARY_EPSILON = 0.001


@dataclass(frozen=True)
class ProgressSnapshot:
    """Fraction complete and the clock value runtime/ETA are measured from."""

    fraction: float
    start_time: float


class ProgressState:
    """Latest reported fraction, runtime origin and spinner counter.

    Thread-safe: host threads write via :meth:`report`, the render thread
    reads via :meth:`snapshot` and advances the spinner via
    :meth:`next_animation_index`. Every access holds the lock only for a
    few attribute reads or writes.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self._fraction = 0.0
        self._start_time = clock()
        self._animation_index = 0

    def report(self, value: float) -> None:
        """Store a new fraction complete, clamped into [0, 1]. Never raises."""
        value = float(value)
        if math.isnan(value):
            value = 0.0
        value = max(0.0, min(1.0, value))

        with self._lock:
            self._fraction = value
            if value < BOUNDARY_EPSILON or value > 1.0 - BOUNDARY_EPSILON:
                self._start_time = self._clock()

    def snapshot(self) -> ProgressSnapshot:
        with self._lock:
            return ProgressSnapshot(self._fraction, self._start_time)

    def next_animation_index(self) -> int:
        """Return the spinner index for this tick and advance it by one."""
        with self._lock:
            index = self._animation_index
            self._animation_index += 1
            return index

    @property
    def fraction(self) -> float:
        with self._lock:
            return self._fraction

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock
