"""The one capability a progress consumer needs."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class ProgressSink(Protocol):
    """Anything that accepts a fraction complete in [0, 1]."""

    def report(self, value: float) -> None: ...


class CallbackSink:
    """Adapts a plain callable to :class:`ProgressSink`."""

    def __init__(self, callback: Callable[[float], None]) -> None:
        self.callback = callback

    def report(self, value: float) -> None:
        self.callback(value)
