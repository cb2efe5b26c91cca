"""Shared test fixtures for Console Progress tests."""

import io
import re

import pytest
from rich.console import Console

from console_progress.terminal import Terminal

_TOKEN_RE = re.compile(r"\x1b\[(\d*)G|\x1b\[[0-9;]*m|\x08|.", re.DOTALL)


class Screen:
    """Replays a terminal byte stream onto a single line.

    Understands printable characters, backspace, cursor-to-column and SGR
    colour codes, which is everything the progress line emits.
    """

    def __init__(self) -> None:
        self.cells: list[str] = []
        self.column = 0

    def feed(self, data: str) -> "Screen":
        for match in _TOKEN_RE.finditer(data):
            token = match.group(0)
            if match.group(1) is not None:
                self.column = max(0, int(match.group(1) or 1) - 1)
            elif token.startswith("\x1b"):
                continue
            elif token == "\b":
                self.column = max(0, self.column - 1)
            else:
                while len(self.cells) <= self.column:
                    self.cells.append(" ")
                self.cells[self.column] = token
                self.column += 1
        return self

    @property
    def line(self) -> str:
        """Visible text with trailing blanks removed."""
        return "".join(self.cells).rstrip(" ")


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_console(interactive: bool = True, color_system="standard") -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=interactive,
        color_system=color_system,
        width=120,
        legacy_windows=False,
    )


def output_of(terminal: Terminal) -> str:
    return terminal.console.file.getvalue()


def screen_of(terminal: Terminal) -> Screen:
    return Screen().feed(output_of(terminal))


@pytest.fixture
def terminal():
    """Interactive terminal writing to an in-memory buffer."""
    return Terminal(make_console())


@pytest.fixture
def redirected_terminal():
    """Terminal whose output is not a tty (e.g. piped to a file)."""
    return Terminal(make_console(interactive=False))


@pytest.fixture
def clock():
    return FakeClock()
