"""Raw terminal output for the progress line.

Text is written straight to the console's file, bypassing rich's markup
and wrapping, because the line relies on literal backspaces and
cursor-column escapes. rich still answers the capability questions:
whether output is a terminal, which colour system it speaks, how many
cells a string occupies.
"""

from __future__ import annotations

import re
import threading
from typing import Optional

from rich.cells import cell_len
from rich.color import Color, ColorSystem
from rich.console import Console
from rich.control import Control

# Cursor-to-column (CSI n G) sets the column; any other CSI sequence is
# treated as zero-width.
_CONTROL_RE = re.compile(r"\x1b\[(\d*)G|\x1b\[[0-9;?]*[A-Za-z]|[\b\r\n]")

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}

RESET_FOREGROUND = "\x1b[39m"


def advance_column(column: int, text: str) -> int:
    """Return the cursor column after writing `text` starting at `column`."""
    pos = 0
    for match in _CONTROL_RE.finditer(text):
        column += cell_len(text[pos : match.start()])
        pos = match.end()

        token = match.group(0)
        if token == "\b":
            column = max(0, column - 1)
        elif token in ("\r", "\n"):
            column = 0
        elif match.group(1) is not None:
            column = max(0, int(match.group(1) or 1) - 1)
    return column + cell_len(text[pos:])


class Terminal:
    """Write primitive with cursor-column bookkeeping.

    The tracked column only reflects text written through this object;
    output printed elsewhere on the same line is invisible to it.
    """

    def __init__(self, console: Optional[Console] = None, column: int = 0) -> None:
        self.console = console or Console()
        self._lock = threading.Lock()
        self._column = column

    @property
    def is_interactive(self) -> bool:
        """False when output is redirected to a file or pipe."""
        return self.console.is_terminal

    @property
    def cursor_column(self) -> int:
        with self._lock:
            return self._column

    def write(self, text: str) -> None:
        """Write raw text and flush. Errors from a closed stream propagate."""
        if not text:
            return
        file = self.console.file
        file.write(text)
        file.flush()
        with self._lock:
            self._column = advance_column(self._column, text)

    def move_to_column(self, column: int) -> str:
        return str(Control.move_to_column(column))

    def color_codes(self, color: Optional[str]) -> tuple[str, str]:
        """SGR sequences that set `color` and restore the default foreground.

        Returns empty strings when no colour is requested or the console
        has no colour support.
        """
        system = _COLOR_SYSTEMS.get(self.console.color_system or "")
        if color is None or system is None:
            return "", ""

        codes = Color.parse(color).downgrade(system).get_ansi_codes(foreground=True)
        return f"\x1b[{';'.join(codes)}m", RESET_FOREGROUND
