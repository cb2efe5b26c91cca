"""Incremental redraw of a single terminal line.

The renderer remembers what it last put on screen. To show new text it
backs the cursor up to the first character that differs, writes only the
new suffix, and blanks any leftover tail when the line got shorter:

    on screen:  [####------]  40% |
    new text:   [#####-----]  50% /
    written:    \\b x 14, "#-----]  50% /"

In full-redraw mode it instead jumps to the anchor column and rewrites the
whole line each time. That self-heals if something else scribbled over the
line, but assumes the anchor column is still valid: if the terminal
scrolled or the line wrapped, the rewrite lands in the wrong place.
"""

from __future__ import annotations

from .config import DisplayConfig
from .terminal import Terminal

BACKSPACE = "\b"


def common_prefix_length(a: str, b: str) -> int:
    """Number of leading characters `a` and `b` share."""
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[i] == b[i]:
        i += 1
    return i


class DiffRenderer:
    """Owns the on-screen text of the progress line.

    Only the render thread calls :meth:`render`; no other code writes to
    the line while a bar is active.
    """

    def __init__(self, terminal: Terminal, config: DisplayConfig) -> None:
        self.terminal = terminal
        self.config = config
        self._current_text = ""

    @property
    def current_text(self) -> str:
        return self._current_text

    def build_output(self, text: str) -> str:
        """Return the control/text sequence that turns the line into `text`."""
        current = self._current_text
        overhang = len(current) - len(text)

        if self.config.redraw_whole_bar:
            out = self.terminal.move_to_column(self.config.column) + text
        else:
            prefix = common_prefix_length(current, text)
            out = BACKSPACE * (len(current) - prefix) + text[prefix:]

        if overhang > 0:
            out += " " * overhang + BACKSPACE * overhang
        return out

    def render(self, text: str) -> None:
        """Make the visible line equal `text`, cursor right after it."""
        out = self.build_output(text)
        if out:
            start, end = self.terminal.color_codes(self.config.foreground_color)
            self.terminal.write(start + out + end)
        self._current_text = text

    def reset(self) -> None:
        """Forget the on-screen text, e.g. after the host printed a newline."""
        self._current_text = ""
