"""Spinner glyph sequences.

Each sequence is a plain string; the renderer shows one character per tick
and cycles through it by index. Every glyph is a single terminal cell wide.
"""

from __future__ import annotations

from .exceptions import InvalidConfigError

DEFAULT = "|/-\\"
DOTS = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
PULSE = "▁▂▃▄▅▆▇█▇▆▅▄▃▂"
ARROWS = "←↖↑↗→↘↓↙"
BOUNCE = "⠁⠂⠄⡀⢀⠠⠐⠈"
CIRCLE = "◐◓◑◒"

ANIMATIONS: dict[str, str] = {
    "default": DEFAULT,
    "dots": DOTS,
    "pulse": PULSE,
    "arrows": ARROWS,
    "bounce": BOUNCE,
    "circle": CIRCLE,
}


def get_animation(name: str) -> str:
    """Look up a named spinner sequence (case-insensitive)."""
    try:
        return ANIMATIONS[name.lower()]
    except KeyError:
        raise InvalidConfigError(
            "animation_sequence",
            name,
            f"unknown animation; choose one of: {', '.join(sorted(ANIMATIONS))}",
        ) from None
