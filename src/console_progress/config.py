"""Display settings for the progress line.

Settings are merged in priority order:
    1. Defaults (defined in DisplayConfig)
    2. Environment variables (CONSOLE_PROGRESS_* prefix)
    3. Keyword overrides (typically from CLI flags)

The resulting DisplayConfig stays mutable: hosts may flip knobs while the
bar is running and the next render tick picks them up.

Example:
    >>> config = load_display_config(number_of_blocks=20, display_eta=True)
    >>> config.number_of_blocks
    20
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Optional, get_type_hints

from rich.color import Color, ColorParseError

from .animations import DEFAULT
from .exceptions import ConfigurationError, InvalidConfigError

# Eight redraws per second
RENDER_INTERVAL_SECONDS = 1.0 / 8

ENV_PREFIX = "CONSOLE_PROGRESS_"


@dataclass
class DisplayConfig:
    """What the progress line shows and how it is redrawn.

    Attributes:
        Bar graphic:
            number_of_blocks: Cells between the brackets (0 = brackets only)
            start_bracket / end_bracket: Strings framing the bar
            completed_block / incomplete_block: Glyphs for done / pending cells

        Optional fields:
            display_bar: Show the bar graphic
            display_percent: Show the percentage (always 4 cells wide)
            display_runtime: Show elapsed time while 0 < fraction < 1
            display_eta: Show estimated time left while 0 < fraction < 1
            display_animation: Show the spinner until the task completes
            animation_sequence: Spinner glyphs, cycled one per tick

        Redraw:
            redraw_whole_bar: Rewrite the full line from `column` each tick
                instead of diffing against what is on screen. Assumes the
                column stays valid; scrolling or wrapping breaks it.
            column: Screen column where the line starts
            foreground_color: Any rich color name/spec, None = terminal default
    """

    number_of_blocks: int = 10
    start_bracket: str = "["
    end_bracket: str = "]"
    completed_block: str = "#"
    incomplete_block: str = "-"
    animation_sequence: str = DEFAULT

    display_bar: bool = True
    display_percent: bool = True
    display_runtime: bool = False
    display_eta: bool = False
    display_animation: bool = True

    redraw_whole_bar: bool = False
    column: int = 0
    foreground_color: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the current values; raises InvalidConfigError."""
        if self.number_of_blocks < 0:
            raise InvalidConfigError(
                "number_of_blocks", self.number_of_blocks, "must be non-negative"
            )
        if self.column < 0:
            raise InvalidConfigError("column", self.column, "must be non-negative")
        if self.foreground_color is not None:
            try:
                Color.parse(self.foreground_color)
            except ColorParseError as e:
                raise InvalidConfigError("foreground_color", self.foreground_color, str(e))


def load_display_config(**overrides: Any) -> DisplayConfig:
    """Build a DisplayConfig from defaults, environment and overrides.

    Raises:
        ConfigurationError: Unknown setting or unparsable environment value
        InvalidConfigError: A value fails validation
    """
    merged: dict[str, Any] = {}
    merged.update(_load_env_vars())
    merged.update(overrides)

    try:
        return DisplayConfig(**merged)
    except TypeError as e:
        # Unknown field
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load settings from CONSOLE_PROGRESS_* environment variables.

    Examples:
        CONSOLE_PROGRESS_NUMBER_OF_BLOCKS=20
        CONSOLE_PROGRESS_DISPLAY_ETA=true
        CONSOLE_PROGRESS_FOREGROUND_COLOR=cyan
    """
    type_hints = get_type_hints(DisplayConfig)

    result: dict[str, Any] = {}

    for f in fields(DisplayConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid {env_key}: {e}", details={"value": env_value}
            )

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        if value == "" or value.lower() == "none":
            return None
        type_hint = next(t for t in args if t is not type(None))

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    return value
