"""
Console Progress - animated, in-place progress line for terminals.

Reports from any thread, redraws eight times a second from one background
thread, and rewrites only the characters that changed.
"""

__version__ = "0.1.0"

from .config import DisplayConfig, load_display_config
from .formatter import TextFormatter, format_progress_text
from .progress_bar import ConsoleProgressBar
from .protocols import CallbackSink, ProgressSink
from .renderer import DiffRenderer
from .scheduler import RenderScheduler, SchedulerState
from .state import ProgressSnapshot, ProgressState
from .terminal import Terminal

__all__ = [
    "ConsoleProgressBar",  # Main entry point
    "DisplayConfig",
    "load_display_config",
    "ProgressSink",
    "CallbackSink",
    "ProgressState",
    "ProgressSnapshot",
    "TextFormatter",
    "format_progress_text",
    "DiffRenderer",
    "RenderScheduler",
    "SchedulerState",
    "Terminal",
]
