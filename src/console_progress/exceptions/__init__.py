"""Exception hierarchy for Console Progress."""

from .base import ConsoleProgressError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "ConsoleProgressError",
    "ConfigurationError",
    "InvalidConfigError",
]
