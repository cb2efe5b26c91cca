"""
Logging setup for the console-progress command line.

The library itself only creates module loggers under ``console_progress``
and leaves handlers to the host application. The CLI calls
:func:`setup_logging` so that render-thread diagnostics show up on stderr,
away from the progress line on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "console_progress"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a rich stderr handler (and optionally a file handler) to the
    package logger.

    Calling it again replaces the handlers it installed before, so a CLI
    invoked repeatedly in one process does not print each record twice.

    Args:
        verbose: Show DEBUG records, including swallowed render errors
        log_file: Optional path that also receives every record

    Returns:
        The ``console_progress`` logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_console_progress", False):
            logger.removeHandler(handler)
            handler.close()

    stderr_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=verbose,
    )
    handlers: list[logging.Handler] = [stderr_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(threadName)s %(name)s %(levelname)s %(message)s")
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler._console_progress = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
