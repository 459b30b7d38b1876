"""Logging configuration for the CLI.

Progress and results are printed by :class:`dmget.ui.Reporter`; logging is
for diagnostics. By default only warnings reach the terminal. ``--verbose``
turns on DEBUG output through a :class:`rich.logging.RichHandler` on stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "dmget"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Safe to call more than once; previously installed handlers are replaced.

    Args:
        verbose: Emit DEBUG records instead of warnings only

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
