"""Logging configuration for pdftool.

All modules obtain their logger through ``get_logger(__name__)`` so records
land under the ``pdftool`` namespace. Library code never configures handlers
itself; applications embedding pdftool call ``setup_logging`` once.
"""

import logging
import sys

PACKAGE_LOGGER = "pdftool"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "pdftool-stream"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger whose records propagate to the ``pdftool`` logger.
    """
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger.

    Safe to call more than once: the stream handler is installed only once and
    later calls just adjust the level.

    Args:
        verbose: Emit DEBUG records (heading thresholds, line counts)
        quiet: Only emit WARNING and above. Takes precedence over verbose.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
