"""Logging setup for the semantic_pen command-line tool.

The library only creates module loggers under the "semantic_pen" namespace;
handlers are installed here, by the CLI, never on import.
"""

import logging
import sys
from typing import Optional


logger = logging.getLogger("semantic_pen")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handler installed by setup_logging, replaced on each call
_stderr_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again replaces the previous handler instead of adding another.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The configured package logger
    """
    global _stderr_handler

    if _stderr_handler is not None:
        logger.removeHandler(_stderr_handler)

    _stderr_handler = logging.StreamHandler(sys.stderr)
    _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_stderr_handler)
    logger.setLevel(level.upper())
    return logger
