"""Package logger for stencil-docx.

Generation is silent by default. Each -v step reveals more of the pipeline:
component counts and the output path first, then per-component filtering and
prop counts, then debug output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels between the standard ones
PROGRESS_LEVEL = 25  # Between INFO (20) and WARNING (30) - for verbosity level 1
DETAILS_LEVEL = 15  # Between DEBUG (10) and INFO (20) - for verbosity level 2

logging.addLevelName(PROGRESS_LEVEL, "PROGRESS")
logging.addLevelName(DETAILS_LEVEL, "DETAILS")

VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_PROGRESS = 1  # Pipeline steps and output location
VERBOSITY_DETAILS = 2  # Per-component filtering decisions
VERBOSITY_DEBUG = 3  # Full debug output


class StencilDocxLogger(logging.Logger):
    """Logger with semantic verbosity methods.

    - progress(): -v 1, e.g. "Rendering 3 of 4 components", the .docx path written
    - details(): -v 2, e.g. components skipped by doc-tag, props documented per table
    - debug(): -v 3
    """

    def progress(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a generation step: component totals or the file being written."""
        if self.isEnabledFor(PROGRESS_LEVEL):
            self._log(PROGRESS_LEVEL, msg, args, **kwargs)

    def details(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a per-component decision: exclusion by doc-tag or props kept."""
        if self.isEnabledFor(DETAILS_LEVEL):
            self._log(DETAILS_LEVEL, msg, args, **kwargs)


def get_logger() -> StencilDocxLogger:
    """Get the stencil_docx logger instance (singleton).

    Use setup_logger() to configure it before first use.
    """
    logging.setLoggerClass(StencilDocxLogger)
    logger = logging.getLogger("stencil_docx")
    logging.setLoggerClass(logging.Logger)
    assert isinstance(logger, StencilDocxLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the stencil_docx logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (errors only), 1=progress, 2=details, 3=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.ERROR,
        VERBOSITY_PROGRESS: PROGRESS_LEVEL,
        VERBOSITY_DETAILS: DETAILS_LEVEL,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to a clean, silent state.

    Useful for testing to ensure clean state between tests.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)

