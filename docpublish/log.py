"""
log.py

Logging for docpublish. One named logger, "docpublish"; modules log through
children of it (docpublish.transport, docpublish.builder, ...).

Handlers:
    stdout   progress and INFO messages, message-only format
    stderr   WARNING and above (the diagnostic stream)
    file     optional, every record with a timestamp; truncated on setup
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "docpublish"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
BAR_LENGTH = 40

logger = logging.getLogger(LOGGER_NAME)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure console, diagnostic and (optionally) file logging.
    Safe to call more than once: handlers from a previous call are replaced.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler (minimal formatting)
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.addFilter(_BelowWarning())
    ch.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(ch)

    # Diagnostic stream
    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(logging.WARNING)
    eh.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(eh)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(fh)

    logger.propagate = False
    return logger


def section(title: str) -> None:
    """Log a section header with minimal formatting."""
    logger.info(f"\n[ {title} ]")


def step_progress(step: int, total: int, description: str) -> None:
    """
    Log a simple progress bar for a multi-step operation.
    `step` is the 1-based index of the current step.
    """
    filled = int((step / total) * BAR_LENGTH)
    bar = "#" * filled + " " * (BAR_LENGTH - filled)
    logger.info(f"Progress: [{bar}] Step {step}/{total} - {description}")
