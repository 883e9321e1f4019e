"""
Logging Configuration
=====================
The library itself only logs; it never decides where records go.

On import the package logger gets a :class:`logging.NullHandler`, so an
application that never configures logging sees nothing. Scripts and tests
that want to watch the numeric guards (zero-length normalization, division by
zero) call :func:`setup_logging`, which defaults to DEBUG since those are the
only records the engine emits.
"""
import logging
import sys
from typing import Optional, TextIO

from vectorarithmetic.config import LOGGER_NAME


def install_null_handler() -> logging.Logger:
    """Attaches a NullHandler to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def setup_logging(
    level: int = logging.DEBUG,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Routes the 'vectorarithmetic' records to a stream and optionally a file.

    Args:
        level: Logging level, DEBUG shows the degenerate-value records.
        log_file: Optional path to save logs to a file.
        stream: Output stream for the console handler, stdout by default.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replaces the NullHandler and any previous setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging to {len(logger.handlers)} handler(s) at level {logging.getLevelName(level)}.")
    return logger
