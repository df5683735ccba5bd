"""Centralized logging configuration for the images resizer."""

import os
import sys
import logging
import threading
from typing import Optional

# Workers call get_logger() from many threads at once.
_setup_lock = threading.Lock()


def setup_logger(
    name: str = "images-resizer",
    level: Optional[str] = None,
    format_type: str = "structured",
) -> logging.Logger:
    """
    Setup centralized logging with environment variable configuration.

    The handler and level are installed the first time a logger is set up;
    later calls return the same logger untouched unless ``level`` is given.

    Args:
        name: Logger name (defaults to "images-resizer")
        level: Log level override (defaults to env var or INFO)
        format_type: Logging format ("structured" or "simple")

    Returns:
        Configured logger instance

    Environment Variables:
        LOG_LEVEL: Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_FORMAT: Set format type ("structured" or "simple")
    """
    logger = logging.getLogger(name)

    with _setup_lock:
        if level:
            logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        # Avoid duplicate handlers
        if not logger.handlers:
            if not level:
                env_level = os.getenv("LOG_LEVEL", "INFO").upper()
                logger.setLevel(getattr(logging, env_level, logging.INFO))

            handler = logging.StreamHandler(sys.stderr)

            # Determine format from parameter or env var
            env_format = os.getenv("LOG_FORMAT", format_type).lower()

            if env_format == "structured":
                formatter = logging.Formatter(
                    "%(asctime)s | %(name)s | %(levelname)-8s | "
                    "%(threadName)s | %(funcName)s() | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            else:
                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )

            handler.setFormatter(formatter)
            logger.addHandler(handler)

        # Prevent duplicate log messages
        logger.propagate = False

    return logger


def get_logger(name: str = "images-resizer") -> logging.Logger:
    """
    Get a logger instance with consistent configuration.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return setup_logger(name)


def enable_debug_logging(*names: str) -> None:
    """Switch the given loggers (and the root logger) to DEBUG."""
    for name in names:
        setup_logger(name, level="DEBUG")
    logging.getLogger().setLevel(logging.DEBUG)


# Create default logger instance
logger = setup_logger()
