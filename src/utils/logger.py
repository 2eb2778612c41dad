"""Centralized logging setup for the document analysis service.

All modules log through named loggers obtained from :func:`get_logger`;
the root logger is configured once at process start.
"""

import logging
import sys

_NOISY_LOGGERS = ("google", "grpc", "urllib3")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a standard format.

    Third-party client libraries are held at WARNING so request logs stay
    readable at DEBUG.

    Args:
        level: Logging level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(numeric_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger instance.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
    """
    return logging.getLogger(name)
