"""
Logging configuration for the services.

Sets up logging with a consistent format.
Logging must not change program behavior.
Never logs request bodies or resource payloads.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for a service process.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # httpx logs every request at INFO; downstream calls are logged by the client
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
