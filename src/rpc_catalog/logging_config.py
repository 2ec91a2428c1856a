"""Console and file logging for rpc-catalog runs."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "rpc_catalog"


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Send package log records to stderr, and to *log_file* when given.

    Handlers installed by an earlier call are closed and replaced.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # skip diagnostics stay out of the root logger's output
    logger.propagate = False
    return logger
