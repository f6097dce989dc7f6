"""
utils.py
--------
Logging setup for the demo script and run timing for the Pipeline.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached once, by the application, through ``get_logger``.
"""

import logging
import time
import functools
from datetime import date
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _log_file(log_dir: str) -> Path:
    """Dated log file path inside log_dir, creating the directory."""
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"bsm_pipeline_{date.today():%Y%m%d}.log"


def get_logger(name: str, log_dir: Optional[str] = None,
               level: str = "INFO") -> logging.Logger:
    """Configure ``name`` for console output, plus a file when log_dir is set.

    Calling it again for a configured logger returns it untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_dir:
        handlers.append(logging.FileHandler(_log_file(log_dir)))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def timeit(func):
    """Log the wall time of each call at DEBUG on the function's module logger."""
    log = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            log.debug("%s completed in %.6f s", func.__qualname__,
                      time.perf_counter() - started)
    return wrapper
