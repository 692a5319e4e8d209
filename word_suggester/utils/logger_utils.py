# logger_utils.py - logging setup and timing helpers

import logging
import time
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

# file line format: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "word_suggester"


def setup_logging(level: Union[int, str] = logging.WARNING, path: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger once: rich console output, plus an optional
    log file. Calling it again replaces the previous handlers.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if path:
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(fh)

    logger.setLevel(level)
    logger.propagate = False
    return logger


class Log:
    """Metric helpers on top of the package logger."""

    _metrics = logging.getLogger(ROOT_LOGGER + ".metrics")

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts) at DEBUG level.
        Example: lookup_prefix done: 0.001s
        """
        Log._metrics.debug("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure how long a block takes:
            with Log.time_block("correct_spelling"):
                do_some_work()
        """
        return _Timer(label)


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 4), "s")
        return False
