# logger_utils.py - logging setup and timing metrics

import logging
import time
from typing import Optional

from rich.logging import RichHandler

PACKAGE_LOGGER = "khmer_transliterator"
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"

_handlers = []


def setup_logging(level="WARNING", path: Optional[str] = None) -> logging.Logger:
    """
    Attach console (rich) and optional file handlers to the package logger.
    Calling it again replaces the handlers installed by the previous call.
    Library modules only ever call logging.getLogger(__name__).
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    for h in _handlers:
        root.removeHandler(h)
        h.close()
    _handlers.clear()

    console = RichHandler(show_path=False, rich_tracebacks=True)
    console.setFormatter(logging.Formatter("%(message)s"))
    _handlers.append(console)

    if path:
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        _handlers.append(fh)

    for h in _handlers:
        root.addHandler(h)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.propagate = False
    return root


class Log:
    """Small helpers on top of the package logger."""

    logger = logging.getLogger(PACKAGE_LOGGER)

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts).
        Example: "dataset load done: 0.041s"
        """
        Log.logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("dataset load"):
                load_dataset()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
