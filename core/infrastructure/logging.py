"""
Logging infrastructure.

Provides the log format and level setup shared by the API and workers.
"""
import logging
from typing import Union


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger once per process.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    if not any(getattr(h, "_epoxiron", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._epoxiron = True
        root.addHandler(handler)
    root.setLevel(level)

