"""Logging setup shared by the API server and the CLI."""

import logging
from typing import Union

from .config import LogLevel

LOG_FORMAT = "[ISL] %(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[LogLevel, str] = LogLevel.INFO) -> None:
    """Configure root logging for an ISLBridge process.

    Safe to call more than once; the last call wins.

    Args:
        level: LogLevel member or level name (e.g. "DEBUG")
    """
    if isinstance(level, LogLevel):
        level = level.value

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )
