"""
Logging setup for applications embedding the key provider.
"""

import logging
from typing import Union

from .config.settings import LogLevel

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[LogLevel, str] = LogLevel.INFO) -> None:
    """Configure root logging. Does nothing if handlers already exist."""
    if isinstance(level, str):
        level = LogLevel(level.upper())

    logging.basicConfig(
        level=getattr(logging, level.value),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
