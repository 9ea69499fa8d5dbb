"""Logging configuration shared by the CLI, GUI and web front-ends."""

import logging
from typing import Union

from rich.logging import RichHandler


def configure_logging(level: Union[int, str] = "WARNING") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
