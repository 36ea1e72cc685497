from __future__ import annotations

import logging
from copy import copy


class Formatter(logging.Formatter):
    """Colors the level name by severity and dims the logger name"""

    reset = "\x1b[0m"
    dim = "\x1b[38;5;147m"

    COLORS = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[38;5;117m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }

    def __init__(self, datefmt: str = "%H:%M:%S"):
        super().__init__(
            "[%(levelname)s @ %(asctime)s] (%(name)s) %(message)s", datefmt=datefmt
        )

    def format(self, record: logging.LogRecord) -> str:
        record = copy(record)
        if color := self.COLORS.get(record.levelno):
            record.levelname = f"{color}{record.levelname}{self.reset}"

        record.name = f"{self.dim}{record.name}{self.reset}"
        return super().format(record)
