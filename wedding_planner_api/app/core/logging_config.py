"""
Logging configuration for the Wedding Planner API.

``setup_logging`` attaches a console handler (and optionally a
rotating file handler) to the root logger the first time it is
called.  Application modules log through ``logging.getLogger(__name__)``
so every record ends up with the ``wedding_planner_api.*`` logger name.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name for the root logger (e.g. ``"DEBUG"``,
        ``"INFO"``).  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  The file is rotated at 1 MB with three
        backups.  Omit to log to the console only.
    debug : bool
        When true the ``wedding_planner_api`` loggers emit DEBUG records
        regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(), maxBytes=1_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if debug:
        logging.getLogger("wedding_planner_api").setLevel(logging.DEBUG)
