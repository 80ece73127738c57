"""
Logging configuration for the Task Tracker API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Application
modules log through ``logging.getLogger(__name__)``; chatty third-party
loggers (HTTP access lines, connection pools) are kept at WARNING unless
the application itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "urllib3")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    noisy_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (``"DEBUG"``, ``"INFO"``...).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives a copy of every record.
    noisy_loggers : Iterable[str]
        Logger names capped at WARNING when ``level`` is above DEBUG.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (test runner, uvicorn, second create_app call).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in noisy_loggers:
            logging.getLogger(name).setLevel(logging.WARNING)
