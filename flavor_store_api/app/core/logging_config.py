"""
Logging setup for the flavor store.

Records from every ``flavor_store_api`` module go to the root logger,
which prints them to the console and, when ``LOG_FILE`` is set, also
appends them to that file.  Setup runs once per process: tests build
a new application per case and must not stack duplicate handlers.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach console (and optional file) handlers to the root logger.

    ``level`` is a level name such as ``"debug"``; unknown names fall
    back to ``INFO``.  Returns ``False`` without touching anything when
    the root logger already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
