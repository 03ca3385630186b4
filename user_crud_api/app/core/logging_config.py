"""
Root logger setup for the service.

Called once from ``create_app``; later calls are no-ops so that tests
and ASGI servers which already installed handlers keep them.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send records at ``level`` and above to stderr and, if given, ``logfile``.

    ``level`` is a case-insensitive level name; unknown names mean INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_resolve_level(level))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
