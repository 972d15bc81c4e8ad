"""
Logging setup for the Pokemon Team API.

The service logs through the standard library: every module asks for
``logging.getLogger(__name__)`` and the root logger is configured here
once per process, from ``LOG_LEVEL`` and ``LOG_FILE``.  The same level
name is handed to uvicorn by ``run.py``, so ``resolve_level_name`` maps
anything unknown to ``INFO`` for both.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names understood by both ``logging`` and uvicorn's ``log_level``.
LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_level_name(level: str) -> str:
    """Return the upper‑case level name for ``level``, or ``"INFO"``.

    ``WARN`` is accepted as an alias of ``WARNING``.
    """
    name = (level or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    return name if name in LEVEL_NAMES else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optionally file) handlers to the root logger.

    Does nothing when the root logger already has handlers, e.g. when
    uvicorn configured it first or ``create_app`` runs a second time.

    Parameters
    ----------
    level : str
        Level name such as ``"debug"`` or ``"INFO"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record, in addition to the
        console.  The team itself is never written anywhere.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, resolve_level_name(level)))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
