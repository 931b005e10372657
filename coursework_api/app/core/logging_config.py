"""
Root logger setup for the Coursework API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and, when it
is set, ``LOG_FILE`` from the settings.  Services and the client log
through ``logging.getLogger(__name__)`` and rely on the handlers
installed here; uvicorn keeps its own access log.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Install console and optional file handlers on the root logger.

    Does nothing if the root logger already has handlers, which is the
    case once the first app has been created (and under pytest, whose
    capture handler is already attached).  An unknown ``level`` name
    falls back to INFO.  ``logfile`` is resolved against the current
    working directory and appended to in UTF‑8.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
