"""
Root logger setup for the Base ID service.

Both ``create_app`` and ``python -m baseid`` call ``setup_logging``; when
uvicorn or pytest already installed handlers the call leaves them alone.
Record lookups, writes and store failures are logged through
module-level loggers (``logging.getLogger(__name__)``).
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send service logs to stderr and, when LOG_FILE is set, to that file.

    Unknown level names fall back to ``INFO``.  The log file's directory
    is created if needed.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
