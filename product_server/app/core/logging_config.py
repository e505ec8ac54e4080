"""
Logging setup for the server and the uvicorn process around it.

Everything goes through the root logger: the application modules log
via ``logging.getLogger(__name__)`` and uvicorn's own loggers are
stripped of their handlers so they propagate to the same console (and
optional file) handler with the same format and level.

The one exception to ``LOG_LEVEL`` is the startup line.  It is sent
through ``STARTUP_LOGGER``, which is pinned to INFO so that the bound
address is printed even when the server runs at WARNING or above.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

STARTUP_LOGGER = "product_server.startup"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def normalize_log_level(level: Optional[str]) -> str:
    """Return the canonical name of ``level``, or ``"INFO"`` if unknown.

    >>> normalize_log_level("warn")
    'WARNING'
    """
    numeric = logging.getLevelName((level or "").strip().upper())
    if not isinstance(numeric, int):
        return "INFO"
    return logging.getLevelName(numeric)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Route application and uvicorn logging to one set of handlers.

    Handlers are attached to the root logger only if it has none yet,
    so repeated calls (one per ``create_app``) do not duplicate output.
    Levels are applied on every call.
    """
    numeric_level = logging.getLevelName(normalize_log_level(level))

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_level)

    logging.getLogger(STARTUP_LOGGER).setLevel(logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
