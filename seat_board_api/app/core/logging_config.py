"""
Logging configuration for the API process.

``setup_logging`` applies ``LOG_LEVEL`` and ``LOG_FILE`` from the
settings to the root logger and to uvicorn's own loggers, so one level
and one format govern both the application and the server.  uvicorn is
started with ``log_config=None`` (see ``run.py``) and its records
propagate to the root handlers installed here.

Calling ``setup_logging`` again re-applies the level but never adds a
second handler for the same destination.
"""

import logging
from pathlib import Path

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "uvicorn.asgi")

# Attribute marking handlers installed by this module; the value is the
# handler's destination ("console" or a resolved file path).
HANDLER_TAG = "seat_board_destination"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _install(root: logging.Logger, destination: str, handler: logging.Handler) -> None:
    if any(getattr(h, HANDLER_TAG, None) == destination for h in root.handlers):
        handler.close()
        return
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, HANDLER_TAG, destination)
    root.addHandler(handler)


def setup_logging(settings: Settings) -> int:
    """Configure the root and server loggers from ``settings``.

    Returns the numeric level so the caller can hand the same value to
    uvicorn.
    """
    level = resolve_level(settings.log_level)
    root = logging.getLogger()
    root.setLevel(level)

    _install(root, "console", logging.StreamHandler())
    if settings.log_file:
        log_path = str(Path(settings.log_file).resolve())
        if not any(getattr(h, HANDLER_TAG, None) == log_path for h in root.handlers):
            _install(root, log_path, logging.FileHandler(log_path, encoding="utf-8"))

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)

    return level
