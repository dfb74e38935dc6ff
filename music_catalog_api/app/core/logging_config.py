"""
Logging configuration for the catalog service.

``setup_logging`` installs one formatter for the whole process: the
root logger (used by every ``music_catalog_api`` module through
``logging.getLogger(__name__)``) and the ``uvicorn``, ``uvicorn.error``
and ``uvicorn.access`` loggers, which uvicorn otherwise configures with
its own format.  The uvicorn loggers are switched to propagate to the
root logger, so access lines end up in the same console stream and
log file (``LOG_FILE``) as the service's own messages, at the level
given by ``LOG_LEVEL``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _route_server_loggers(level: int) -> None:
    # Drop uvicorn's own handlers and let records reach the root handlers.
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(level)
        server_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root and uvicorn loggers.

    Handlers are attached to the root logger only once per process;
    the uvicorn loggers are re-routed on every call because uvicorn
    reinstalls its handlers when a server starts.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a file receiving the same records as the console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    _route_server_loggers(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
