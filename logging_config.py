"""Logging setup for the Belote host.

- Engine modules only create module loggers; handlers are installed here, by
  the host, never by the library.
- File logs are UTF-8 and rotate.
- Console output goes through ``rich`` and is off unless asked for.
- Calling ``setup_logging()`` again updates the handlers it installed
  instead of adding new ones.

Usage:
    from logging_config import setup_logging
    setup_logging(level="DEBUG", enable_console=True)

Environment overrides:
    BELOTE_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    BELOTE_LOG_FILE=path/to/file.log
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

_FILE_HANDLER_NAME = "belote_file"
_CONSOLE_HANDLER_NAME = "belote_console"
DEFAULT_LOG_FILE = Path("logs") / "belote.log"


def parse_level(level: str | int) -> int:
    """Level name or number to a logging level; unknown names map to INFO."""
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    value = logging.getLevelName(name) if name else logging.INFO
    return value if isinstance(value, int) else logging.INFO


def _resolve_log_path(log_file: str | None) -> Path:
    path = Path(log_file) if log_file else DEFAULT_LOG_FILE
    if not path.is_absolute():
        path = Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: str | None = None,
    enable_file: bool = True,
    enable_console: bool = False,
    console_level: str | int = "WARNING",
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the root logger and return it."""
    level = os.environ.get("BELOTE_LOG_LEVEL") or level
    log_file = os.environ.get("BELOTE_LOG_FILE") or log_file

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers filter

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    installed = {getattr(h, "name", ""): h for h in root.handlers}

    log_path = None
    if enable_file:
        log_path = _resolve_log_path(log_file)
        file_handler = installed.get(_FILE_HANDLER_NAME)
        if file_handler is None:
            file_handler = RotatingFileHandler(
                str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.name = _FILE_HANDLER_NAME
            root.addHandler(file_handler)
        file_handler.setFormatter(fmt)
        file_handler.setLevel(parse_level(level))

    if enable_console:
        console_handler = installed.get(_CONSOLE_HANDLER_NAME)
        if console_handler is None:
            console_handler = RichHandler(show_path=False, rich_tracebacks=True)
            console_handler.name = _CONSOLE_HANDLER_NAME
            root.addHandler(console_handler)
        console_handler.setLevel(parse_level(console_level))

    logging.getLogger(__name__).info(
        "Logging ready | level=%s file=%s console=%s",
        level,
        log_path,
        enable_console,
    )
    return root
