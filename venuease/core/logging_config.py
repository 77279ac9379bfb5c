"""
Logging setup for the VenuEase backend.

Levels, format and the optional log file come from ``Settings``. Each call
to ``setup_logging`` replaces the root handlers, so it can be repeated.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "venuease.log"

FORMATS = {
    "simple": "%(levelname)s - %(name)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    "json": (
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
        '"line": %(lineno)d, "message": "%(message)s"}'
    ),
}

MODULE_LOG_LEVELS = {
    "venuease.core.query": "DEBUG",
    "venuease.server.api": "DEBUG",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncio": "WARNING",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file_dir: Optional[str] = None,
    enable_file: Optional[bool] = None,
) -> None:
    """Configure the root logger.

    Arguments left as ``None`` fall back to the matching ``Settings`` field
    (``VENUEASE_LOG_LEVEL``, ``LOG_FORMAT``, ``LOG_FILE_DIR``,
    ``ENABLE_FILE_LOGGING``). Unknown formats use ``detailed``.
    """
    # Deferred so importing core modules does not load server settings
    from venuease.server.core.config import settings

    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format
    file_dir = Path(log_file_dir or settings.log_file_dir)
    file_logging = settings.enable_file_logging if enable_file is None else enable_file

    formatter = logging.Formatter(FORMATS.get(fmt, FORMATS["detailed"]), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_logging:
        file_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
