"""
Logging setup for the Placement Management API.

Console output always; a log file too when LOG_FILE is set.
Handlers are named so building the app again (tests, reload) reuses
them instead of stacking duplicates, and handlers installed by uvicorn
or pytest are left alone.
"""

import logging
import os
from typing import Optional

from placement_api.core.config import Settings, get_settings

CONSOLE_HANDLER = "placement_api.console"
FILE_HANDLER = "placement_api.file"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def _named_handler(root: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in root.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _log_path(settings: Settings) -> Optional[str]:
    return os.path.abspath(settings.log_file) if settings.log_file else None


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach the app's handlers to the root logger at ``settings.log_level``."""
    settings = settings or get_settings()
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if _named_handler(root, CONSOLE_HANDLER) is None:
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER)
        console.setFormatter(formatter)
        root.addHandler(console)

    existing_file = _named_handler(root, FILE_HANDLER)
    if existing_file is not None and getattr(existing_file, "baseFilename", None) != _log_path(settings):
        root.removeHandler(existing_file)
        existing_file.close()
        existing_file = None
    if settings.log_file and existing_file is None:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # SQL echo is controlled by DB_ECHO, not by the app log level
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO if settings.db_echo else logging.WARNING)

    return root

