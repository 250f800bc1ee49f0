# -*- coding: utf-8 -*-
"""
Application logging.

Everything goes to a size-rotated file under Config.LOGS_DIR; INFO and
above is echoed to stdout. Modules log through children of the
"propdesk" logger obtained with `get_logger(__name__)`.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "propdesk"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_root: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """(Re)configure the application logger and return it."""
    global _root

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)

    _root = root
    return root


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, configuring it on first use."""
    if _root is None:
        setup_logger()
    return _root.getChild(name)
