from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from MASANIELLO.server.common.constants import LOG_FILENAME, LOGS_PATH

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# -----------------------------------------------------------------------------
def build_logger(name: str = "MASANIELLO", level: int = logging.INFO) -> logging.Logger:
    instance = logging.getLogger(name)
    if instance.handlers:
        return instance

    instance.setLevel(level)
    instance.propagate = False
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    instance.addHandler(stream_handler)

    try:
        os.makedirs(LOGS_PATH, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(LOGS_PATH, LOG_FILENAME),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError:
        # Read-only installs keep console output only
        return instance

    file_handler.setFormatter(formatter)
    instance.addHandler(file_handler)
    return instance


logger = build_logger()
