"""
Process-wide settings for the bridge.

Values come from the environment (a local `.env` is loaded first).  The report
call itself never reads them; they only shape logging.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

HOST_ENCODING = "utf-8"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_LOGGING_READY = False


def log_level() -> int:
    name = os.environ.get("DIRBRIDGE_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}' in DIRBRIDGE_LOG_LEVEL")
    return level


def init_logging() -> None:
    """Configure the root logger once per process; later calls do nothing."""
    global _LOGGING_READY
    if _LOGGING_READY:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = os.environ.get("DIRBRIDGE_LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file, "a", "utf-8"))

    logging.basicConfig(level=log_level(), format=LOG_FORMAT, handlers=handlers)
    _LOGGING_READY = True
