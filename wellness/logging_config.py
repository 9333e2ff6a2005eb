"""
Logging configuration for the questionnaire service.
Every record carries the response id of the session being handled.
"""

import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime
from typing import Optional

# Response id of the questionnaire session in the current context
response_id_var: ContextVar[Optional[str]] = ContextVar("response_id", default=None)

_logging_configured = False


class ResponseIdFilter(logging.Filter):
    """Add the current response id to log records"""

    def filter(self, record):
        record.response_id = response_id_var.get() or "N/A"
        return True


class StructuredFormatter(logging.Formatter):
    """[TIMESTAMP] [LEVEL] [RESPONSE_ID] [LOGGER] MESSAGE"""

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        response_id = getattr(record, "response_id", "N/A")
        message = f"[{timestamp}] [{record.levelname}] [{response_id}] [{record.name}] {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure application-wide logging. Only the first call has an effect.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = StructuredFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ResponseIdFilter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ResponseIdFilter())
        root_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_response_id(response_id: Optional[str]) -> None:
    """Bind a response id to the current context for log records."""
    response_id_var.set(response_id)


def get_response_id() -> Optional[str]:
    return response_id_var.get()
