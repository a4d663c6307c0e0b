"""Structured JSON logging for handlers, services and parsers."""

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "support-desk-api"
LOG_FORMAT = "%(levelname)s %(name)s %(message)s %(asctime)s"


def _level(level: Optional[str]) -> str:
    return (level or os.environ.get("LOG_LEVEL") or "INFO").upper()


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Every record carries the service name and ENVIRONMENT; fields passed via
    ``extra=`` (ticket ids, import counts, correlation ids) land as top-level
    keys. The level comes from LOG_LEVEL unless given explicitly.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        LOG_FORMAT,
        rename_fields={"levelname": "level", "asctime": "timestamp"},
        static_fields={
            "service": SERVICE_NAME,
            "environment": os.environ.get("ENVIRONMENT", "dev"),
        },
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(_level(level))
    logger.propagate = False
    return logger
