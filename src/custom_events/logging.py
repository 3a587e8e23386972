"""Structured JSON logging helpers for custom events."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging import Logger
from typing import Protocol

_LOGGER_NAME = "custom_events"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        payload = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "source"):
            payload["source"] = getattr(record, "source")
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str | None = None) -> Logger:
    """Return a module level logger configured for structured JSON output."""

    logger_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        # Honor LOG_LEVEL env, default INFO
        level = os.environ.get("LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


class Diagnostics(Protocol):
    """Callable signature for the diagnostic sink used by events."""

    def __call__(self, message: str, level: str, source: str) -> None:  # pragma: no cover - Protocol
        ...


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log_diagnostic(message: str, level: str = "info", source: str = "Event") -> None:
    """Route a diagnostic message to the logger named after ``source``."""

    logger = get_logger(source.lower() if source else None)
    logger.log(_LEVELS.get(level.lower(), logging.INFO), message, extra={"source": source})


def null_diagnostics(message: str, level: str = "info", source: str = "Event") -> None:
    """Discard diagnostics."""


__all__ = [
    "Diagnostics",
    "get_logger",
    "log_diagnostic",
    "null_diagnostics",
]
