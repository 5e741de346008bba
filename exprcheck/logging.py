"""
Logging configuration.

Console output goes to stderr so that stdout only carries reports. Records
logged through a ContextLogger carry a ``context`` dict (the expression being
checked, counters) which both formatters append to the message.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from .config import Settings, get_settings


def _context(record: logging.LogRecord) -> dict[str, Any]:
    return getattr(record, "context", None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class TextFormatter(logging.Formatter):
    """``time level logger: message key=value ...``"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s%(context_text)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        pairs = " ".join(f"{key}={value!r}" for key, value in _context(record).items())
        record.context_text = f" {pairs}" if pairs else ""
        return super().format(record)


def _attach(handler: logging.Handler, formatter: logging.Formatter, level: int) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure the root logger from LOG_LEVEL, LOG_FORMAT and LOG_FILE."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    formatter = StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter()

    handlers = [_attach(logging.StreamHandler(sys.stderr), formatter, level)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_attach(logging.FileHandler(log_path), formatter, level))

    logging.basicConfig(level=level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """
    Logger bound to a fixed context.

    Per-call context can be added with the ``context`` keyword:

        logger = get_context_logger(__name__, expression="1+2")
        logger.info("Parsed", context={"valid": True})
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        context = {**self.extra, **kwargs.pop("context", {})}
        kwargs["extra"] = {**kwargs.get("extra", {}), "context": context}
        return msg, kwargs


def get_context_logger(name: str, **context: Any) -> ContextLogger:
    return ContextLogger(get_logger(name), context)
