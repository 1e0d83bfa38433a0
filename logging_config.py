from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable, Iterator

from settings import get_settings

RECORD_CONTEXT_KEYS = (
    "path",
    "record_count",
    "byte_count",
    "index",
    "offset",
    "seed",
    "reason",
)

_configured = False


class RecordContextFormatter(logging.Formatter):
    """Appends ``key=value`` pairs for record-store context passed via ``extra=``."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        context_keys: Iterable[str] = RECORD_CONTEXT_KEYS,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.context_keys = tuple(context_keys)

    def _context(self, record: logging.LogRecord) -> Iterator[str]:
        for key in self.context_keys:
            value = record.__dict__.get(key)
            if value is not None:
                yield f"{key}={value}"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(self._context(record))
        return f"{message} | {context}" if context else message


def configure_logging(level: str | int | None = None) -> None:
    """Route application logs to stderr with record-store context appended."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "record_context": {
                    "()": "logging_config.RecordContextFormatter",
                    "fmt": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "record_context",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )

    _configured = True
