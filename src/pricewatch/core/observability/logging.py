"""Logging configuration."""

from __future__ import annotations

import logging
import os
import sys
from decimal import Decimal
from typing import Any

from pythonjsonlogger import jsonlogger

# ``extra`` keys that carry prices; Decimal values are written as exact strings.
PRICE_FIELDS = ("price", "previous")


class PriceWatchJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter tagging every record with the service and environment."""

    def __init__(self, *args: Any, environment: str = "development", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.environment = environment

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record.setdefault("service", "pricewatch")
        log_record.setdefault("environment", self.environment)
        for key in PRICE_FIELDS:
            value = log_record.get(key)
            if isinstance(value, Decimal):
                log_record[key] = format(value, "f")


def setup_logging(level: str = "INFO", environment: str = "development") -> None:
    """Configure the root logger.

    JSON lines on stdout by default; set ``LOG_FORMAT=text`` for Rich console
    output during local development.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if os.environ.get("LOG_FORMAT", "json").lower() == "text":
        from rich.logging import RichHandler

        root_logger.addHandler(
            RichHandler(rich_tracebacks=True, markup=False, show_path=False)
        )
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            PriceWatchJsonFormatter(
                "%(timestamp)s %(level)s %(name)s %(message)s",
                json_ensure_ascii=False,
                environment=environment,
            )
        )
        root_logger.addHandler(handler)

    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


__all__ = ["PRICE_FIELDS", "PriceWatchJsonFormatter", "setup_logging"]
