"""
Logging setup for the verification service.

Text or JSON lines on stdout, tagged with the current request ID.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.core.config import settings
from src.core.error_handling import request_id_var

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


class RequestIDFilter(logging.Filter):
    """Copy the request ID from the ContextVar onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record; non-ASCII text (e.g. Hebrew) is written as-is."""

    def __init__(self, include_request_id: bool = True):
        super().__init__()
        self.include_request_id = include_request_id

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_obj: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        request_id = getattr(record, "request_id", "-")
        if self.include_request_id and request_id != "-":
            log_obj["request_id"] = request_id

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False)


def build_formatter(log_format: str, include_request_id: bool) -> logging.Formatter:
    """Pick the formatter for LOG_FORMAT ("json" or anything else for text)."""
    if log_format.lower() == "json":
        return JSONFormatter(include_request_id)
    if include_request_id:
        return logging.Formatter(TEXT_LOG_FORMAT + " - request_id=%(request_id)s")
    return logging.Formatter(TEXT_LOG_FORMAT)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Route all logging to a single stdout handler.

    Args:
        level: Overrides LOG_LEVEL from settings
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(settings.LOG_FORMAT, settings.LOG_INCLUDE_REQUEST_ID))
    handler.addFilter(RequestIDFilter())

    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
