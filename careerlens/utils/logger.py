"""
Application logging.

Console output is one JSON object per line on hosted environments (or with
LOG_FORMAT=json) and short readable lines locally. Every handler carries
CorrelationFilter, so anything logged while serving a request is stamped
with its X-Correlation-ID.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# extra={...} keys promoted to top-level JSON fields
REQUEST_FIELDS = ("method", "path", "status", "duration_ms", "client_ip", "error", "error_type")

# extra={...} keys written by the model invoker and metrics, nested under "ai"
AI_FIELDS = (
    "call_site", "outcome", "model", "prompt_chars", "response_chars",
    "missing_fields", "service", "operation",
)


class CorrelationFilter(logging.Filter):
    """Attach the current request's correlation id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            from careerlens.middleware.correlation import get_correlation_id
            record.correlation_id = get_correlation_id()
        return True


class StructuredFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        cid = getattr(record, "correlation_id", "")
        if cid:
            entry["correlation_id"] = cid

        entry.update({key: getattr(record, key) for key in REQUEST_FIELDS if hasattr(record, key)})

        ai = {key: getattr(record, key) for key in AI_FIELDS if getattr(record, key, None) is not None}
        if ai:
            entry["ai"] = ai

        if record.levelno >= logging.WARNING:
            entry["source"] = f"{record.filename}:{record.lineno}"

        if record.exc_info and record.exc_info[1]:
            exc = record.exc_info[1]
            entry["exception"] = {"type": type(exc).__name__, "message": str(exc)}

        return json.dumps(entry, default=str)


class SimpleFormatter(logging.Formatter):
    """Readable lines for a local terminal."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s - %(message)s", datefmt="%H:%M:%S")


def _wants_json() -> bool:
    return bool(os.getenv("RAILWAY_ENVIRONMENT")) or os.getenv("LOG_FORMAT", "").lower() == "json"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the "careerlens" logger once. Module loggers from
    get_logger() are its children and propagate here.

    LOG_TO_FILE=<path> additionally writes JSON lines to a rotating file.
    """
    root = logging.getLogger("careerlens")
    if root.handlers:
        return root

    level = level or os.getenv("LOG_LEVEL", "INFO")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(StructuredFormatter() if _wants_json() else SimpleFormatter())
    console.addFilter(CorrelationFilter())
    root.addHandler(console)

    log_file = os.getenv("LOG_TO_FILE")
    if log_file:
        try:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
            file_handler.setFormatter(StructuredFormatter())
            file_handler.addFilter(CorrelationFilter())
            root.addHandler(file_handler)
        except OSError as e:
            root.warning(f"File logging disabled ({log_file}): {e}")

    return root


logger = configure_logging()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"careerlens.{name}")
    return logger
