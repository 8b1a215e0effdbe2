"""
Structured logging for store operations.

Provides a JSON formatter, a one-call setup for the API and CLI, and a
context manager that times each mutating operation.
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# Context variable for correlating log lines with the running operation
operation_var: ContextVar[str | None] = ContextVar("operation", default=None)


# -----------------------------------------------------------------------------
# JSON Formatter
# -----------------------------------------------------------------------------


class JSONFormatter(logging.Formatter):
    """
    Format log records as single-line JSON.

    Output format:
    {"timestamp": "...", "level": "INFO", "message": "...", "operation": "...", ...}
    """

    EXTRA_FIELDS = (
        "event",
        "duration_ms",
        "prompt_id",
        "version_id",
        "removed",
        "prompts",
        "versions",
        "settings",
    )

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        operation = operation_var.get()
        if operation:
            log_data["operation"] = operation

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(json_format: bool = False, level: str = "INFO") -> None:
    """
    Configure root logging.

    Args:
        json_format: If True, use JSON lines. If False, use human-readable format.
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# -----------------------------------------------------------------------------
# Context Managers
# -----------------------------------------------------------------------------


@contextmanager
def log_operation(operation: str, **fields: Any):
    """
    Log start and end of a store operation with its duration.

    Usage:
        with log_operation("create_prompt", prompt_id=pid):
            ...
    """
    token = operation_var.set(operation)
    start_time = time.time()
    logger = logging.getLogger("promptvault.operations")

    logger.debug(f"{operation} started", extra={"event": "operation_start", **fields})

    try:
        yield
        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"{operation} completed ({duration_ms}ms)",
            extra={"event": "operation_complete", "duration_ms": duration_ms, **fields},
        )
    except Exception as e:
        duration_ms = int((time.time() - start_time) * 1000)
        logger.error(
            f"{operation} failed: {e}",
            extra={"event": "operation_failed", "duration_ms": duration_ms, **fields},
            exc_info=True,
        )
        raise
    finally:
        operation_var.reset(token)
