"""
Structured logging for smnotify.

Provides a pre-configured logger that emits JSON-structured log records
with resource context (resource, operation, region, instance).  Records
from one handler call share a ``request_id`` when the caller passes one.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Attach any extras injected via ResourceLogger.log_operation
        for key in ("request_id", "resource", "operation", "region", "instance_id"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class ResourceLogger:
    """Convenience wrapper around :mod:`logging` for resource handlers."""

    def __init__(self, name: str = "smnotify") -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        resource: str | None = None,
        operation: str | None = None,
        region: str | None = None,
        instance_id: str | None = None,
        request_id: str | None = None,
        exc_info: bool = False,
    ) -> None:
        """Emit a structured log record with resource context.

        Args:
            level: Logging level (e.g. logging.INFO).
            message: Human-readable message.
            resource: Resource type name (e.g. 'ibm_sm_en_registration').
            operation: Handler or SDK method name.
            region: Region of the targeted instance.
            instance_id: Secrets Manager instance ID.
            request_id: Optional correlation ID; auto-generated if omitted.
            exc_info: Whether to include exception info.
        """
        extra = {
            "resource": resource,
            "operation": operation,
            "region": region,
            "instance_id": instance_id,
            "request_id": request_id or uuid.uuid4().hex[:12],
        }
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.DEBUG, message, **kwargs)


# Module-level singleton
sm_logger = ResourceLogger()
