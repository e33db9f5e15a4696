from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Callable

from opentelemetry import trace

from fos.api.middleware.request_id import get_request_id

MAX_LOGGED_MESSAGE_LENGTH = 500

_configured = False


def mask_email(value: Any) -> str:
    text = str(value)
    local, at, domain = text.partition("@")
    if not at:
        return "***"
    return f"{local[:1]}***@{domain}"


def _truncate(value: Any) -> str:
    text = str(value)
    if len(text) <= MAX_LOGGED_MESSAGE_LENGTH:
        return text
    return text[:MAX_LOGGED_MESSAGE_LENGTH] + "..."


def _as_is(value: Any) -> Any:
    return value


# Record attribute -> how it is rendered in the JSON line
_EXTRA_FIELDS: dict[str, Callable[[Any], Any]] = {
    "method": _as_is,
    "path": _as_is,
    "status_code": _as_is,
    "duration_ms": _as_is,
    "order_id": _as_is,
    "cart_size": _as_is,
    "page": _as_is,
    "contact_name": _as_is,
    "contact_email": mask_email,
    "contact_message": _truncate,
}


def _span_ids() -> dict[str, str | None]:
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return {"trace_id": None, "span_id": None}
    return {
        "trace_id": format(span_context.trace_id, "032x"),
        "span_id": format(span_context.span_id, "016x"),
    }


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": get_request_id(),
            **_span_ids(),
        }
        for field, render in _EXTRA_FIELDS.items():
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = render(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str | None = None) -> None:
    """Install the JSON handler on the root logger once per process."""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())

    # AccessLogMiddleware already emits one line per request.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _configured = True
