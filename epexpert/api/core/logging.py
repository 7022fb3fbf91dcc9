"""Logging helpers for the EP-Expert service."""
from __future__ import annotations

import logging
import re
import time
from typing import Callable

from fastapi import FastAPI, Request

# French social security numbers (NIR) and phone numbers.
_RE_SENSITIVE = re.compile(
    r"(\b[12][ ]?\d{2}[ ]?\d{2}[ ]?(?:\d{2}|2[AB])[ ]?\d{3}[ ]?\d{3}(?:[ ]?\d{2})?\b"
    r"|\b0[1-9](?:[ .-]?\d{2}){4}\b)"
)


class PHIRedactor(logging.Filter):
    """Filter that redacts simple personal identifiers from log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if record.args:
            record.msg = record.getMessage()
            record.args = ()
        if isinstance(record.msg, str):
            record.msg = _RE_SENSITIVE.sub("[REDACTED]", record.msg)
        return True


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure global logging handlers."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    redactor = PHIRedactor()
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, PHIRedactor) for f in handler.filters):
            handler.addFilter(redactor)
    logging.getLogger("uvicorn.access").addFilter(redactor)


async def timing_middleware(request: Request, call_next: Callable):
    """Log HTTP request duration."""

    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logging.getLogger("epexpert.request").info(
        "%s %s -> %s in %.2f ms", request.method, request.url.path, response.status_code, duration_ms
    )
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(timing_middleware)
