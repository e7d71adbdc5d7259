"""Logging helpers with request correlation."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

from flask import Flask, g, request

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SERVICE_LOGGER = "unit_converter_service"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the service logger, or a child of it when ``name`` is given."""

    logger = logging.getLogger(SERVICE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if name:
        return logger.getChild(name)
    return logger


def configure_level(level: str | int) -> None:
    """Apply ``level`` to the service logger, ignoring unknown level names."""

    resolved = logging.getLevelName(level) if isinstance(level, str) else level
    if isinstance(resolved, int):
        get_logger().setLevel(resolved)


def _request_context() -> dict[str, Any]:
    return {
        "request_id": getattr(g, "request_id", "-"),
        "path": request.path,
        "method": request.method,
    }


def install_request_logging(app: Flask) -> None:
    configure_level(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    logger = get_logger("requests")

    @app.before_request
    def _begin_request() -> None:
        g.request_id = uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _after_request(response):
        duration_ms = 0.0
        if hasattr(g, "request_started"):
            duration_ms = (time.perf_counter() - g.request_started) * 1000
        context = _request_context()
        logger.info(
            "%s %s -> %s (%.2f ms)",
            context["method"],
            context["path"],
            response.status_code,
            duration_ms,
            extra={**context, "status": response.status_code},
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return response

    @app.teardown_request
    def _teardown_request(exc):  # pragma: no cover - flask hooks
        if exc is not None:
            logger.error("request error", exc_info=exc, extra=_request_context())


__all__ = ["get_logger", "configure_level", "install_request_logging"]
