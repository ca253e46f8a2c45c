"""Centralized error handling and logging for the Service Copilot API.

This module provides:
- Global exception handler for FastAPI
- Structured logging with correlation IDs
- Environment-aware error responses (minimal in production, detailed in dev)
- Prevention of sensitive data leakage

Every error body carries a single human readable ``error`` string, which is
the shape the draft endpoints promise to their callers. Development builds
add diagnostics next to it.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pythonjsonlogger.json import JsonFormatter
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from core.config import get_settings
from core.exceptions import DraftRequestValidationError, SourceItemNotFoundError
from core.security_config import get_allowed_error_fields, is_sensitive_key


# Context variable for correlation ID tracking across async calls
_correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

logger = logging.getLogger(__name__)

# Status codes for domain errors raised by the draft pipeline
DOMAIN_ERROR_STATUS: dict[type[Exception], int] = {
    DraftRequestValidationError: 400,
    SourceItemNotFoundError: 404,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def get_correlation_id() -> str:
    """Get or create a correlation ID for request tracing."""
    correlation_id: str | None = _correlation_id_var.get()
    if correlation_id is None or correlation_id == "":
        new_id = str(uuid.uuid4())
        _correlation_id_var.set(new_id)
        return new_id
    return correlation_id


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id_var.set(correlation_id)


class StructuredLogger:
    """Structured logger that includes correlation IDs and sanitized data."""

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def _log_with_context(
        self,
        level: int,
        message: str,
        extra_data: dict[str, Any] | None = None,
        exc_info: bool = False,
    ) -> None:
        """Log with correlation ID and structured data."""
        correlation_id = get_correlation_id()

        # Sanitize extra data to prevent PII leakage
        sanitized_data = self._sanitize_data(extra_data or {})

        log_data = {
            "correlation_id": correlation_id,
            **sanitized_data,
        }

        settings = get_settings()
        if settings.ENVIRONMENT == "production":
            # The JsonFormatter merges `extra` keys into the emitted object,
            # so structured fields stay first-class JSON attributes.
            self.logger.log(
                level,
                message,
                extra={"structured_data": log_data},
                exc_info=exc_info,
            )
        else:
            details = " ".join(
                f"{k}={v!r}" for k, v in sanitized_data.items()
            )
            self.logger.log(
                level,
                f"[{correlation_id}] {message}" + (f" {details}" if details else ""),
                extra={"structured_data": log_data},
                exc_info=exc_info,
            )

    def _sanitize_data(self, data: dict[str, Any]) -> dict[str, Any]:
        """Remove or mask sensitive data from log entries."""
        if not isinstance(data, dict) or not data:
            return {}

        header_redaction = self._redact_header_like(data)
        if header_redaction is not None:
            return header_redaction

        sanitized: dict[str, Any] = {}
        for key, value in data.items():
            if is_sensitive_key(key):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = self._sanitize_value(value)

        return sanitized

    def _sanitize_value(self, value: Any) -> Any:
        """Sanitize a single value which may be a dict, list, or primitive."""
        if isinstance(value, dict):
            return self._sanitize_data(value)
        if isinstance(value, list | tuple):
            return [self._sanitize_value(item) for item in value]
        return value

    def _redact_header_like(self, data: dict[str, Any]) -> dict[str, Any] | None:
        """If `data` is a header-like dict, return a redacted version or None.

        A header-like dict has keys like `name`/`key` and `value`. If the name/key
        is considered sensitive, its value is redacted.
        """
        if not (
            ("name" in data and "value" in data) or ("key" in data and "value" in data)
        ):
            return None

        header_name = data.get("name") or data.get("key")
        if not isinstance(header_name, str) or not is_sensitive_key(header_name):
            return None

        redacted: dict[str, Any] = {}
        for sub_k, sub_v in data.items():
            if sub_k.lower() in {"value", "val", "v"}:
                redacted[sub_k] = "[REDACTED]"
            elif isinstance(sub_v, dict):
                redacted[sub_k] = self._sanitize_data(sub_v)
            else:
                redacted[sub_k] = "[REDACTED]" if is_sensitive_key(sub_k) else sub_v

        return redacted

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug level message."""
        self._log_with_context(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info level message."""
        self._log_with_context(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning level message."""
        self._log_with_context(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error level message."""
        self._log_with_context(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self._log_with_context(logging.ERROR, message, kwargs, exc_info=True)


# Global structured logger instance
structured_logger = StructuredLogger(__name__)


class ExceptionNormalizationMiddleware(BaseHTTPMiddleware):
    """Catch any uncaught Exception and delegate to global_exception_handler.

    This avoids touching private middleware_stack internals and guarantees
    a final safety net consistent with centralized error handling.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:  # noqa: BLE001
            return await global_exception_handler(request, exc)


def _build_error_response(
    *,
    message: str,
    status_code: int,
    environment: str,
    correlation_id: str,
    exception_type: str | None = None,
    validation_errors: Any | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Construct a sanitized ``{"error": ...}`` response for ``environment``."""
    allowed_fields = get_allowed_error_fields(environment)

    body: dict[str, Any] = {"error": message}
    if "correlation_id" in allowed_fields:
        body["correlation_id"] = correlation_id
    if "exception_type" in allowed_fields and exception_type:
        body["exception_type"] = exception_type
    if "validation_errors" in allowed_fields and validation_errors is not None:
        body["validation_errors"] = validation_errors

    return JSONResponse(status_code=status_code, content=body, headers=headers)


def describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Turn pydantic error dicts into one short message for the ``error`` field."""
    missing = [
        ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        for err in errors
        if err.get("type") == "missing"
    ]
    if missing:
        return f"Missing required field(s): {', '.join(missing)}"
    if not errors:
        return "Invalid request data provided"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "invalid value")
    return f"Invalid value for {field}: {msg}" if field else f"Invalid request: {msg}"


def _jsonable_errors(
    exc: ValidationError | RequestValidationError,
) -> list[dict[str, Any]]:
    # ctx may hold exception instances that JSONResponse cannot serialize
    return [
        {k: v for k, v in err.items() if k in {"type", "loc", "msg"}}
        for err in exc.errors()
    ]


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler providing structured, sanitized responses.

    This function centralizes all error handling to ensure:
    - Consistent ``{"error": ...}`` body
    - Correlation ID is always logged
    - Sensitive data is never leaked (production)
    - Helpful diagnostics in development
    """
    settings = get_settings()
    environment = settings.ENVIRONMENT
    correlation_id = get_correlation_id()

    if isinstance(exc, StarletteHTTPException):
        status_code = getattr(exc, "status_code", 500)
        detail = getattr(exc, "detail", "An error occurred")
        return _build_error_response(
            message=str(detail),
            status_code=status_code,
            environment=environment,
            correlation_id=correlation_id,
            exception_type=exc.__class__.__name__,
            headers=getattr(exc, "headers", None),
        )

    if isinstance(exc, ValidationError | RequestValidationError):
        errors = _jsonable_errors(exc)
        structured_logger.warning("Validation error", validation_errors=errors)
        return _build_error_response(
            message=describe_validation_errors(errors),
            status_code=400,
            environment=environment,
            correlation_id=correlation_id,
            validation_errors=errors,
        )

    status_code = DOMAIN_ERROR_STATUS.get(type(exc))
    if status_code is not None:
        structured_logger.warning(
            "Domain error",
            error_type=exc.__class__.__name__,
            domain_message=str(exc),
            path=request.url.path,
        )
        return _build_error_response(
            message=str(exc),
            status_code=status_code,
            environment=environment,
            correlation_id=correlation_id,
            exception_type=exc.__class__.__name__,
        )

    # Generic fallback
    structured_logger.exception(
        "Unhandled exception",
        exception_type=exc.__class__.__name__,
        error=str(exc),
        path=request.url.path,
    )
    return _build_error_response(
        message=INTERNAL_ERROR_MESSAGE,
        status_code=500,
        environment=environment,
        correlation_id=correlation_id,
        exception_type=exc.__class__.__name__ if environment != "production" else None,
    )


def setup_logging() -> None:
    """Configure application logging with proper JSON structure and idempotent setup."""
    settings = get_settings()

    log_level = logging.DEBUG if settings.ENVIRONMENT == "development" else logging.INFO
    root_logger = logging.getLogger()

    # The provider credential travels in the request URL; httpx logs every
    # request URL at INFO, so those loggers never go below WARNING.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Make setup idempotent - avoid duplicate handlers
    if root_logger.handlers:
        return

    formatter: logging.Formatter
    if settings.ENVIRONMENT == "production":
        formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    else:
        # Human-readable logging for development
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)

    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)

    # Suppress noisy third-party loggers in production
    if settings.ENVIRONMENT == "production":
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
