"""Calculation error taxonomy and the standard error envelope."""
from typing import Any

import sentry_sdk
import structlog
from pydantic import BaseModel

logger = structlog.get_logger()


class CalculationError(Exception):
    """Base class for errors that stop a record from being recomputed."""

    error_code = "calculation_error"

    def __init__(
        self,
        message: str,
        *,
        record_type: str | None = None,
        record_id: Any = None,
        detail: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.record_type = record_type
        self.record_id = record_id
        self.detail = detail


class ConfigurationError(CalculationError):
    """An ordinal, category or record type the calculation tables do not know.

    Never defaulted: a silently wrong score could misclassify compliance risk.
    """

    error_code = "invalid_configuration"


class InvalidRecordError(CalculationError):
    """Source values the arithmetic cannot accept (e.g. a non-positive company value)."""

    error_code = "invalid_record"


class ErrorResponse(BaseModel):
    """Standard error envelope handed to the API layer."""
    error: str
    message: str
    detail: Any = None
    request_id: str = "unknown"


def error_response(exc: CalculationError, request_id: str = "unknown") -> ErrorResponse:
    """Log a fatal calculation error, report it to Sentry and wrap it in the envelope."""
    logger.error(
        "calculation_failed",
        error=exc.message,
        error_type=type(exc).__name__,
        record_type=exc.record_type,
        record_id=str(exc.record_id) if exc.record_id is not None else None,
        request_id=request_id,
    )

    sentry_sdk.capture_exception(exc)

    detail: dict[str, Any] = {}
    if exc.record_type:
        detail["record_type"] = exc.record_type
    if exc.record_id is not None:
        detail["record_id"] = str(exc.record_id)
    if exc.detail is not None:
        detail["context"] = exc.detail

    return ErrorResponse(
        error=exc.error_code,
        message=exc.message,
        detail=detail or None,
        request_id=request_id,
    )
