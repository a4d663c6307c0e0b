"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found", details: Any = None):
        super().__init__(message, status_code=404, details=details)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str = "Invalid input",
        details: Any = None,
        status_code: int = 422,
    ):
        super().__init__(message, status_code=status_code, details=details)


class UnsupportedFormatError(AppError):
    """Raised when an upload has an extension no parser handles."""

    def __init__(self, filename: str):
        super().__init__(
            "Unsupported file format. Please upload CSV, JSON, or XML file",
            status_code=400,
            details={"filename": filename},
        )


class PayloadTooLargeError(AppError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Upload of {size} bytes exceeds the {limit} byte limit",
            status_code=413,
        )


class MultiCurrencyError(AppError):
    """Raised when a single balance is requested for a multi-currency account."""

    def __init__(self, account_id: str, currencies: List[str]):
        super().__init__(
            f"Account {account_id} has transactions in multiple currencies "
            f"({', '.join(currencies)}). Please use the summary endpoint for "
            "multi-currency accounts.",
            status_code=409,
            details={"currencies": currencies},
        )


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "record"


def validation_details(exc: SchemaValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into ``[{field, message}]``."""
    return [
        {"field": _field_path(err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]


def describe_validation_error(exc: SchemaValidationError) -> str:
    """Single-line reason built from the first schema error."""
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    first = errors[0]
    return f"{_field_path(first['loc'])}: {first['msg']}"


def to_response(error: AppError, correlation_id: Optional[str] = None) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    body: Dict[str, Any] = {"message": str(error), "status": "error"}
    if error.details is not None:
        body["details"] = error.details
    if correlation_id:
        body["correlation_id"] = correlation_id
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }
