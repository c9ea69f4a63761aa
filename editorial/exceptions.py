"""
Custom Exception Classes for the Editorial Admin

Errors raised by routes and services. Read repositories never raise these
for missing rows or storage failures (they return ``None``/``[]`` and log);
routes turn absence into ``ResourceNotFoundError``.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned in every error body."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class EditorialError(Exception):
    """Base exception class for all editorial exceptions"""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(EditorialError):
    """Raised when an identifier resolves to nothing"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


# ============================================================================
# Validation & Business Logic Exceptions
# ============================================================================


class ValidationError(EditorialError):
    """Raised when input validation fails"""

    error_code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


# ============================================================================
# Storage & Upstream Exceptions
# ============================================================================


class StorageError(EditorialError):
    """Raised when a write fails and the caller asked for an exception"""

    error_code = ErrorCode.STORAGE_ERROR

    def __init__(self, message: str = "A database error occurred", operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)


class UpstreamAPIError(EditorialError):
    """Raised when a third-party API answers with a failure.

    Only the upstream status code is propagated; the upstream body is
    never exposed to the client.
    """

    error_code = ErrorCode.UPSTREAM_ERROR

    def __init__(self, message: str, upstream_status: int):
        super().__init__(message=message, status_code=upstream_status)


class ConfigurationError(EditorialError):
    """Raised when a required credential or setting is missing"""

    error_code = ErrorCode.CONFIGURATION_ERROR

    def __init__(self, message: str):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
