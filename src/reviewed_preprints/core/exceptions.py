"""
Unified Exception Hierarchy for the Reviewed Preprints API.

Exception Hierarchy:
    ReviewedPreprintsError (base)
    ├── APIError
    │   ├── NetworkError
    │   └── UpstreamResponseError
    ├── ValidationError
    │   └── InvalidParameterError
    ├── DataError
    │   ├── NotFoundError
    │   ├── ParseError
    │   ├── MissingFieldError
    │   └── InvalidTimestampError
    └── ConfigurationError

The HTTP layer maps ValidationError to 400, NotFoundError to 404 and
everything raised while talking to (or reading data from) the upstream
preprint service to 502.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = auto()      # Client-side problem, request rejected
    ERROR = auto()        # Failed request
    CRITICAL = auto()     # Cannot continue


class ErrorCategory(Enum):
    """Categories for error classification."""
    API = "api"
    VALIDATION = "validation"
    DATA = "data"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Structured context attached to an error."""
    operation: str | None = None
    input_value: Any = None
    url: str | None = None
    status_code: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class ReviewedPreprintsError(Exception):
    """
    Base exception for all Reviewed Preprints API errors.

    Provides:
    - Structured error context
    - Severity classification
    - JSON-friendly formatting for logs
    """

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.API,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.operation:
            result["operation"] = self.context.operation
        if self.context.url:
            result["url"] = self.context.url
        if self.context.status_code is not None:
            result["status_code"] = self.context.status_code
        return result


# =============================================================================
# API Errors
# =============================================================================

class APIError(ReviewedPreprintsError):
    """Base class for errors talking to the upstream service."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.API,
        )


class NetworkError(APIError):
    """Raised for network connectivity issues."""

    def __init__(
        self,
        message: str = "Network connection failed",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context)


class UpstreamResponseError(APIError):
    """Raised when the upstream service answers with a non-2xx status."""

    def __init__(
        self,
        url: str,
        status_code: int,
        reason: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation,
            input_value=ctx.input_value,
            url=url,
            status_code=status_code,
            metadata=ctx.metadata,
        )
        super().__init__(f"failed to fetch {url}: {reason}", context=ctx)
        self.url = url
        self.status_code = status_code
        self.reason = reason


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(ReviewedPreprintsError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
        )


class InvalidParameterError(ValidationError):
    """Raised when a query parameter value is invalid.

    The message is the exact ``detail`` returned to the client.
    """

    def __init__(
        self,
        param_name: str,
        value: Any,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation,
            input_value=value,
            url=ctx.url,
            status_code=ctx.status_code,
            metadata={**ctx.metadata, "param": param_name},
        )
        super().__init__(message, context=ctx)
        self.param_name = param_name
        self.value = value


# =============================================================================
# Data Errors
# =============================================================================

class DataError(ReviewedPreprintsError):
    """Base class for data-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.DATA,
        )


class NotFoundError(DataError):
    """Raised when requested data is not found."""

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        msg = f"{resource} not found"
        if identifier:
            msg = f"{resource} not found: {identifier}"

        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation,
            input_value=identifier,
            url=ctx.url,
            status_code=ctx.status_code,
            metadata=ctx.metadata,
        )
        super().__init__(msg, context=ctx)


class ParseError(DataError):
    """Raised when data parsing fails."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        full_msg = f"Parse error: {message}"
        if source:
            full_msg = f"Parse error ({source}): {message}"
        super().__init__(full_msg, context=context)


class MissingFieldError(DataError):
    """Raised when an upstream record lacks a field the snippet needs."""

    def __init__(
        self,
        field_name: str,
        record_id: str | None = None,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        msg = f"missing '{field_name}'"
        if record_id:
            msg = f"missing '{field_name}' on record {record_id}"
        super().__init__(msg, context=context)
        self.field_name = field_name
        self.record_id = record_id


class InvalidTimestampError(DataError):
    """Raised when a timestamp cannot be normalized."""

    def __init__(
        self,
        value: Any,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation,
            input_value=value,
            url=ctx.url,
            status_code=ctx.status_code,
            metadata=ctx.metadata,
        )
        super().__init__(f"Invalid timestamp: {value!r}", context=ctx)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ReviewedPreprintsError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )


def is_upstream_error(error: Exception) -> bool:
    """Check if an error originates from the upstream service or its data."""
    return isinstance(error, (APIError, DataError)) and not isinstance(error, NotFoundError)
