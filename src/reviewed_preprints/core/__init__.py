"""Core module - exceptions and configuration."""

from .config import Settings, configure_logging
from .exceptions import (
    APIError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    InvalidTimestampError,
    MissingFieldError,
    NetworkError,
    NotFoundError,
    ParseError,
    ReviewedPreprintsError,
    UpstreamResponseError,
    ValidationError,
    is_upstream_error,
)

__all__ = [
    "Settings",
    "configure_logging",
    "ReviewedPreprintsError",
    "APIError",
    "NetworkError",
    "UpstreamResponseError",
    "ValidationError",
    "InvalidParameterError",
    "DataError",
    "NotFoundError",
    "ParseError",
    "MissingFieldError",
    "InvalidTimestampError",
    "ConfigurationError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "is_upstream_error",
]
