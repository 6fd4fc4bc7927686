"""
Centralized exception hierarchy for the Vietmap client.

Every error raised by this package derives from VietmapApiError so callers
can catch one type, while the subclasses map to specific failure modes
(HTTP status families, response parsing, polyline decoding, unit lookup).
"""

from __future__ import annotations

from typing import Any


class VietmapApiError(Exception):
    """Base exception for all package errors."""

    default_code = "VIETMAP_API_ERROR"

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        *,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        self.code = code or self.default_code
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(VietmapApiError):
    """Exception raised when request parameters are rejected (400)."""

    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Request validation failed",
        details: dict | None = None,
        *,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message, details, status_code=400)
        self.field = field
        self.value = value


class AuthenticationError(VietmapApiError):
    """Exception raised when the API key is missing or rejected (401/403)."""

    default_code = "AUTHENTICATION_ERROR"

    def __init__(
        self,
        message: str = "Authentication failed. Please check your API key.",
        details: dict | None = None,
        *,
        status_code: int = 401,
    ) -> None:
        super().__init__(message, details, status_code=status_code)


class RateLimitError(VietmapApiError):
    """Exception raised when rate limits are exceeded (429)."""

    default_code = "RATE_LIMIT_ERROR"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        details: dict | None = None,
        *,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, details, status_code=429)
        self.retry_after = retry_after


class ServerError(VietmapApiError):
    """Exception raised when the service answers with a 5xx status."""

    default_code = "SERVER_ERROR"

    def __init__(
        self,
        message: str = "Server error occurred",
        details: dict | None = None,
        *,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, details, status_code=status_code)


class NetworkError(VietmapApiError):
    """Exception raised when a request fails before a response arrives."""

    default_code = "NETWORK_ERROR"


class ParseError(VietmapApiError):
    """Exception raised when a response does not match its schema."""

    default_code = "PARSE_ERROR"

    def __init__(
        self,
        message: str = "Failed to parse response data",
        details: dict | None = None,
        *,
        response_data: Any = None,
    ) -> None:
        super().__init__(message, details)
        self.response_data = response_data


class PolylineDecodeError(VietmapApiError):
    """Exception raised for malformed or truncated encoded polylines."""

    default_code = "POLYLINE_DECODE_ERROR"


class InvalidUnitError(VietmapApiError, ValueError):
    """Exception raised when a distance unit name is not recognized."""

    default_code = "INVALID_UNIT"
