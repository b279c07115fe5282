# src/fxboard/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions, including the fetch
failures raised by the finance client and captured by the finance store.
"""

from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class FetchError(DomainError):
    """Base exception for a failed snapshot fetch."""

    kind = "fetch error"

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.kind}: {detail}" if detail else self.kind


class InvalidRequestError(FetchError):
    """Raised when the request URL cannot be constructed."""

    kind = "invalid request"


class TransportError(FetchError):
    """Raised on network failure (DNS, timeout, connection reset)."""

    kind = "transport error"


class BadStatusError(FetchError):
    """Raised when the HTTP status is not 200."""

    kind = "bad status"

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        message = f"HTTP {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class DecodeError(FetchError):
    """Raised when the response body is not JSON or does not match the schema."""

    kind = "decode error"

    def __init__(self, details: str):
        self.details = details
        super().__init__(details)
