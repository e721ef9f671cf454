"""Beeswax-specific exceptions for error handling."""
from __future__ import annotations
from typing import Optional


class BeeswaxError(Exception):
    """Base exception for all Beeswax operations."""
    pass


class ConfigurationError(BeeswaxError):
    """Provider settings are missing or empty."""
    pass


class AuthenticationError(BeeswaxError):
    """Login failed or the session was used before logging in."""
    pass


class EncodingError(BeeswaxError):
    """Outgoing request body could not be serialized to JSON."""
    pass


class InvalidRequestError(BeeswaxError):
    """Request could not be built (malformed method, URL or header)."""
    pass


class TransportError(BeeswaxError):
    """Network failure before any response was received.

    Attributes:
        endpoint: URL that was being requested
        cause: Underlying transport exception
    """

    def __init__(self, endpoint: str, cause: BaseException):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"request failed: {endpoint}: {cause}")


class BeeswaxAPIError(BeeswaxError):
    """Non-2xx HTTP response from the Beeswax REST API.

    Attributes:
        status_code: HTTP status code
        status: HTTP status line (e.g. "404 Not Found")
        body: Raw response body, kept for diagnostics even when not JSON
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, status: str, body: bytes, endpoint: str):
        self.status_code = status_code
        self.status = status
        self.body = body
        self.endpoint = endpoint
        text = body.decode("utf-8", errors="replace")
        super().__init__(f"response {status} instead. API response: {text}")


class DecodeError(BeeswaxError):
    """2xx response whose body does not match the expected entity shape.

    Attributes:
        entity: Name of the expected entity type
        body: Raw response body
    """

    def __init__(self, entity: str, body: bytes, reason: str):
        self.entity = entity
        self.body = body
        self.reason = reason
        super().__init__(f"can't decode {entity} response: {reason}")


class ReconcileError(BeeswaxError):
    """Diagnostic raised by the reconciliation adapters.

    Attributes:
        summary: Short title (e.g. "Error creating role")
        detail: Full message including the underlying error text
        cause: Classified core error, if any
    """

    def __init__(self, summary: str, detail: str, cause: Optional[BaseException] = None):
        self.summary = summary
        self.detail = detail
        self.cause = cause
        super().__init__(f"{summary}: {detail}")
