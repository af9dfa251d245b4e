# blink_invoice/core/errors.py

from typing import Any, Dict, List, Optional


class BlinkError(Exception):
    """Base for every failure the invoice pipeline reports."""


class ConfigurationError(BlinkError):
    pass


class ValidationError(BlinkError):
    pass


class TransportError(BlinkError):
    """Non-2xx HTTP status or no usable HTTP response at all."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GraphQLOperationError(BlinkError):
    """Error list reported inside an otherwise successful HTTP response.

    Raised both for the top-level ``errors`` array and for the nested
    ``errors`` array of a mutation payload.
    """

    def __init__(self, errors: List[Dict[str, Any]], prefix: str = "GraphQL error"):
        self.errors = errors
        messages = ", ".join(
            str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
        )
        super().__init__(f"{prefix}: {messages}")

    @property
    def codes(self) -> List[str]:
        return [e["code"] for e in self.errors if isinstance(e, dict) and e.get("code")]


class AuthenticationError(BlinkError):
    pass


class NotFoundError(BlinkError):
    def __init__(self, currency: str):
        super().__init__(f"No {currency} wallet found on this account.")
        self.currency = currency


class InvariantViolation(BlinkError):
    """The server answered in a shape its contract rules out."""
