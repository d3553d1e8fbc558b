"""Error models for the 1Shot SDK.

Two independent families hang off :class:`OneShotError`:

- :class:`ValidationError` is raised locally when request parameters or a
  gateway response do not conform to their schema.
- :class:`TransportError` is raised by the HTTP transport (non-2xx status,
  timeout, connection failure).

Callers can therefore retry transport errors and never retry validation
errors by branching on the exception type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


class OneShotError(Exception):
    """Base exception for the 1Shot SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "ONESHOT_ERROR"
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


# ==================== Validation ====================


@dataclass(frozen=True)
class FieldError:
    """A single schema violation."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class ValidationError(OneShotError):
    """Data failed schema validation."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, errors: Optional[List[FieldError]] = None):
        self.errors: List[FieldError] = list(errors or [])
        super().__init__(
            message,
            code=type(self).code,
            details={"errors": [{"path": e.path, "message": e.message} for e in self.errors]},
        )

    @property
    def fields(self) -> List[str]:
        """Paths of every failing field."""
        return [e.path for e in self.errors]

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        joined = "; ".join(str(e) for e in self.errors)
        return f"[{self.code}] {self.message}: {joined}"


class RequestValidationError(ValidationError):
    """Caller-supplied parameters are malformed. No request was sent."""

    code = "REQUEST_VALIDATION_ERROR"


class ResponseValidationError(ValidationError):
    """The gateway returned data that does not match the expected schema.

    The request itself was delivered, so any server-side effect may already
    have happened.
    """

    code = "RESPONSE_VALIDATION_ERROR"


# ==================== Transport ====================


class TransportError(OneShotError):
    """Base class for failures raised by the HTTP transport."""


class APIError(TransportError):
    """Error from API response."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message, code or "API_ERROR", details)
        self.status_code = status_code
        self.request_id = request_id

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["error"]["status_code"] = self.status_code
        data["error"]["request_id"] = self.request_id
        return data

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Any,
        request_id: Optional[str] = None,
    ) -> "APIError":
        """Create the most specific APIError for an HTTP error response."""
        if isinstance(body, dict):
            error_data = body.get("error", body.get("message", body.get("detail", {})))
        else:
            error_data = body

        message = "Unknown error"
        details: dict[str, Any] = {}
        if isinstance(error_data, str) and error_data:
            message = error_data
        elif isinstance(error_data, list):
            message = "Validation Error"
            details = {"errors": error_data}
        elif isinstance(error_data, dict):
            message = error_data.get("message", message)
            details = error_data.get("details") or {}

        if status_code in (401, 403):
            return AuthenticationError(message, status_code=status_code, request_id=request_id)
        if status_code == 404:
            return NotFoundError(message, details=details, request_id=request_id)
        return cls(
            message=message,
            status_code=status_code,
            details=details,
            request_id=request_id,
        )


class AuthenticationError(APIError):
    """Authentication error."""

    def __init__(
        self,
        message: str = "Invalid or missing API credentials",
        status_code: int = 401,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            code="AUTHENTICATION_ERROR",
            request_id=request_id,
        )


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=404,
            code="NOT_FOUND",
            details=details,
            request_id=request_id,
        )


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    def __init__(self, message: str = "Rate limit exceeded", retry_after: Optional[float] = None):
        super().__init__(
            message,
            status_code=429,
            code="RATE_LIMIT_EXCEEDED",
            details={"retry_after": retry_after},
        )
        self.retry_after = retry_after


class TimeoutError(TransportError):
    """The request timed out."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message, code="TIMEOUT")


class ConnectionError(TransportError):
    """The gateway could not be reached."""

    def __init__(self, message: str = "Could not connect to the gateway"):
        super().__init__(message, code="CONNECTION_ERROR")
