"""Public exceptions for the EagleBirth SDK.

Every exception carries a ``kind`` tag so callers can either catch a specific
class or catch ``EagleBirthError`` and branch on ``err.kind``.
"""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Classification attached to every SDK error."""

    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    API = "api"
    TRANSPORT = "transport"
    GENERIC = "generic"


class EagleBirthError(Exception):
    """Base exception for all EagleBirth SDK errors."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class AuthenticationError(EagleBirthError):
    """API key rejected (HTTP 401 or 403)."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(
        self,
        message: str = "Invalid API key or authentication failed",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class RateLimitError(EagleBirthError):
    """Rate limit exceeded (HTTP 429).

    ``retry_after`` holds the server's hint in seconds when it sent one.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ValidationError(EagleBirthError):
    """Invalid input, either caught locally or rejected by the API (4xx)."""

    kind = ErrorKind.VALIDATION


class APIError(EagleBirthError):
    """Server-side failure from the EagleBirth API."""

    kind = ErrorKind.API

    def __init__(self, message: str, status_code: int, response: Any = None) -> None:
        super().__init__(message, status_code=status_code, response=response)


class NetworkError(EagleBirthError):
    """Request was sent but no response came back (connection error, timeout)."""

    kind = ErrorKind.TRANSPORT
