"""EagleBirth SDK for Python.

Client library for the EagleBirth messaging, verification, vision, storage
and user-management APIs.

Public API:
    EagleBirth - API client
    ClientConfig - Client settings
    ErrorKind and the exception classes in eaglebirth.exceptions
"""

from eaglebirth._version import __version__
from eaglebirth.client import ClientConfig, EagleBirth
from eaglebirth.exceptions import (
    APIError,
    AuthenticationError,
    EagleBirthError,
    ErrorKind,
    NetworkError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "__version__",
    "APIError",
    "AuthenticationError",
    "ClientConfig",
    "EagleBirth",
    "EagleBirthError",
    "ErrorKind",
    "NetworkError",
    "RateLimitError",
    "ValidationError",
]
