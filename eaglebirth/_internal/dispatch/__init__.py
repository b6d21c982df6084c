"""Request dispatch for the EagleBirth SDK.

WARNING: This is an internal module. Use the resource methods on
``EagleBirth`` instead of calling the dispatcher directly.
"""

from eaglebirth._internal.dispatch.client import FileInput, RequestDispatcher, prune_fields
from eaglebirth._internal.dispatch.errors import (
    decode_body,
    error_from_response,
    extract_message,
    parse_retry_after,
)
from eaglebirth._internal.dispatch.redaction import redact_fields

__all__ = [
    "FileInput",
    "RequestDispatcher",
    "prune_fields",
    "decode_body",
    "error_from_response",
    "extract_message",
    "parse_retry_after",
    "redact_fields",
]
