"""Response decoding and status-code classification."""

import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

from eaglebirth.exceptions import (
    APIError,
    AuthenticationError,
    EagleBirthError,
    RateLimitError,
    ValidationError,
)

DEFAULT_ERROR_MESSAGE = "API request failed"


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body without reshaping it.

    JSON bodies are parsed, textual bodies come back as str, anything else
    as raw bytes. An empty body decodes to None.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        pass

    content_type = response.headers.get("content-type", "").lower()
    if not content_type or content_type.startswith("text/") or "charset=" in content_type:
        return response.text
    return response.content


def extract_message(body: Any) -> str:
    """Pull a human-readable message out of an error body."""
    if isinstance(body, dict):
        for key in ("message", "detail"):
            value = body.get(key)
            if value:
                return str(value)
    return DEFAULT_ERROR_MESSAGE


def parse_retry_after(value: str | None) -> int | None:
    """Parse a Retry-After header into whole seconds.

    Accepts delta-seconds ("30") or an HTTP-date. Dates in the past clamp
    to 0. Returns None when the header is absent or unparseable.
    """
    if value is None:
        return None
    value = value.strip()
    if value.isascii() and value.isdigit():
        return int(value)

    try:
        retry_date = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=UTC)
    delta = (retry_date - datetime.now(UTC)).total_seconds()
    return max(0, math.ceil(delta))


def error_from_response(response: httpx.Response) -> EagleBirthError:
    """Map a non-2xx response to exactly one SDK error."""
    status = response.status_code
    body = decode_body(response)
    message = extract_message(body)

    if status in (401, 403):
        return AuthenticationError(message, status_code=status, response=body)
    if status == 429:
        return RateLimitError(
            message,
            retry_after=parse_retry_after(response.headers.get("retry-after")),
            status_code=status,
            response=body,
        )
    if 400 <= status < 500:
        return ValidationError(message, status_code=status, response=body)
    return APIError(message, status, body)
