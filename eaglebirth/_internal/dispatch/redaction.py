"""Redaction of sensitive request fields before they reach debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "password",
    "directory_password",
    "file_password",
    "token",
    "refresh",
    "refresh_token",
    "code",
    "code_verifier",
    "authorization",
    "api_key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from request fields.

    Creates a new structure - the original fields are never mutated. Byte
    values are replaced with a size marker so binary data never lands in logs.

    Args:
        fields: The request fields to redact.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(fields)


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    elif isinstance(obj, (bytes, bytearray)):
        return f"<{len(obj)} bytes>"
    else:
        return obj
