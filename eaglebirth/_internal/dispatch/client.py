"""Request dispatcher shared by every EagleBirth resource."""

import os
import sys
from collections.abc import Mapping
from contextlib import ExitStack
from typing import IO, Any

import httpx

from eaglebirth._internal.dispatch.errors import decode_body, error_from_response
from eaglebirth._internal.dispatch.redaction import redact_fields
from eaglebirth.exceptions import EagleBirthError, NetworkError, ValidationError

ALLOWED_METHODS = frozenset({"GET", "POST"})
NO_RESPONSE_MESSAGE = "No response received from API"

FileInput = str | os.PathLike[str] | bytes | bytearray | IO[bytes]


def prune_fields(fields: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop None values so absent parameters are never sent as empty values."""
    if not fields:
        return {}
    return {key: value for key, value in fields.items() if value is not None}


class RequestDispatcher:
    """Executes one HTTP exchange per call and classifies its outcome.

    The dispatcher holds only read-only configuration and a shared
    httpx.Client, so a single instance can serve concurrent callers.
    """

    def __init__(self, http_client: httpx.Client, *, debug: bool = False) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: Client preconfigured with base URL, auth headers and timeout.
            debug: Enable debug logging to stderr.
        """
        self._http = http_client
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[eaglebirth] {message}", file=sys.stderr)

    def request(
        self,
        method: str,
        path: str,
        fields: Mapping[str, Any] | None = None,
        files: Mapping[str, FileInput] | None = None,
    ) -> Any:
        """Send a request to the EagleBirth API.

        Without files, POST fields go out as a JSON body and GET fields as
        query parameters. With at least one file the body is multipart: each
        field becomes a text part and each file a binary part.

        Args:
            method: HTTP verb, GET or POST (case-insensitive).
            path: Endpoint path relative to the client's base URL.
            fields: Request fields. None values are dropped before sending.
                Bytes values are only accepted in multipart requests.
            files: Attachments keyed by form field. Values are filesystem
                paths, raw bytes, or binary file objects.

        Returns:
            The decoded response body, unmodified.

        Raises:
            ValidationError: Bad method, unreadable file, bytes field without
                files, or a 4xx response.
            AuthenticationError: 401 or 403 response.
            RateLimitError: 429 response.
            APIError: 5xx (or other non-2xx) response.
            NetworkError: The request was sent but no response was received.
            EagleBirthError: The request could not be built or sent.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValidationError(f"Unsupported HTTP method: {method}")

        payload = prune_fields(fields)

        with ExitStack() as stack:
            parts = self._open_files(files, stack)
            try:
                request = self._build_request(method, path, payload, parts)
            except (TypeError, ValueError, httpx.InvalidURL) as e:
                self._log_debug(f"Could not build request: {e}")
                raise EagleBirthError(f"Request failed: {e}") from e

            self._log_debug(
                f"{method} {request.url} fields={redact_fields(payload)} "
                f"files={sorted(parts)}"
            )

            try:
                response = self._http.send(request)
            except httpx.TransportError as e:
                self._log_debug(f"No response: {e!r}")
                raise NetworkError(NO_RESPONSE_MESSAGE) from e
            except httpx.HTTPError as e:
                self._log_debug(f"Request error: {e!r}")
                raise EagleBirthError(f"Request failed: {e}") from e

        self._log_debug(f"Response status {response.status_code}")
        if not response.is_success:
            error = error_from_response(response)
            self._log_debug(f"Classified as {error.kind}: {error.message}")
            raise error
        return decode_body(response)

    def _open_files(
        self,
        files: Mapping[str, FileInput] | None,
        stack: ExitStack,
    ) -> dict[str, Any]:
        """Resolve file attachments into httpx file parts.

        Paths are opened on the given stack so they close once the request
        finishes. Open failures surface as ValidationError before any I/O.
        """
        parts: dict[str, Any] = {}
        for key, value in (files or {}).items():
            if value is None:
                continue
            if isinstance(value, (str, os.PathLike)):
                try:
                    handle = stack.enter_context(open(value, "rb"))
                except OSError as e:
                    raise ValidationError(f"File not found: {os.fspath(value)}") from e
                parts[key] = (os.path.basename(os.fspath(value)), handle)
            elif isinstance(value, bytearray):
                parts[key] = bytes(value)
            else:
                parts[key] = value
        return parts

    def _build_request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any],
        parts: dict[str, Any],
    ) -> httpx.Request:
        if parts:
            data = {
                key: bytes(value) if isinstance(value, (bytes, bytearray)) else str(value)
                for key, value in payload.items()
            }
            return self._http.build_request(method, path, data=data, files=parts)
        binary = sorted(
            key for key, value in payload.items() if isinstance(value, (bytes, bytearray))
        )
        if binary:
            raise ValidationError(f"Binary fields can only be sent alongside files: {binary}")
        if method == "GET":
            return self._http.build_request(method, path, params=payload)
        return self._http.build_request(method, path, json=payload)