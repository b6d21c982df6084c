"""Shared fixtures for EagleBirth SDK tests."""

import httpx
import pytest

from eaglebirth import EagleBirth

SANDBOX_KEY = "eb_test_abc123"


class RequestRecorder:
    """respx side effect that keeps each request and its fully read body.

    Multipart bodies stream from open files, so they are read while the
    request is in flight rather than after the call returns.
    """

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.bodies: list[bytes] = []
        self._response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.bodies.append(request.read())
        return self._response or httpx.Response(200, json={"status": "ok"})

    @property
    def last_body(self) -> bytes:
        return self.bodies[-1]

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def client():
    with EagleBirth(SANDBOX_KEY) as eb:
        yield eb


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder()
