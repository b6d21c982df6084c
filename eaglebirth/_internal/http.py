"""Shared HTTP client configuration."""

import httpx

from eaglebirth._version import __version__

PRODUCTION_URL = "https://eaglebirth.com/api"
SANDBOX_URL = "https://sandbox.eaglebirth.com/api"

SANDBOX_KEY_PREFIX = "eb_test_"
PRODUCTION_KEY_PREFIX = "eb_live_"

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"eaglebirth-python/{__version__}"


def resolve_base_url(api_key: str, base_url: str | None = None) -> str:
    """Pick the API base URL for a key.

    An explicit base_url always wins; otherwise sandbox keys go to the
    sandbox host and everything else to production.
    """
    if base_url:
        return base_url
    return SANDBOX_URL if api_key.startswith(SANDBOX_KEY_PREFIX) else PRODUCTION_URL


def create_http_client(
    *,
    api_key: str,
    base_url: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        api_key: Bearer credential sent with every request.
        base_url: Base URL all request paths are joined to.
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url,
        follow_redirects=True,
        headers={
            "Authorization": f"Bearer {api_key}",
            "User-Agent": USER_AGENT,
        },
    )
