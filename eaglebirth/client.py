"""User-facing client for the EagleBirth API.

Example:
    from eaglebirth import EagleBirth

    client = EagleBirth("eb_test_your_api_key")

    client.email.send(
        email="user@example.com",
        subject="Welcome",
        message="Thanks for signing up.",
    )

    result = client.otp.send(validation_type="sms", phone_number="+1234567890")
    client.otp.validate(code_id=result["code_id"], code="123456")
"""

from typing import Any

import httpx
import pydantic
from pydantic import BaseModel, Field

from eaglebirth._internal.dispatch import FileInput, RequestDispatcher
from eaglebirth._internal.http import (
    DEFAULT_TIMEOUT,
    PRODUCTION_KEY_PREFIX,
    SANDBOX_KEY_PREFIX,
    create_http_client,
    resolve_base_url,
)
from eaglebirth.exceptions import ValidationError
from eaglebirth.resources import (
    EmailResource,
    OTPResource,
    QRCodeResource,
    SMSResource,
    StorageResource,
    UserManagementResource,
    VisionResource,
    WhatsAppResource,
)


class ClientConfig(BaseModel):
    """Constructor settings for EagleBirth.

    Attributes:
        api_key: Key starting with eb_test_ (sandbox) or eb_live_ (production).
        base_url: Explicit API base URL; overrides the key-based choice.
        timeout: Per-request timeout in seconds.
        debug: Write request/response debug lines to stderr.
    """

    api_key: str
    base_url: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class EagleBirth:
    """EagleBirth API client.

    The base URL is fixed at construction: sandbox for eb_test_ keys,
    production for eb_live_ keys, unless base_url is given. The client keeps
    one HTTP connection pool; call close() or use it as a context manager
    when done.
    """

    def __init__(
        self,
        api_key: str | ClientConfig,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key string, or a ClientConfig carrying all settings.
            base_url: Optional base URL override. Ignored with a ClientConfig.
            timeout: Request timeout in seconds. Ignored with a ClientConfig.
            debug: Enable debug logging to stderr. Ignored with a ClientConfig.

        Raises:
            ValidationError: The key has an unknown prefix or the settings
                are invalid.
        """
        if isinstance(api_key, ClientConfig):
            config = api_key
        else:
            try:
                config = ClientConfig(
                    api_key=api_key, base_url=base_url, timeout=timeout, debug=debug
                )
            except pydantic.ValidationError as e:
                raise ValidationError(f"Invalid client configuration: {e}") from e

        if not config.api_key.startswith((SANDBOX_KEY_PREFIX, PRODUCTION_KEY_PREFIX)):
            raise ValidationError(
                f"Invalid API key format. Must start with {SANDBOX_KEY_PREFIX} "
                f"or {PRODUCTION_KEY_PREFIX}"
            )
        if not (config.api_key.isascii() and config.api_key.isprintable()):
            raise ValidationError(
                "Invalid API key format. Must contain only printable ASCII characters"
            )

        self._config = config
        self._base_url = resolve_base_url(config.api_key, config.base_url)
        try:
            self._http = create_http_client(
                api_key=config.api_key,
                base_url=self._base_url,
                timeout=config.timeout,
            )
        except httpx.InvalidURL as e:
            raise ValidationError(f"Invalid base URL: {self._base_url}") from e
        self._dispatcher = RequestDispatcher(self._http, debug=config.debug)

        self.email = EmailResource(self._dispatcher)
        self.sms = SMSResource(self._dispatcher)
        self.whatsapp = WhatsAppResource(self._dispatcher)
        self.otp = OTPResource(self._dispatcher)
        self.qr = QRCodeResource(self._dispatcher)
        self.vision = VisionResource(self._dispatcher)
        self.storage = StorageResource(self._dispatcher)
        self.users = UserManagementResource(self._dispatcher)

    @property
    def base_url(self) -> str:
        """The API base URL resolved at construction."""
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._config.timeout

    @property
    def is_sandbox(self) -> bool:
        """True when the API key is a sandbox (eb_test_) key."""
        return self._config.api_key.startswith(SANDBOX_KEY_PREFIX)

    def request(
        self,
        method: str,
        path: str,
        fields: dict[str, Any] | None = None,
        files: dict[str, FileInput] | None = None,
    ) -> Any:
        """Call an endpoint directly. See RequestDispatcher.request."""
        return self._dispatcher.request(method, path, fields, files)

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._http.close()

    def __enter__(self) -> "EagleBirth":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"EagleBirth(base_url={self._base_url!r}, sandbox={self.is_sandbox})"
