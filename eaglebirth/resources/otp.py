"""One-time-password (verification code) flows."""

from typing import Any

from eaglebirth._internal.dispatch import RequestDispatcher
from eaglebirth.models import ValidationType
from eaglebirth.models.otp import (
    DEFAULT_CODE_LENGTH,
    DEFAULT_CODE_TIMEOUT,
    DEFAULT_TRIALS,
    CheckValidatedRequest,
    SendOTPRequest,
    ValidateOTPRequest,
)

SEND_PATH = "/app/code_validation/"
VALIDATE_PATH = "/app/code_validation/validate_code_sent/"
CHECK_VALIDATED_PATH = "/app/code_validation/check_validated_code/"


class OTPResource:
    """OTP/verification code resource.

    A typical flow is ``send`` (returns a ``code_id``), then ``validate``
    with the code the user typed, then optionally ``check_validated`` from
    another service to confirm the outcome.
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def send(
        self,
        *,
        validation_type: ValidationType,
        email: str | None = None,
        phone_number: str | None = None,
        provider: str | None = None,
        code_length: int = DEFAULT_CODE_LENGTH,
        timeout: int = DEFAULT_CODE_TIMEOUT,
        trials: int = DEFAULT_TRIALS,
    ) -> Any:
        """Send a verification code.

        Args:
            validation_type: Delivery channel.
            email: Recipient address for the email channel.
            phone_number: Recipient number for the SMS and WhatsApp channels.
            provider: Optional delivery provider override.
            code_length: Number of digits in the code.
            timeout: Seconds before the code expires.
            trials: Allowed validation attempts.

        Returns:
            The API response body, including the ``code_id``.
        """
        body = SendOTPRequest.build(
            validation_type=validation_type,
            email=email,
            phone_number=phone_number,
            provider=provider,
            code_length=code_length,
            timeout=timeout,
            trials=trials,
        )
        return self._dispatcher.request("POST", SEND_PATH, body.to_fields())

    def validate(self, *, code_id: str, code: str) -> Any:
        """Validate a code entered by the user."""
        body = ValidateOTPRequest.build(code_id=code_id, code=code)
        return self._dispatcher.request("POST", VALIDATE_PATH, body.to_fields())

    def check_validated(self, code_id: str) -> Any:
        """Check whether a code was successfully validated."""
        body = CheckValidatedRequest.build(code_id=code_id)
        return self._dispatcher.request("POST", CHECK_VALIDATED_PATH, body.to_fields())
