"""Request models for one-time-password verification."""

from typing import Literal

from pydantic import Field

from eaglebirth.models.base import RequestModel

ValidationType = Literal["email", "sms", "whatsapp", "whatsapp_return"]

DEFAULT_CODE_LENGTH = 6
DEFAULT_CODE_TIMEOUT = 180
DEFAULT_TRIALS = 3


class SendOTPRequest(RequestModel):
    """Send a verification code over email, SMS or WhatsApp."""

    validation_type: ValidationType
    email: str | None = None
    phone_number: str | None = None
    provider: str | None = None
    code_length: int = Field(default=DEFAULT_CODE_LENGTH, gt=0)
    timeout: int = Field(default=DEFAULT_CODE_TIMEOUT, gt=0)
    trials: int = Field(default=DEFAULT_TRIALS, gt=0)


class ValidateOTPRequest(RequestModel):
    code_id: str
    code: str


class CheckValidatedRequest(RequestModel):
    code_id: str
