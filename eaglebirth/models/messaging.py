"""Request models for email, SMS and WhatsApp messaging."""

from typing import Literal

from pydantic import Field

from eaglebirth.models.base import RequestModel

SendingMethod = Literal["normal_sms", "email_to_sms"]


class SendEmailRequest(RequestModel):
    email: str = Field(min_length=1)
    subject: str
    message: str
    reply_to: str | None = None
    header: str | None = None
    salutation: str | None = None


class SendSMSRequest(RequestModel):
    phone_number: str = Field(min_length=1)
    message: str
    sending_method: SendingMethod | None = None
    provider: str | None = None


class SMSPricesRequest(RequestModel):
    phone_number: str | None = None


class SendWhatsAppRequest(RequestModel):
    phone_number: str = Field(min_length=1)
    message: str
    template: str = "normal_message"
