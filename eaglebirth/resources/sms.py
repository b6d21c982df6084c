"""SMS notifications."""

from typing import Any

from eaglebirth._internal.dispatch import RequestDispatcher
from eaglebirth.models import SendingMethod
from eaglebirth.models.messaging import SendSMSRequest, SMSPricesRequest

SEND_PATH = "/app/messaging/sms/"
PRICES_PATH = "/app/messaging/sms/get_prices_for_sms/"


class SMSResource:
    """SMS notification resource."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def send(
        self,
        *,
        phone_number: str,
        message: str,
        sending_method: SendingMethod | None = None,
        provider: str | None = None,
    ) -> Any:
        """Send an SMS message."""
        body = SendSMSRequest.build(
            phone_number=phone_number,
            message=message,
            sending_method=sending_method,
            provider=provider,
        )
        return self._dispatcher.request("POST", SEND_PATH, body.to_fields())

    def get_prices(self, phone_number: str | None = None) -> Any:
        """Get SMS pricing, optionally for a single destination number."""
        body = SMSPricesRequest.build(phone_number=phone_number)
        return self._dispatcher.request("POST", PRICES_PATH, body.to_fields())
