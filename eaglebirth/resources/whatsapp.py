"""WhatsApp notifications."""

from typing import Any

from eaglebirth._internal.dispatch import RequestDispatcher
from eaglebirth.models.messaging import SendWhatsAppRequest

SEND_PATH = "/app/messaging/whatsapp/"


class WhatsAppResource:
    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def send(
        self,
        *,
        phone_number: str,
        message: str,
        template: str = "normal_message",
    ) -> Any:
        """Send a WhatsApp message using the given template."""
        body = SendWhatsAppRequest.build(
            phone_number=phone_number,
            message=message,
            template=template,
        )
        return self._dispatcher.request("POST", SEND_PATH, body.to_fields())
