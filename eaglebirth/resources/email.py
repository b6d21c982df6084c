"""Email notifications."""

from typing import Any

from eaglebirth._internal.dispatch import RequestDispatcher
from eaglebirth.models.messaging import SendEmailRequest

SEND_PATH = "/app/messaging/email/"


class EmailResource:
    """Email notification resource."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def send(
        self,
        *,
        email: str,
        subject: str,
        message: str,
        reply_to: str | None = None,
        header: str | None = None,
        salutation: str | None = None,
    ) -> Any:
        """Send an email.

        Args:
            email: Recipient address.
            subject: Subject line.
            message: Message body.
            reply_to: Optional Reply-To address.
            header: Optional header text shown above the message.
            salutation: Optional greeting line.

        Returns:
            The API response body.
        """
        body = SendEmailRequest.build(
            email=email,
            subject=subject,
            message=message,
            reply_to=reply_to,
            header=header,
            salutation=salutation,
        )
        return self._dispatcher.request("POST", SEND_PATH, body.to_fields())
