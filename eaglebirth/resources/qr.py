"""QR code generation."""

from typing import Any

from eaglebirth._internal.dispatch import FileInput, RequestDispatcher
from eaglebirth.models import ImageType
from eaglebirth.models.qr import GenerateQRRequest
from eaglebirth.resources._media import split_image

GENERATE_PATH = "/app/qr_code_generator/"


class QRCodeResource:
    """QR code generation resource."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def generate(
        self,
        *,
        text: str,
        image: FileInput | None = None,
        image_type: ImageType | None = None,
        color: str | None = None,
        background_color: str | None = None,
        qr_type: str | None = None,
    ) -> Any:
        """Generate a QR code.

        Args:
            text: Content encoded in the QR code.
            image: Optional logo placed in the center. A path, bytes or file
                object for ``object``; a URL for ``link``.
            image_type: How ``image`` is supplied. Defaults to ``object``
                when an image is given.
            color: Foreground color, e.g. ``#000000``.
            background_color: Background color.
            qr_type: Rendering style.

        Returns:
            The API response body.
        """
        files: dict[str, FileInput] = {}
        link = None
        if image is not None:
            image_type = image_type or "object"
            link = split_image("image", image, image_type, files)

        body = GenerateQRRequest.build(
            text=text,
            color=color,
            background_color=background_color,
            qr_type=qr_type,
            image_type=image_type,
            image=link,
        )
        return self._dispatcher.request("POST", GENERATE_PATH, body.to_fields(), files)
