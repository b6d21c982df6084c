"""Request model for QR code generation."""

from typing import Literal

from eaglebirth.models.base import RequestModel

ImageType = Literal["object", "link"]


class GenerateQRRequest(RequestModel):
    """Text fields of a QR request.

    An embedded logo travels either as ``image`` (a URL, for ``link``) or as
    a separate file part (for ``object``).
    """

    text: str
    color: str | None = None
    background_color: str | None = None
    qr_type: str | None = None
    image_type: ImageType | None = None
    image: str | None = None
