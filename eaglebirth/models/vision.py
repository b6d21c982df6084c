"""Request models for image processing."""

from eaglebirth.models.base import RequestModel
from eaglebirth.models.qr import ImageType


class SingleImageRequest(RequestModel):
    image_type: ImageType = "object"
    image: str | None = None


class CompareFacesRequest(RequestModel):
    image1_type: ImageType = "object"
    image2_type: ImageType = "object"
    image1: str | None = None
    image2: str | None = None
