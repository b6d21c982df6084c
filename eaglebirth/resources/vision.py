"""Image processing: face details, face comparison and OCR."""

from typing import Any

from eaglebirth._internal.dispatch import FileInput, RequestDispatcher
from eaglebirth.models import ImageType
from eaglebirth.models.vision import CompareFacesRequest, SingleImageRequest
from eaglebirth.resources._media import split_image

FACE_DETAILS_PATH = "/app/image_processing/get_details_from_an_image/"
COMPARE_FACES_PATH = "/app/image_processing/compare_two_faces_in_two_images/"
EXTRACT_TEXT_PATH = "/app/image_processing/get_text_from_image/"


class VisionResource:
    """Image processing/Vision AI resource.

    Images are uploaded as file parts for ``object`` (the default) and sent
    as URL fields for ``link``.
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def extract_face_details(
        self,
        *,
        image: FileInput,
        image_type: ImageType = "object",
    ) -> Any:
        """Extract face details from an image."""
        return self._single_image(FACE_DETAILS_PATH, image, image_type)

    def compare_faces(
        self,
        *,
        image1: FileInput,
        image2: FileInput,
        image1_type: ImageType = "object",
        image2_type: ImageType = "object",
    ) -> Any:
        """Compare the faces found in two images."""
        files: dict[str, FileInput] = {}
        body = CompareFacesRequest.build(
            image1_type=image1_type,
            image2_type=image2_type,
            image1=split_image("image1", image1, image1_type, files),
            image2=split_image("image2", image2, image2_type, files),
        )
        return self._dispatcher.request("POST", COMPARE_FACES_PATH, body.to_fields(), files)

    def extract_text(
        self,
        *,
        image: FileInput,
        image_type: ImageType = "object",
    ) -> Any:
        """Extract text from an image (OCR)."""
        return self._single_image(EXTRACT_TEXT_PATH, image, image_type)

    def _single_image(self, path: str, image: FileInput, image_type: ImageType) -> Any:
        files: dict[str, FileInput] = {}
        body = SingleImageRequest.build(
            image_type=image_type,
            image=split_image("image", image, image_type, files),
        )
        return self._dispatcher.request("POST", path, body.to_fields(), files)
