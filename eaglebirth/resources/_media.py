"""Routing of image inputs to either a URL field or a file part."""

from eaglebirth._internal.dispatch import FileInput
from eaglebirth.exceptions import ValidationError
from eaglebirth.models import ImageType


def split_image(
    name: str,
    image: FileInput,
    image_type: ImageType,
    files: dict[str, FileInput],
) -> str | None:
    """Place an image for upload.

    ``object`` images are added to ``files`` under ``name``. ``link`` images
    must be URL strings and are returned so the caller can send them as a
    text field.
    """
    if image_type == "link":
        if not isinstance(image, str):
            raise ValidationError(f"{name} must be a URL string when its type is 'link'")
        return image
    files[name] = image
    return None
