"""Pydantic request models for the EagleBirth API.

Each model's field names are the remote API's wire names; resources build a
model from their keyword arguments and send ``model.to_fields()``.
"""

from eaglebirth.models.base import RequestModel
from eaglebirth.models.messaging import SendingMethod
from eaglebirth.models.otp import ValidationType
from eaglebirth.models.qr import ImageType
from eaglebirth.models.storage import YesNo
from eaglebirth.models.users import UserStatus

__all__ = [
    "RequestModel",
    "ImageType",
    "SendingMethod",
    "UserStatus",
    "ValidationType",
    "YesNo",
]
