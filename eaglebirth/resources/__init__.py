"""Resource wrappers, one per area of the EagleBirth API."""

from eaglebirth.resources.email import EmailResource
from eaglebirth.resources.otp import OTPResource
from eaglebirth.resources.qr import QRCodeResource
from eaglebirth.resources.sms import SMSResource
from eaglebirth.resources.storage import DirectoryResource, FileResource, StorageResource
from eaglebirth.resources.users import UserManagementResource
from eaglebirth.resources.vision import VisionResource
from eaglebirth.resources.whatsapp import WhatsAppResource

__all__ = [
    "DirectoryResource",
    "EmailResource",
    "FileResource",
    "OTPResource",
    "QRCodeResource",
    "SMSResource",
    "StorageResource",
    "UserManagementResource",
    "VisionResource",
    "WhatsAppResource",
]
