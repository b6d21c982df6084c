"""Request models for directory and file storage."""

from typing import Literal

from eaglebirth.models.base import RequestModel

YesNo = Literal["yes", "no"]

# =============================================================================
# Directories
# =============================================================================


class CreateDirectoryRequest(RequestModel):
    path: str
    private: YesNo = "no"
    directory_password: str | None = None


class DirectoryRefRequest(RequestModel):
    directory_id: str | None = None
    path: str | None = None


class ListDirectoryRequest(RequestModel):
    path: str | None = None
    directory_id: str | None = None
    token: str | None = None
    directory_password: str | None = None


class UpdateDirectoryPasswordRequest(RequestModel):
    directory_password: str
    directory_id: str | None = None
    path: str | None = None


class UpdateDirectoryPrivacyRequest(RequestModel):
    is_private: YesNo
    directory_id: str | None = None
    path: str | None = None


# =============================================================================
# Files
# =============================================================================


class UploadFileRequest(RequestModel):
    path: str
    private: YesNo = "no"
    filename: str | None = None
    directory_password: str | None = None
    file_password: str | None = None


class RetrieveFileByIdRequest(RequestModel):
    id: str
    token: str | None = None
    password: str | None = None


class RetrieveFileByPathRequest(RequestModel):
    path: str
    token: str | None = None
    password: str | None = None


class DeleteFileRequest(RequestModel):
    file_id: str | None = None
    path: str | None = None
    token: str | None = None


class UpdateFilePasswordRequest(RequestModel):
    password: str
    file_id: str | None = None
    path: str | None = None


class UpdateFilePrivacyRequest(RequestModel):
    private: YesNo
    refresh_token: YesNo = "no"
    file_id: str | None = None
    path: str | None = None
