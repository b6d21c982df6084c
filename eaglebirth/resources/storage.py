"""Cloud storage: directories and files."""

from typing import Any

from eaglebirth._internal.dispatch import FileInput, RequestDispatcher
from eaglebirth.exceptions import ValidationError
from eaglebirth.models import YesNo
from eaglebirth.models.storage import (
    CreateDirectoryRequest,
    DeleteFileRequest,
    DirectoryRefRequest,
    ListDirectoryRequest,
    RetrieveFileByIdRequest,
    RetrieveFileByPathRequest,
    UpdateDirectoryPasswordRequest,
    UpdateDirectoryPrivacyRequest,
    UpdateFilePasswordRequest,
    UpdateFilePrivacyRequest,
    UploadFileRequest,
)

DIRECTORY_PATH = "/app/storage/directory/"
FILE_PATH = "/app/storage/file/"


class DirectoryResource:
    """Directory management resource."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def create(
        self,
        *,
        path: str,
        private: YesNo = "no",
        directory_password: str | None = None,
    ) -> Any:
        """Create a directory, optionally private and password protected."""
        body = CreateDirectoryRequest.build(
            path=path,
            private=private,
            directory_password=directory_password,
        )
        return self._dispatcher.request("POST", DIRECTORY_PATH, body.to_fields())

    def delete(self, *, directory_id: str | None = None, path: str | None = None) -> Any:
        """Delete a directory by id or path."""
        body = DirectoryRefRequest.build(directory_id=directory_id, path=path)
        return self._dispatcher.request(
            "POST", f"{DIRECTORY_PATH}delete_a_directory/", body.to_fields()
        )

    def list_content(
        self,
        *,
        path: str | None = None,
        directory_id: str | None = None,
        token: str | None = None,
        directory_password: str | None = None,
    ) -> Any:
        """List a directory's content.

        Looks the directory up by ``path`` when given, otherwise by
        ``directory_id``.

        Raises:
            ValidationError: Neither path nor directory_id was provided.
        """
        if path:
            endpoint = f"{DIRECTORY_PATH}list_directory_content/"
            directory_id = None
        elif directory_id:
            endpoint = f"{DIRECTORY_PATH}list_directory_content_from_id/"
        else:
            raise ValidationError("Either path or directory_id must be provided")

        body = ListDirectoryRequest.build(
            path=path,
            directory_id=directory_id,
            token=token,
            directory_password=directory_password,
        )
        return self._dispatcher.request("POST", endpoint, body.to_fields())

    def update_password(
        self,
        *,
        directory_password: str,
        directory_id: str | None = None,
        path: str | None = None,
    ) -> Any:
        body = UpdateDirectoryPasswordRequest.build(
            directory_password=directory_password,
            directory_id=directory_id,
            path=path,
        )
        return self._dispatcher.request(
            "POST", f"{DIRECTORY_PATH}update_directory_password/", body.to_fields()
        )

    def update_privacy(
        self,
        *,
        is_private: YesNo,
        directory_id: str | None = None,
        path: str | None = None,
    ) -> Any:
        body = UpdateDirectoryPrivacyRequest.build(
            is_private=is_private,
            directory_id=directory_id,
            path=path,
        )
        return self._dispatcher.request(
            "POST", f"{DIRECTORY_PATH}update_directory_privacy/", body.to_fields()
        )


class FileResource:
    """File management resource."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def upload(
        self,
        *,
        file: FileInput,
        path: str,
        filename: str | None = None,
        private: YesNo = "no",
        directory_password: str | None = None,
        file_password: str | None = None,
    ) -> Any:
        """Upload a file into a directory.

        Args:
            file: Filesystem path, bytes or binary file object to upload.
            path: Destination directory path.
            filename: Name to store the file under.
            private: Whether the file is private ("yes"/"no").
            directory_password: Password of the destination directory, if set.
            file_password: Password to protect the uploaded file with.

        Returns:
            The API response body.
        """
        body = UploadFileRequest.build(
            path=path,
            private=private,
            filename=filename,
            directory_password=directory_password,
            file_password=file_password,
        )
        return self._dispatcher.request("POST", FILE_PATH, body.to_fields(), {"file": file})

    def retrieve(
        self,
        *,
        file_id: str | None = None,
        path: str | None = None,
        token: str | None = None,
        password: str | None = None,
    ) -> Any:
        """Retrieve a file's content by id (POST) or by path (GET).

        Raises:
            ValidationError: Neither file_id nor path was provided.
        """
        if file_id:
            body = RetrieveFileByIdRequest.build(id=file_id, token=token, password=password)
            return self._dispatcher.request(
                "POST", f"{FILE_PATH}content_from_id/", body.to_fields()
            )
        if path:
            query = RetrieveFileByPathRequest.build(path=path, token=token, password=password)
            return self._dispatcher.request("GET", f"{FILE_PATH}content/", query.to_fields())
        raise ValidationError("Either file_id or path must be provided")

    def delete(
        self,
        *,
        file_id: str | None = None,
        path: str | None = None,
        token: str | None = None,
    ) -> Any:
        body = DeleteFileRequest.build(file_id=file_id, path=path, token=token)
        return self._dispatcher.request("POST", f"{FILE_PATH}delete_a_file/", body.to_fields())

    def update_password(
        self,
        *,
        password: str,
        file_id: str | None = None,
        path: str | None = None,
    ) -> Any:
        body = UpdateFilePasswordRequest.build(password=password, file_id=file_id, path=path)
        return self._dispatcher.request(
            "POST", f"{FILE_PATH}update_file_password/", body.to_fields()
        )

    def update_privacy(
        self,
        *,
        private: YesNo,
        file_id: str | None = None,
        path: str | None = None,
        refresh_token: YesNo = "no",
    ) -> Any:
        """Change a file's privacy, optionally rotating its access token."""
        body = UpdateFilePrivacyRequest.build(
            private=private,
            refresh_token=refresh_token,
            file_id=file_id,
            path=path,
        )
        return self._dispatcher.request(
            "POST", f"{FILE_PATH}update_file_privacy/", body.to_fields()
        )


class StorageResource:
    """Cloud storage resource grouping directory and file operations."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self.directory = DirectoryResource(dispatcher)
        self.file = FileResource(dispatcher)
