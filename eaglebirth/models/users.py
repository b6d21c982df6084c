"""Request models for app-user management."""

from typing import Literal

from pydantic import Field

from eaglebirth.models.base import RequestModel

UserStatus = Literal["active", "suspended", "pending", "deleted"]


class UserRefRequest(RequestModel):
    """Identifies a user by username or user_id."""

    username: str | None = None
    user_id: str | None = None


class UserLookupRequest(UserRefRequest):
    authentication_type: str | None = None
    authentication_type_id: str | None = None


class UserProfileRequest(UserLookupRequest):
    """Profile fields shared by create and update."""

    email: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    birth: str | None = None
    referer_id: str | None = None


class CreateUserRequest(UserProfileRequest):
    password: str | None = None


class ListUsersRequest(RequestModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)


class SignInRequest(RequestModel):
    username: str | None = None
    password: str | None = None
    authentication_type: str | None = None
    authentication_type_id: str | None = None
    code: str | None = None
    code_verifier: str | None = None


class SignOutRequest(RequestModel):
    refresh_token: str


class RefreshTokenRequest(RequestModel):
    refresh: str


class VerifyTokenRequest(RequestModel):
    token: str


class UpdateUserPasswordRequest(UserRefRequest):
    password: str


class ResetPasswordRequest(RequestModel):
    code: str
    code_id: str
    password: str


class UpdateUserStatusRequest(UserRefRequest):
    status: UserStatus


class UpdateUserTypeRequest(UserRefRequest):
    type: str


class VerificationCodeRequest(RequestModel):
    code: str
    code_id: str


class ExchangeCodeRequest(RequestModel):
    code: str
    code_verifier: str
