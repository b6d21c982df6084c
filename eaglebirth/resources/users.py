"""App-user management: CRUD, sessions and verification."""

from typing import Any

from eaglebirth._internal.dispatch import RequestDispatcher
from eaglebirth.models import UserStatus
from eaglebirth.models.base import RequestModel
from eaglebirth.models.users import (
    CreateUserRequest,
    ExchangeCodeRequest,
    ListUsersRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
    SignInRequest,
    SignOutRequest,
    UpdateUserPasswordRequest,
    UpdateUserStatusRequest,
    UpdateUserTypeRequest,
    UserLookupRequest,
    UserProfileRequest,
    UserRefRequest,
    VerificationCodeRequest,
    VerifyTokenRequest,
)

USERS_PATH = "/app/users/"


class UserManagementResource:
    """User Management resource for operations on application users.

    Most methods identify the target user by ``username`` or ``user_id``.
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _post(self, action: str, body: RequestModel) -> Any:
        return self._dispatcher.request("POST", f"{USERS_PATH}{action}", body.to_fields())

    def create(
        self,
        *,
        email: str | None = None,
        username: str | None = None,
        first_name: str | None = None,
        middle_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        birth: str | None = None,
        password: str | None = None,
        referer_id: str | None = None,
        authentication_type: str | None = None,
        authentication_type_id: str | None = None,
    ) -> Any:
        """Create a new app user."""
        body = CreateUserRequest.build(
            email=email,
            username=username,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            phone=phone,
            birth=birth,
            password=password,
            referer_id=referer_id,
            authentication_type=authentication_type,
            authentication_type_id=authentication_type_id,
        )
        return self._post("", body)

    def get(
        self,
        *,
        username: str | None = None,
        user_id: str | None = None,
        authentication_type: str | None = None,
        authentication_type_id: str | None = None,
    ) -> Any:
        """Get a single user's details."""
        body = UserLookupRequest.build(
            username=username,
            user_id=user_id,
            authentication_type=authentication_type,
            authentication_type_id=authentication_type_id,
        )
        return self._post("get_app_user/", body)

    def list(self, page: int = 1, limit: int = 20) -> Any:
        """List app users, one page at a time."""
        return self._post("get_app_users/", ListUsersRequest.build(page=page, limit=limit))

    def update(
        self,
        *,
        username: str | None = None,
        user_id: str | None = None,
        email: str | None = None,
        first_name: str | None = None,
        middle_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        birth: str | None = None,
        referer_id: str | None = None,
        authentication_type: str | None = None,
        authentication_type_id: str | None = None,
    ) -> Any:
        """Update user details. Only the given fields are sent."""
        body = UserProfileRequest.build(
            username=username,
            user_id=user_id,
            email=email,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            phone=phone,
            birth=birth,
            referer_id=referer_id,
            authentication_type=authentication_type,
            authentication_type_id=authentication_type_id,
        )
        return self._post("update_app_user/", body)

    def delete(self, *, username: str | None = None, user_id: str | None = None) -> Any:
        return self._post(
            "delete_app_user/", UserRefRequest.build(username=username, user_id=user_id)
        )

    def exists(
        self,
        *,
        username: str | None = None,
        user_id: str | None = None,
        authentication_type: str | None = None,
        authentication_type_id: str | None = None,
    ) -> Any:
        """Check if a user exists."""
        body = UserLookupRequest.build(
            username=username,
            user_id=user_id,
            authentication_type=authentication_type,
            authentication_type_id=authentication_type_id,
        )
        return self._post("check_if_app_user_exists/", body)

    def sign_in(
        self,
        *,
        username: str | None = None,
        password: str | None = None,
        authentication_type: str | None = None,
        authentication_type_id: str | None = None,
        code: str | None = None,
        code_verifier: str | None = None,
    ) -> Any:
        """Sign a user in with a password or an authorization code."""
        body = SignInRequest.build(
            username=username,
            password=password,
            authentication_type=authentication_type,
            authentication_type_id=authentication_type_id,
            code=code,
            code_verifier=code_verifier,
        )
        return self._post("sign_app_user_in/", body)

    def sign_out(self, refresh_token: str) -> Any:
        return self._post(
            "sign_app_user_out/", SignOutRequest.build(refresh_token=refresh_token)
        )

    def refresh_token(self, refresh: str) -> Any:
        """Refresh a user's session token."""
        return self._post("refresh_signin_token/", RefreshTokenRequest.build(refresh=refresh))

    def verify_token(self, token: str) -> Any:
        """Verify that a session token is still valid."""
        return self._post("verify_signin_token/", VerifyTokenRequest.build(token=token))

    def update_password(
        self,
        *,
        password: str,
        username: str | None = None,
        user_id: str | None = None,
    ) -> Any:
        """Set a user's password (admin action)."""
        body = UpdateUserPasswordRequest.build(
            password=password, username=username, user_id=user_id
        )
        return self._post("update_app_user_password/", body)

    def reset_password(self, *, code: str, code_id: str, password: str) -> Any:
        """Reset a password with a verification code (self-service)."""
        body = ResetPasswordRequest.build(code=code, code_id=code_id, password=password)
        return self._post("reset_password_for_app_user/", body)

    def update_status(
        self,
        *,
        status: UserStatus,
        username: str | None = None,
        user_id: str | None = None,
    ) -> Any:
        body = UpdateUserStatusRequest.build(
            status=status, username=username, user_id=user_id
        )
        return self._post("update_app_user_status/", body)

    def update_type(
        self,
        *,
        type: str,
        username: str | None = None,
        user_id: str | None = None,
    ) -> Any:
        """Update a user's type/role."""
        body = UpdateUserTypeRequest.build(type=type, username=username, user_id=user_id)
        return self._post("update_app_user_type/", body)

    def reactivate(self, *, username: str | None = None, user_id: str | None = None) -> Any:
        """Reactivate a deactivated user."""
        return self._post(
            "reactivate_app_user/", UserRefRequest.build(username=username, user_id=user_id)
        )

    def send_verification_code(
        self,
        *,
        username: str | None = None,
        user_id: str | None = None,
    ) -> Any:
        """Email a verification code to the user."""
        return self._post(
            "send_code_via_email_to_app_user/",
            UserRefRequest.build(username=username, user_id=user_id),
        )

    def validate_verification_code(self, *, code: str, code_id: str) -> Any:
        """Validate a code sent by ``send_verification_code``."""
        body = VerificationCodeRequest.build(code=code, code_id=code_id)
        return self._post("validate_code_via_email_for_app_user/", body)

    def exchange_code_for_user(self, code: str, code_verifier: str) -> Any:
        """Exchange an authorization code for user session data (OAuth PKCE).

        Used after a user signs in through the hosted auth UI, which
        redirects back to the app with a ``code``.

        Args:
            code: Authorization code from the OAuth redirect.
            code_verifier: PKCE verifier matching the original code_challenge.

        Returns:
            Session data with access/refresh tokens and user information.
        """
        body = ExchangeCodeRequest.build(code=code, code_verifier=code_verifier)
        return self._post("sign_app_user_in/", body)
