"""
Authentication Schema Definitions

This module defines the request and response payloads for the
authentication endpoints: login, registration and password reset.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import BaseRequest, BaseResponse


@dataclass
class LoginRequest(BaseRequest):
    """
    Credentials posted to the login endpoint.

    Attributes:
        email_id: Email address of the account
        password: Account password
    """

    email_id: str
    password: str

    @property
    def endpoint(self) -> str:
        """Return the path for login requests."""
        return "/auth/login"

    def __repr__(self) -> str:
        return f"LoginRequest(email_id={self.email_id!r}, password='***')"


@dataclass
class RegisterRequest(BaseRequest):
    """
    Registration payload for a new account.

    Attributes:
        user_name: Display name of the new user
        email_id: Email address, used to log in and verify the account
        mobile_number: 10-digit mobile number
        password: Chosen password
    """

    user_name: str
    email_id: str
    mobile_number: str
    password: str

    @property
    def endpoint(self) -> str:
        """Return the path for registration requests."""
        return "/auth/register"

    def __repr__(self) -> str:
        return (
            f"RegisterRequest(user_name={self.user_name!r}, "
            f"email_id={self.email_id!r}, "
            f"mobile_number={self.mobile_number!r}, password='***')"
        )


@dataclass
class ForgotPasswordRequest(BaseRequest):
    """Request a password reset link for an email address."""

    email_id: str

    @property
    def endpoint(self) -> str:
        """Return the path for password reset requests."""
        return "/auth/forgot-password"


@dataclass
class LoginResponse(BaseResponse):
    """
    Successful login payload.

    Attributes:
        id: Numeric user ID
        access_token: Bearer token for authenticated calls
        user_name: Display name of the user
        email_id: Email address of the user
        mobile_number: Mobile number of the user
        status: Presence status reported by the server
        refresh_token: Token for obtaining a new access token
        profile_picture_url: URL of the user's avatar
    """

    id: int
    access_token: str
    user_name: Optional[str] = None
    email_id: Optional[str] = None
    mobile_number: Optional[str] = None
    status: Optional[str] = None
    refresh_token: Optional[str] = None
    profile_picture_url: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "LoginResponse":
        """Create from response data, requiring id and accessToken."""
        access_token = data["accessToken"]
        if not isinstance(access_token, str) or not access_token:
            raise ValueError("LoginResponse has no usable accessToken")
        return cls(
            id=int(data["id"]),
            access_token=access_token,
            user_name=data.get("userName"),
            email_id=data.get("emailId"),
            mobile_number=data.get("mobileNumber"),
            status=data.get("status"),
            refresh_token=data.get("refreshToken"),
            profile_picture_url=data.get("profilePictureUrl"),
        )

    def __repr__(self) -> str:
        return f"LoginResponse(id={self.id!r}, user_name={self.user_name!r})"


@dataclass
class RegisterResponse(BaseResponse):
    """
    Successful registration payload.

    The server may answer with a confirmation message, the created user,
    or both. Every field is optional.
    """

    message: Optional[str] = None
    id: Optional[int] = None
    user_name: Optional[str] = None
    email_id: Optional[str] = None
    mobile_number: Optional[str] = None
    status: Optional[str] = None
    profile_picture_url: Optional[str] = None


@dataclass
class ErrorResponse(BaseResponse):
    """Body of a non-success response."""

    message: Optional[str] = None

    @classmethod
    def _from_data(cls, data: Dict[str, Any]) -> "ErrorResponse":
        """Keep the message only if it is a non-empty string."""
        message = data.get("message")
        if not isinstance(message, str) or not message.strip():
            message = None
        return cls(message=message)
