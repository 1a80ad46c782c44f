"""
YapLab Client Package

This package provides the client-side functionality for the YapLab chat
application: the authentication form state machine, the HTTP client for
the backend, session persistence, and the terminal user interface.

Schemas are organized in the `schemas` subpackage by category:
    - auth: Login, registration and password reset payloads
    - chatroom: Chat rooms, participants and groups
"""

from .api import AuthAPI
from .auth_state import (
    AuthState,
    ForgotPasswordForm,
    LoginForm,
    Mode,
    SignUpForm,
    SubmissionState,
)
from .config import ClientConfig
from .controller import AuthSessionController, SubmitOutcome
from .errors import (
    AuthClientError,
    ServerError,
    SessionSaveError,
    TransportError,
    ValidationError,
)
from .session import SessionManager
from .session_store import SessionStore
from .schemas import (
    # Base classes
    BaseRequest,
    BaseResponse,
    # Auth schemas
    LoginRequest,
    RegisterRequest,
    ForgotPasswordRequest,
    LoginResponse,
    RegisterResponse,
    ErrorResponse,
    # Chat room schemas
    ChatRoom,
    GroupInfo,
    Participant,
)

__all__ = [
    # Service classes
    "AuthAPI",
    "AuthSessionController",
    "SubmitOutcome",
    "SessionManager",
    "SessionStore",
    "ClientConfig",
    # Form state
    "AuthState",
    "Mode",
    "LoginForm",
    "SignUpForm",
    "ForgotPasswordForm",
    "SubmissionState",
    # Errors
    "AuthClientError",
    "ValidationError",
    "ServerError",
    "TransportError",
    "SessionSaveError",
    # Base schema classes
    "BaseRequest",
    "BaseResponse",
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "ForgotPasswordRequest",
    "LoginResponse",
    "RegisterResponse",
    "ErrorResponse",
    # Chat room schemas
    "ChatRoom",
    "GroupInfo",
    "Participant",
]
