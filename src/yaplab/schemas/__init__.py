"""
Schemas Package

This package contains the HTTP payload schemas for client-server communication.
Schemas are organized by category: authentication and chat rooms.

The package provides base classes (BaseRequest, BaseResponse) that eliminate
code duplication for serialization and deserialization methods.
"""

from .base import BaseRequest, BaseResponse, to_camel
from .auth import (
    LoginRequest,
    RegisterRequest,
    ForgotPasswordRequest,
    LoginResponse,
    RegisterResponse,
    ErrorResponse,
)
from .chatroom import ChatRoom, GroupInfo, Participant

__all__ = [
    # Base classes
    "BaseRequest",
    "BaseResponse",
    "to_camel",
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
