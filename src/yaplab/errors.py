"""
Client Error Taxonomy

Errors raised by the authentication client. None of them are fatal: the
controller and session manager catch them at their boundaries and reduce
each one to a single user-visible message.

    - ValidationError: local input problem, never reaches the network
    - ServerError: non-2xx response (or an unreadable success body)
    - TransportError: the request could not complete
    - SessionSaveError: the session store could not be written
"""

from typing import Optional


class AuthClientError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message


class ValidationError(AuthClientError):
    """A required field is empty or a field has the wrong format."""


class ServerError(AuthClientError):
    """
    The server answered with a non-success status.

    Attributes:
        status_code: HTTP status code of the response
        message: Server-provided message, or None if the body had none
    """

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.message:
            return f"HTTP {self.status_code}: {self.message}"
        return f"HTTP {self.status_code}"


class TransportError(AuthClientError):
    """The request failed before a response arrived (DNS, connect, timeout)."""


class SessionSaveError(AuthClientError):
    """Login succeeded but the session could not be written to the store."""
