"""
Authentication API Client

This module provides the HTTP client for the YapLab backend. It posts the
authentication forms and fetches the chat rooms of a logged-in user.

Architecture:
    - Uses httpx.AsyncClient for non-blocking request/response calls
    - Supports dependency injection for the transport layer (for testability)
    - Every request carries a timeout; expiry is reported as TransportError
    - Non-success responses are raised as ServerError with the server's message
"""

import json
import logging
from typing import Any, List, Optional

import httpx

from .errors import ServerError, TransportError
from .schemas import (
    BaseRequest,
    ChatRoom,
    ErrorResponse,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class AuthAPI:
    """
    Client for the authentication and chat room endpoints.

    Attributes:
        base_url: Root URL of the backend (e.g., http://localhost:8080)
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Root URL of the backend
            timeout: Per-request timeout in seconds
            transport: Optional transport (for dependency injection/testing)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

        logger.info(f"AuthAPI initialized for backend: {self.base_url}")

    async def __aenter__(self) -> "AuthAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Log in with email and password.

        Returns:
            LoginResponse with the user ID and access token

        Raises:
            ServerError: If the credentials are rejected or the body is invalid
            TransportError: If the backend cannot be reached
        """
        logger.info(f"Sending login request for {request.email_id}")
        response = await self._post(request)
        data = self._decode(response)
        try:
            login = LoginResponse.from_dict(data)
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed login response: {e}")
            raise ServerError(response.status_code) from e
        logger.info(f"Logged in as user {login.id}")
        return login

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new account.

        Returns:
            RegisterResponse, possibly carrying a confirmation message

        Raises:
            ServerError: If registration is rejected
            TransportError: If the backend cannot be reached
        """
        logger.info(f"Sending register request for {request.email_id}")
        response = await self._post(request)
        data = self._decode(response, required=False)
        if not isinstance(data, dict):
            # 2xx with an empty or non-object body still means success
            return RegisterResponse()
        return RegisterResponse.from_dict(data)

    async def forgot_password(self, request: ForgotPasswordRequest) -> None:
        """
        Ask the backend to email a password reset link.

        Raises:
            ServerError: If the request is rejected
            TransportError: If the backend cannot be reached
        """
        logger.info(f"Sending password reset request for {request.email_id}")
        await self._post(request)

    async def get_user_chatrooms(self, user_id: int, token: str) -> List[ChatRoom]:
        """
        Fetch the chat rooms the user belongs to.

        Args:
            user_id: Numeric user ID
            token: Bearer access token from login

        Returns:
            List of ChatRoom objects

        Raises:
            ServerError: If the request is rejected or the body is invalid
            TransportError: If the backend cannot be reached
        """
        logger.info(f"Fetching chat rooms for user {user_id}")
        response = await self._send(
            "GET",
            f"/chatrooms/user/{user_id}",
            headers={"Authorization": f"Bearer {token}"},
        )
        data = self._decode(response)
        if not isinstance(data, list):
            raise ServerError(response.status_code)
        try:
            rooms = [ChatRoom.from_dict(item) for item in data]
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed chat room list: {e}")
            raise ServerError(response.status_code) from e
        logger.info(f"Received {len(rooms)} chat rooms")
        return rooms

    async def _post(self, request: BaseRequest) -> httpx.Response:
        return await self._send("POST", request.endpoint, json=request.to_dict())

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Send one request and raise for non-success statuses.

        Raises:
            ServerError: If the response status is not 2xx
            TransportError: If no response was received
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"{method} {path} timed out after {self.timeout}s")
            raise TransportError(f"Request timed out: {path}") from e
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise TransportError(f"Request failed: {path}") from e

        if not response.is_success:
            message = self._error_message(response)
            logger.warning(
                f"{method} {path} returned {response.status_code}: {message}"
            )
            raise ServerError(response.status_code, message)

        return response

    @staticmethod
    def _decode(response: httpx.Response, required: bool = True) -> Any:
        """
        Decode a JSON response body.

        Raises:
            ServerError: If the body is not JSON and required is True
        """
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            if not required:
                return None
            logger.error(f"Response body is not JSON: {e}")
            raise ServerError(response.status_code) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Extract the server-provided message from an error body, if any."""
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return ErrorResponse.from_dict(data).message
