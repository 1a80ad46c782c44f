"""
Authentication Session Controller

This module drives the authentication form: it switches between the
Login, Sign-Up and Forgot-Password modes, validates input, and turns one
backend call per submission into user-visible state.

Architecture:
    - Holds an AuthState and replaces it through pure transition functions
    - Uses AuthAPI for the single outbound call of each submission
    - Hands a successful login to a session callback (SessionManager.start)
    - Notifies the caller through an on_authenticated callback

Usage:
    controller = AuthSessionController(api, on_session=manager.start)
    controller.set_field("email_id", "alice@example.com")
    controller.set_field("password", "secret")
    outcome = await controller.submit()
"""

import logging
from enum import Enum
from typing import Callable, Optional

from . import auth_state
from .api import AuthAPI
from .auth_state import AuthState, Mode
from .errors import (
    ServerError,
    SessionSaveError,
    TransportError,
    ValidationError,
)
from .schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = (
    "Network error or server unavailable. Please try again later."
)
LOGIN_FAILED_MESSAGE = "Login failed. Please try again."
REGISTER_FAILED_MESSAGE = "Registration failed. Please try again."
REGISTER_SUCCESS_MESSAGE = (
    "Registration successful! Please check your email to verify your account."
)
RESET_FAILED_MESSAGE = "Failed to send reset email. Please try again."
RESET_SENT_MESSAGE = "Password reset link sent to your email!"
SESSION_SAVE_FAILED_MESSAGE = "Could not save your session. Please try again."

_FAILURE_MESSAGES = {
    Mode.LOGIN: LOGIN_FAILED_MESSAGE,
    Mode.SIGN_UP: REGISTER_FAILED_MESSAGE,
    Mode.FORGOT_PASSWORD: RESET_FAILED_MESSAGE,
}


class SubmitOutcome(Enum):
    """Result of a submit() call that was not rejected as re-entrant."""

    INVALID = "invalid"
    SUCCESS = "success"
    FAILED = "failed"


class AuthSessionController:
    """
    State machine behind the authentication form.

    Attributes:
        api: Backend client
        state: Current AuthState; replaced, never mutated
    """

    def __init__(
        self,
        api: AuthAPI,
        on_session: Optional[Callable[[LoginResponse], None]] = None,
        on_authenticated: Optional[Callable[[LoginResponse], None]] = None,
    ):
        """
        Initialize the controller in Login mode.

        Args:
            api: Backend client used for submissions
            on_session: Receives the login result so it can be persisted
            on_authenticated: Called after a successful login
        """
        self.api = api
        self.state = AuthState()
        self._on_session = on_session
        self._on_authenticated = on_authenticated

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def is_submitted(self) -> bool:
        return self.state.is_submitted

    @property
    def message(self) -> str:
        return self.state.message

    def set_on_authenticated(
        self, callback: Callable[[LoginResponse], None]
    ) -> None:
        self._on_authenticated = callback

    def toggle_mode(self) -> None:
        """Switch between Login and Sign-Up with a fresh form."""
        if self.state.is_loading:
            logger.warning("Mode change ignored: a request is in flight")
            return
        self.state = auth_state.toggle_mode(self.state)
        logger.debug(f"Switched to {self.mode.value} mode")

    def request_password_reset(self) -> None:
        """Switch to the Forgot-Password form."""
        if self.state.is_loading:
            logger.warning("Mode change ignored: a request is in flight")
            return
        self.state = auth_state.request_password_reset(self.state)
        logger.debug("Switched to forgot_password mode")

    def set_field(self, name: str, value: str) -> None:
        """
        Update one field of the active form.

        Raises:
            KeyError: If the active form has no such field
        """
        self.state = auth_state.set_field(self.state, name, value)

    async def submit(self) -> Optional[SubmitOutcome]:
        """
        Validate the active form and send it to the backend.

        Returns:
            The outcome, or None if a submission is already in flight
        """
        if self.state.is_loading:
            logger.warning("Submit ignored: a request is already in flight")
            return None

        self.state = auth_state.set_message(self.state, "")
        try:
            request = auth_state.validate_form(self.state.form)
        except ValidationError as e:
            self.state = auth_state.reject_submission(self.state, e.message)
            return SubmitOutcome.INVALID

        mode = self.mode
        self.state = auth_state.begin_submission(self.state)
        try:
            if mode is Mode.LOGIN:
                await self._login(request)
            elif mode is Mode.SIGN_UP:
                await self._register(request)
            else:
                await self._forgot_password(request)
            return SubmitOutcome.SUCCESS
        except ServerError as e:
            self._fail(e.message or _FAILURE_MESSAGES[mode])
            return SubmitOutcome.FAILED
        except TransportError as e:
            logger.error(f"Error during {mode.value} submission: {e}")
            self._fail(NETWORK_ERROR_MESSAGE)
            return SubmitOutcome.FAILED
        except SessionSaveError as e:
            self._fail(e.message)
            return SubmitOutcome.FAILED
        finally:
            self.state = auth_state.end_submission(self.state)

    def _fail(self, message: str) -> None:
        self.state = auth_state.set_message(self.state, message)

    async def _login(self, request: LoginRequest) -> None:
        login = await self.api.login(request)
        if self._on_session:
            try:
                self._on_session(login)
            except OSError as e:
                logger.error(f"Error saving session for user {login.id}: {e}")
                raise SessionSaveError(SESSION_SAVE_FAILED_MESSAGE) from e
        if self._on_authenticated:
            self._on_authenticated(login)

    async def _register(self, request: RegisterRequest) -> None:
        response = await self.api.register(request)
        self.state = auth_state.reset_form(self.state)
        self.state = auth_state.set_message(
            self.state, response.message or REGISTER_SUCCESS_MESSAGE
        )

    async def _forgot_password(self, request: ForgotPasswordRequest) -> None:
        await self.api.forgot_password(request)
        self.state = auth_state.reset_form(self.state)
        self.state = auth_state.set_message(self.state, RESET_SENT_MESSAGE)
