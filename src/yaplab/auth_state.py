"""
Authentication Form State

This module holds the state of the authentication form as plain data plus
pure transition functions, independent of any rendering layer.

Architecture:
    - One dataclass per mode, each carrying only its own fields
    - AuthState.form holds exactly one of them; the mode is derived from it
    - Transitions return new AuthState objects and never mutate their input
    - Validation is local and raises ValidationError before any network use

Usage:
    state = AuthState()
    state = set_field(state, "email_id", "alice@example.com")
    state = toggle_mode(state)          # Login -> SignUp, fresh form
    validate_form(state.form)           # raises ValidationError if invalid
"""

import re
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Union

from .errors import ValidationError
from .schemas import (
    BaseRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
)

MISSING_FIELDS_MESSAGE = "Please fill all the fields."
INVALID_MOBILE_MESSAGE = "Mobile number must be a 10-digit number"

_MOBILE_PATTERN = re.compile(r"[0-9]{10}")


class Mode(Enum):
    """Active variant of the authentication form."""

    LOGIN = "login"
    SIGN_UP = "sign_up"
    FORGOT_PASSWORD = "forgot_password"


@dataclass(frozen=True)
class LoginForm:
    """Fields of the login form."""

    email_id: str = ""
    password: str = ""

    def to_request(self) -> LoginRequest:
        return LoginRequest(email_id=self.email_id, password=self.password)


@dataclass(frozen=True)
class SignUpForm:
    """Fields of the registration form."""

    user_name: str = ""
    email_id: str = ""
    mobile_number: str = ""
    password: str = ""

    def to_request(self) -> RegisterRequest:
        return RegisterRequest(
            user_name=self.user_name,
            email_id=self.email_id,
            mobile_number=self.mobile_number,
            password=self.password,
        )


@dataclass(frozen=True)
class ForgotPasswordForm:
    """Fields of the password reset form."""

    email_id: str = ""

    def to_request(self) -> ForgotPasswordRequest:
        return ForgotPasswordRequest(email_id=self.email_id)


AuthForm = Union[LoginForm, SignUpForm, ForgotPasswordForm]

_FORM_MODES = {
    LoginForm: Mode.LOGIN,
    SignUpForm: Mode.SIGN_UP,
    ForgotPasswordForm: Mode.FORGOT_PASSWORD,
}


@dataclass(frozen=True)
class SubmissionState:
    """
    Progress of the current submission.

    Attributes:
        is_loading: A request is in flight; further submits are rejected
        is_submitted: The last submit passed validation and was sent
        message: User-visible status or error text, empty when none
    """

    is_loading: bool = False
    is_submitted: bool = False
    message: str = ""


@dataclass(frozen=True)
class AuthState:
    """
    Complete state of the authentication form.

    Attributes:
        form: The active form; its type determines the mode
        submission: Loading flag, submitted flag and message
    """

    form: AuthForm = field(default_factory=LoginForm)
    submission: SubmissionState = field(default_factory=SubmissionState)

    @property
    def mode(self) -> Mode:
        return _FORM_MODES[type(self.form)]

    @property
    def is_loading(self) -> bool:
        return self.submission.is_loading

    @property
    def is_submitted(self) -> bool:
        return self.submission.is_submitted

    @property
    def message(self) -> str:
        return self.submission.message


def _enter(form: AuthForm) -> AuthState:
    return AuthState(form=form, submission=SubmissionState())


def toggle_mode(state: AuthState) -> AuthState:
    """
    Switch between Login and SignUp.

    The form being entered always starts empty. From ForgotPassword the
    toggle returns to Login. Message and submitted flag are cleared.
    """
    if state.mode is Mode.LOGIN:
        return _enter(SignUpForm())
    return _enter(LoginForm())


def request_password_reset(state: AuthState) -> AuthState:
    """Switch to the ForgotPassword form from any mode, with an empty form."""
    return _enter(ForgotPasswordForm())


def set_field(state: AuthState, name: str, value: str) -> AuthState:
    """
    Update one field of the active form.

    Raises:
        KeyError: If the active form has no field with this name
    """
    if name not in {f.name for f in fields(state.form)}:
        raise KeyError(f"{state.mode.value} form has no field '{name}'")
    return replace(state, form=replace(state.form, **{name: value}))


def reject_submission(state: AuthState, message: str) -> AuthState:
    """Report a validation failure; nothing counts as submitted."""
    return replace(state, submission=SubmissionState(message=message))


def set_message(state: AuthState, message: str) -> AuthState:
    return replace(state, submission=replace(state.submission, message=message))


def begin_submission(state: AuthState) -> AuthState:
    """Mark the state as submitted and loading, with no message."""
    return replace(
        state,
        submission=SubmissionState(is_loading=True, is_submitted=True),
    )


def end_submission(state: AuthState) -> AuthState:
    return replace(
        state, submission=replace(state.submission, is_loading=False)
    )


def reset_form(state: AuthState) -> AuthState:
    """Replace the active form with an empty one of the same mode."""
    return replace(state, form=type(state.form)())


def validate_form(form: AuthForm) -> BaseRequest:
    """
    Validate a form and build the request it submits.

    Args:
        form: The active form

    Returns:
        The request payload for the form's endpoint

    Raises:
        ValidationError: If a field is empty or the mobile number is malformed
    """
    for f in fields(form):
        if not getattr(form, f.name).strip():
            raise ValidationError(MISSING_FIELDS_MESSAGE)

    if isinstance(form, SignUpForm):
        if not _MOBILE_PATTERN.fullmatch(form.mobile_number):
            raise ValidationError(INVALID_MOBILE_MESSAGE)

    return form.to_request()
