"""
YapLab Application UI

Main application class for the YapLab terminal UI.
Built using the Textual framework.
"""

import logging
from typing import Dict, List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Static,
)

from ..api import AuthAPI
from ..auth_state import Mode
from ..config import ClientConfig
from ..controller import AuthSessionController, SubmitOutcome
from ..schemas import ChatRoom, LoginResponse
from ..session import SessionManager
from ..session_store import SessionStore

logger = logging.getLogger(__name__)

# Input widget IDs for each form field, per mode
FIELD_INPUTS: Dict[Mode, Dict[str, str]] = {
    Mode.LOGIN: {
        "email_id": "login-email-input",
        "password": "login-password-input",
    },
    Mode.SIGN_UP: {
        "user_name": "signup-name-input",
        "email_id": "signup-email-input",
        "mobile_number": "signup-mobile-input",
        "password": "signup-password-input",
    },
    Mode.FORGOT_PASSWORD: {
        "email_id": "forgot-email-input",
    },
}

FORM_CONTAINERS = {
    Mode.LOGIN: "login-form",
    Mode.SIGN_UP: "signup-form",
    Mode.FORGOT_PASSWORD: "forgot-form",
}

HEADINGS = {
    Mode.LOGIN: "Login",
    Mode.SIGN_UP: "Sign up",
    Mode.FORGOT_PASSWORD: "Reset Password",
}

SUBMIT_LABELS = {
    Mode.LOGIN: "Login",
    Mode.SIGN_UP: "Sign Up",
    Mode.FORGOT_PASSWORD: "Send Reset Link",
}

_INPUT_FIELDS = {
    input_id: (mode, field_name)
    for mode, inputs in FIELD_INPUTS.items()
    for field_name, input_id in inputs.items()
}


class AuthScreen(Container):
    """Screen with the login, sign-up and password reset forms."""

    def compose(self) -> ComposeResult:
        """Compose the authentication screen."""
        yield Static(
            "[bold blue]YapLab[/]",
            id="title",
            classes="screen-title",
        )
        yield Static("Login", id="auth-heading", classes="subtitle")
        with Vertical(id="login-form", classes="auth-form"):
            yield Input(
                placeholder="Enter your Email Id", id="login-email-input"
            )
            yield Input(
                placeholder="Enter Password",
                password=True,
                id="login-password-input",
            )
        with Vertical(id="signup-form", classes="auth-form"):
            yield Input(placeholder="Enter your name", id="signup-name-input")
            yield Input(
                placeholder="Enter your Email Id", id="signup-email-input"
            )
            yield Input(
                placeholder="Enter your Mobile Number",
                id="signup-mobile-input",
            )
            yield Input(
                placeholder="Enter Password",
                password=True,
                id="signup-password-input",
            )
        with Vertical(id="forgot-form", classes="auth-form"):
            yield Input(
                placeholder="Enter your Email Id", id="forgot-email-input"
            )
        with Horizontal(classes="button-row"):
            yield Button("Login", id="submit-btn", variant="primary")
            yield Button("Show password", id="show-password-btn")
        yield Static("", id="auth-status", classes="status-message")
        with Horizontal(classes="button-row"):
            yield Label("Don't have an account?", id="toggle-prompt")
            yield Button("Sign up", id="toggle-mode-btn", variant="default")
            yield Button(
                "Forgot password?", id="forgot-password-btn", variant="default"
            )


class ChatListScreen(Container):
    """Screen listing the user's chat rooms."""

    def compose(self) -> ComposeResult:
        """Compose the chat list screen."""
        yield Static(
            "[bold blue]Your Chats[/]",
            id="chats-title",
            classes="screen-title",
        )
        with Horizontal(id="chat-actions"):
            yield Input(placeholder="Search", id="search-input")
            yield Button("Refresh", id="refresh-btn", variant="default")
            yield Button("Logout", id="logout-btn", variant="warning")
        yield DataTable(id="chat-table")
        yield Static("", id="chat-status", classes="status-message")


class YapLabApp(App):
    """Main YapLab application."""

    CSS = """
    Screen {
        layout: vertical;
    }

    .screen-title {
        text-align: center;
        padding: 1 0;
        text-style: bold;
    }

    .subtitle {
        text-align: center;
        padding: 0 0 1 0;
    }

    AuthScreen {
        align: center middle;
    }

    .auth-form {
        align: center middle;
        width: 60;
        height: auto;
    }

    .auth-form Input {
        margin: 0 0 1 0;
    }

    .button-row {
        height: 3;
        margin: 1 0 0 0;
    }

    .button-row Button {
        margin: 0 1 0 0;
    }

    .status-message {
        text-align: center;
        padding: 1;
    }

    ChatListScreen {
        padding: 1;
    }

    #chat-actions {
        height: 3;
        padding: 0 0 1 0;
    }

    #search-input {
        width: 1fr;
    }

    #chat-actions Button {
        margin: 0 0 0 1;
    }

    #chat-table {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "refresh_chats", "Refresh", show=False),
    ]

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        api: Optional[AuthAPI] = None,
        store: Optional[SessionStore] = None,
    ) -> None:
        """Initialize the application and its session objects."""
        super().__init__()
        self.config = config or ClientConfig()
        self.api = api or AuthAPI(self.config.api_url, timeout=self.config.timeout)
        self.store = store or SessionStore(self.config.session_file)
        self.session = SessionManager(self.api, self.store)
        self.controller = AuthSessionController(
            self.api,
            on_session=self.session.start,
            on_authenticated=self._on_authenticated,
        )
        self.user_name: Optional[str] = None
        self._current_screen = "auth"
        self._last_outcome: Optional[SubmitOutcome] = None

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()
        yield AuthScreen(id="auth-screen")
        yield ChatListScreen(id="chat-list-screen")
        yield Footer()

    async def on_mount(self) -> None:
        """Resume a stored session or show the login form."""
        if self.session.restore():
            await self._enter_chats()
        else:
            self._show_screen("auth")
            self._sync_auth_form()

    async def on_unmount(self) -> None:
        await self.api.aclose()

    def _show_screen(self, screen_name: str) -> None:
        """Show a specific screen and hide others."""
        screens = {
            "auth": "auth-screen",
            "chats": "chat-list-screen",
        }

        for name, screen_id in screens.items():
            try:
                screen = self.query_one(f"#{screen_id}")
                screen.display = name == screen_name
            except NoMatches:
                pass

        self._current_screen = screen_name

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press events."""
        button_id = event.button.id

        if button_id == "submit-btn":
            await self._handle_submit()
        elif button_id == "toggle-mode-btn":
            self.controller.toggle_mode()
            self._sync_auth_form()
        elif button_id == "forgot-password-btn":
            self.controller.request_password_reset()
            self._sync_auth_form()
        elif button_id == "show-password-btn":
            self._toggle_password_visibility()
        elif button_id == "refresh-btn":
            await self._refresh_chats()
        elif button_id == "logout-btn":
            self._handle_logout()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submit events (Enter key)."""
        if event.input.id in _INPUT_FIELDS:
            await self._handle_submit()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Mirror form inputs into the controller state."""
        input_id = event.input.id
        if input_id == "search-input":
            self._render_chats(self.session.search_chats(event.value))
            return

        target = _INPUT_FIELDS.get(input_id)
        if target is None:
            return
        mode, field_name = target
        if mode is self.controller.mode:
            self.controller.set_field(field_name, event.value)

    async def action_refresh_chats(self) -> None:
        if self._current_screen == "chats":
            await self._refresh_chats()

    def _on_authenticated(self, login: LoginResponse) -> None:
        self.user_name = login.user_name
        logger.info(f"Authenticated as user {login.id}")

    async def _handle_submit(self) -> None:
        """Submit the active form and show the result."""
        if self.controller.is_loading:
            return

        submit_btn = self.query_one("#submit-btn", Button)
        submit_btn.disabled = True
        submit_btn.label = "...Loading"
        try:
            outcome = await self.controller.submit()
        finally:
            submit_btn.disabled = False
        self._last_outcome = outcome

        if outcome is SubmitOutcome.SUCCESS and self.session.is_authenticated:
            await self._enter_chats()
        else:
            self._sync_auth_form()

    def _sync_auth_form(self) -> None:
        """Render the controller state into the auth screen widgets."""
        mode = self.controller.mode
        state = self.controller.state

        for form_mode, container_id in FORM_CONTAINERS.items():
            self.query_one(f"#{container_id}").display = form_mode is mode

        for field_name, input_id in FIELD_INPUTS[mode].items():
            widget = self.query_one(f"#{input_id}", Input)
            value = getattr(state.form, field_name)
            if widget.value != value:
                widget.value = value

        self.query_one("#auth-heading", Static).update(HEADINGS[mode])
        self.query_one("#submit-btn", Button).label = SUBMIT_LABELS[mode]
        self.query_one("#show-password-btn").display = (
            mode is not Mode.FORGOT_PASSWORD
        )
        self.query_one("#forgot-password-btn").display = mode is Mode.LOGIN
        toggle_btn = self.query_one("#toggle-mode-btn", Button)
        prompt = self.query_one("#toggle-prompt", Label)
        if mode is Mode.LOGIN:
            prompt.update("Don't have an account?")
            toggle_btn.label = "Sign up"
        elif mode is Mode.SIGN_UP:
            prompt.update("Already have an account?")
            toggle_btn.label = "Log in"
        else:
            prompt.update("Remembered it?")
            toggle_btn.label = "Back to login"

        status = self.query_one("#auth-status", Static)
        if not state.message:
            status.update("")
        elif self._last_outcome is SubmitOutcome.SUCCESS:
            status.update(f"[green]{state.message}[/]")
        else:
            status.update(f"[red]{state.message}[/]")

    def _toggle_password_visibility(self) -> None:
        for input_id in ("login-password-input", "signup-password-input"):
            widget = self.query_one(f"#{input_id}", Input)
            widget.password = not widget.password

    async def _enter_chats(self) -> None:
        self._show_screen("chats")
        self.query_one("#search-input", Input).value = ""
        await self._refresh_chats()

    async def _refresh_chats(self) -> None:
        """Fetch the chat list and render it."""
        if not self.session.is_authenticated:
            return

        status = self.query_one("#chat-status", Static)
        status.update("[yellow]Loading your chats...[/]")
        chats = await self.session.fetch_chats()

        if self.session.error:
            status.update(f"[red]{self.session.error}[/]")
        elif not chats:
            status.update(
                "[yellow]No chat history found. "
                "Search for contacts above to start a new chat![/]"
            )
        else:
            status.update(f"[green]{len(chats)} chat(s)[/]")
        query = self.query_one("#search-input", Input).value
        self._render_chats(self.session.search_chats(query))

    def _render_chats(self, chats: List[ChatRoom]) -> None:
        table = self.query_one("#chat-table", DataTable)
        table.clear(columns=True)
        table.add_columns("Name", "Type", "Last activity")
        table.cursor_type = "row"
        for chat in chats:
            table.add_row(
                chat.display_name(self.session.user_id),
                chat.chat_room_type.title(),
                chat.last_activity or "-",
                key=chat.chatroom_id,
            )

    def _handle_logout(self) -> None:
        self.session.logout()
        self.user_name = None
        self._last_outcome = None
        self.controller = AuthSessionController(
            self.api,
            on_session=self.session.start,
            on_authenticated=self._on_authenticated,
        )
        self._show_screen("auth")
        self._sync_auth_form()
