"""
Tests for the YapLab UI

Tests for the Textual-based user interface components.
"""

import pytest
from textual.widgets import DataTable, Input

from src.yaplab import AuthAPI, LoginResponse, Mode, SessionStore
from src.yaplab.ui.app import (
    FIELD_INPUTS,
    FORM_CONTAINERS,
    AuthScreen,
    ChatListScreen,
    YapLabApp,
)


class TestUIComponentsCanBeImported:
    """Tests to verify UI components can be imported and created."""

    def test_app_can_be_imported(self):
        """Test that YapLabApp can be imported."""
        assert YapLabApp is not None

    def test_auth_screen_can_be_imported(self):
        """Test that AuthScreen can be imported."""
        assert AuthScreen is not None

    def test_chat_list_screen_can_be_imported(self):
        """Test that ChatListScreen can be imported."""
        assert ChatListScreen is not None


class TestFieldMapping:
    """Tests for the mapping between inputs and form fields."""

    def test_every_mode_has_inputs_and_container(self):
        assert set(FIELD_INPUTS) == set(Mode)
        assert set(FORM_CONTAINERS) == set(Mode)

    def test_input_ids_are_unique(self):
        ids = [i for inputs in FIELD_INPUTS.values() for i in inputs.values()]
        assert len(ids) == len(set(ids))


class TestAppInitialization:
    """Tests for YapLabApp initialization."""

    @pytest.fixture
    def app(self):
        return YapLabApp(
            api=AuthAPI("http://testserver"), store=SessionStore()
        )

    def test_app_initial_state(self, app):
        """Test YapLabApp initial state."""
        assert app.user_name is None
        assert app._current_screen == "auth"
        assert app.controller.mode is Mode.LOGIN
        assert app.session.is_authenticated is False

    def test_app_has_bindings(self, app):
        """Test that YapLabApp has keybindings defined."""
        assert hasattr(app, "BINDINGS")
        assert len(app.BINDINGS) > 0

    def test_app_has_css(self, app):
        """Test that YapLabApp has CSS defined."""
        assert "auth-form" in app.CSS

    def test_login_callback_records_user_name(self, app):
        app._on_authenticated(LoginResponse(id=1, access_token="t", user_name="alice"))
        assert app.user_name == "alice"

    @pytest.mark.asyncio
    async def test_login_form_shown_without_stored_session(self, app):
        async with app.run_test():
            assert app._current_screen == "auth"
            assert app.query_one("#login-form").display is True
            assert app.query_one("#signup-form").display is False


class TestChatList:
    """Tests for the chat list screen."""

    CHATROOMS = [
        {
            "chatroomId": "room-1",
            "participants": [
                {"id": 7, "userName": "alice"},
                {"id": 8, "userName": "bob"},
            ],
        },
        {
            "chatroomId": "room-2",
            "participants": [
                {"id": 7, "userName": "alice"},
                {"id": 9, "userName": None, "emailId": "carol@example.com"},
            ],
        },
    ]

    @pytest.fixture
    def app(self, api, backend, store):
        backend.reply("GET", "/chatrooms/user/7", json=self.CHATROOMS)
        store.update({"authToken": "tok1", "userId": "7"})
        return YapLabApp(api=api, store=store)

    @pytest.mark.asyncio
    async def test_stored_session_opens_chat_list(self, app):
        async with app.run_test():
            assert app._current_screen == "chats"
            assert app.query_one("#chat-table", DataTable).row_count == 2

    @pytest.mark.asyncio
    async def test_refresh_keeps_search_filter(self, app, backend):
        async with app.run_test() as pilot:
            table = app.query_one("#chat-table", DataTable)
            app.query_one("#search-input", Input).value = "carol"
            await pilot.pause()
            assert table.row_count == 1

            await app._refresh_chats()

            assert len(backend.requests) == 2
            assert table.row_count == 1

    @pytest.mark.asyncio
    async def test_logout_returns_to_login(self, app, store):
        async with app.run_test():
            app._handle_logout()
            assert app._current_screen == "auth"
            assert "authToken" not in store
