"""
Session Manager

This module provides the application-level owner of the authenticated
session. It restores a stored session on start, starts a new one after a
successful login, clears it on logout, and loads the user's chat rooms.

Usage:
    manager = SessionManager(api, store)
    if not manager.restore():
        ...  # show the login form; its controller calls manager.start()
    chats = await manager.fetch_chats()
"""

import logging
from typing import List, Optional

from .api import AuthAPI
from .errors import AuthClientError
from .schemas import ChatRoom, LoginResponse
from .session_store import AUTH_TOKEN_KEY, USER_ID_KEY, SessionStore

logger = logging.getLogger(__name__)

CHATS_ERROR_MESSAGE = "Failed to load chats. Please try again."


class SessionManager:
    """
    Owner of the authenticated session and the user's chat list.

    Attributes:
        api: Backend client used to fetch chat rooms
        store: Persistent store holding the token and user ID
        user_id: ID of the logged-in user, None when logged out
        chats: Last fetched chat rooms
        loading: True while chat rooms are being fetched
        error: User-visible error from the last fetch, None if it succeeded
    """

    def __init__(self, api: AuthAPI, store: SessionStore):
        self.api = api
        self.store = store
        self.user_id: Optional[int] = None
        self.chats: List[ChatRoom] = []
        self.loading = False
        self.error: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None and self.token is not None

    @property
    def token(self) -> Optional[str]:
        return self.store.get(AUTH_TOKEN_KEY)

    def restore(self) -> bool:
        """
        Resume a session saved by a previous run.

        Returns:
            True if a token and a valid user ID were found
        """
        token = self.store.get(AUTH_TOKEN_KEY)
        stored_user_id = self.store.get(USER_ID_KEY)
        if not token or stored_user_id is None:
            return False

        try:
            self.user_id = int(stored_user_id)
        except ValueError:
            logger.warning(f"Discarding stored session with bad user ID {stored_user_id!r}")
            self.user_id = None
            try:
                self.store.clear()
            except OSError as e:
                logger.error(f"Could not clear session file: {e}")
            return False

        logger.info(f"Restored session for user {self.user_id}")
        return True

    def start(self, login: LoginResponse) -> None:
        """
        Persist the session from a successful login.

        Both keys are written together or not at all.

        Raises:
            OSError: If the session file cannot be written
        """
        self.store.update(
            {AUTH_TOKEN_KEY: login.access_token, USER_ID_KEY: str(login.id)}
        )
        self.user_id = login.id
        self.error = None
        logger.info(f"Started session for user {login.id}")

    def logout(self) -> None:
        """Clear the session store and forget the cached chat list."""
        try:
            self.store.clear()
        except OSError as e:
            logger.error(f"Could not clear session file: {e}")
        logger.info(f"Logged out user {self.user_id}")
        self.user_id = None
        self.chats = []
        self.error = None

    async def fetch_chats(self) -> List[ChatRoom]:
        """
        Load the chat rooms of the logged-in user.

        Failures are reported through `error` and an empty list.

        Raises:
            RuntimeError: If there is no authenticated session
        """
        if not self.is_authenticated:
            raise RuntimeError("No authenticated session")

        self.loading = True
        self.error = None
        try:
            self.chats = await self.api.get_user_chatrooms(self.user_id, self.token)
        except AuthClientError as e:
            logger.error(f"Error fetching chats: {e}")
            self.error = CHATS_ERROR_MESSAGE
            self.chats = []
        finally:
            self.loading = False
        return self.chats

    def search_chats(self, query: str) -> List[ChatRoom]:
        """Filter the cached chat list by display name."""
        return [chat for chat in self.chats if chat.matches(query, self.user_id)]
