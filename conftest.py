"""
Shared fixtures for the YapLab client tests.

The backend is faked with httpx.MockTransport so no network is used.
"""

import httpx
import pytest

from src.yaplab import AuthAPI, SessionStore

BASE_URL = "http://testserver"


class FakeBackend:
    """Records requests and answers them from a route table."""

    def __init__(self):
        self.requests = []
        self.routes = {}

    def route(self, method, path, handler):
        """Register a handler (request -> httpx.Response) for a route."""
        self.routes[(method, path)] = handler

    def reply(self, method, path, status_code=200, **kwargs):
        """Register a fixed response for a route."""
        self.route(
            method,
            path,
            lambda request: httpx.Response(status_code, **kwargs),
        )

    def __call__(self, request):
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not found"})
        return handler(request)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api(backend):
    return AuthAPI(BASE_URL, transport=httpx.MockTransport(backend))


@pytest.fixture
def store():
    return SessionStore()
