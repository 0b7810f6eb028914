"""Project-level pytest configuration and shared fixtures."""

from typing import Any, Callable, Dict, Optional

import httpx
import pytest
import pytest_asyncio

from combined_data_service.config import get_settings

COMMENTS_URL = "http://upstream.test/comments"
POSTS_URL = "http://upstream.test/posts"
USERS_URL = "http://upstream.test/users"

_SETTINGS_ENV_VARS = (
    "COMBINED_DATA_COMMENTS_URL",
    "COMBINED_DATA_POSTS_URL",
    "COMBINED_DATA_USERS_URL",
    "COMBINED_DATA_REQUEST_TIMEOUT",
    "COMBINED_DATA_LISTEN_HOST",
    "COMBINED_DATA_LISTEN_PORT",
    "COMBINED_DATA_DEBUG_MODE",
    "COMBINED_DATA_LOG_LEVEL",
    "COMBINED_DATA_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test default settings, unaffected by the caller's environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_comments():
    return [
        {"postId": 1, "id": 1, "name": "a", "body": "hi"},
        {"postId": 1, "id": 2, "name": "b", "body": "yo"},
        {"postId": 2, "id": 3, "name": "c", "body": "sup"},
    ]


@pytest.fixture
def sample_posts():
    return [{"userId": 10, "id": 1, "title": "Post One", "body": "..."}]


@pytest.fixture
def sample_users():
    return [{"id": 10, "username": "alice", "email": "alice@example.com"}]


@pytest.fixture
def make_transport() -> Callable[[Dict[str, Any]], httpx.MockTransport]:
    """
    Build an ``httpx.MockTransport`` serving fixed routes.

    Route values are either a JSON-serialisable payload (served with status
    200) or a callable taking the request and returning a response or
    raising an ``httpx`` exception. Unknown URLs get a 404.
    """

    def _make(routes: Dict[str, Any]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            route = routes.get(str(request.url))
            if route is None:
                return httpx.Response(404, text="Not Found")
            if callable(route):
                return route(request)
            return httpx.Response(200, json=route)

        return httpx.MockTransport(handler)

    return _make


@pytest_asyncio.fixture
async def mock_http_client(make_transport):
    """
    Build ``httpx.AsyncClient`` instances over mock routes.

    Every client handed out is closed at teardown.
    """
    clients = []

    def _make(
        routes: Optional[Dict[str, Any]] = None,
        transport: Optional[httpx.MockTransport] = None,
    ) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=transport or make_transport(routes or {}))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def upstream_urls() -> Dict[str, str]:
    return {"comments_url": COMMENTS_URL, "posts_url": POSTS_URL, "users_url": USERS_URL}


@pytest.fixture
def upstream_routes(sample_comments, sample_posts, sample_users) -> Dict[str, Any]:
    return {
        COMMENTS_URL: sample_comments,
        POSTS_URL: sample_posts,
        USERS_URL: sample_users,
    }
