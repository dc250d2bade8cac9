"""Shared test fixtures for dekigokoro tests."""

import json
from collections.abc import Callable

import httpx
import pytest

from dekigokoro import DekigokoroClient
from dekigokoro.config import get_settings

API_PREFIX = "/api/v1/"


class FakeCurrencyBackend:
    """In-memory stand-in for the currency API that echoes stored state."""

    def __init__(self) -> None:
        self.balances: dict[tuple[int, str | None], int] = {}
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.removeprefix(API_PREFIX).split("/")

        if parts[:2] == ["currency", "rankings"]:
            sub_key = parts[2] if len(parts) > 2 else None
            return self._rankings(request, sub_key)

        player_id = int(parts[1])
        sub_key = parts[2] if len(parts) > 2 else None
        key = (player_id, sub_key)

        if request.method == "PUT":
            self.balances[key] = int(json.loads(request.content)["balance"])
        elif request.method == "PATCH":
            delta = int(json.loads(request.content)["increment"])
            self.balances[key] = self.balances.get(key, 0) + delta
        elif key not in self.balances:
            return httpx.Response(404, json={"message": "Balance not found"})

        return httpx.Response(200, json=self._row(player_id, sub_key))

    def _row(self, player_id: int, sub_key: str | None) -> dict:
        return {
            "playerId": str(player_id),
            "balance": str(self.balances[(player_id, sub_key)]),
            "subKey": sub_key,
        }

    def _rankings(self, request: httpx.Request, sub_key: str | None) -> httpx.Response:
        offset = int(request.url.params.get("offset", 0))
        limit = int(request.url.params.get("limit", 100))
        ordered = sorted(
            (pid for (pid, key) in self.balances if key == sub_key),
            key=lambda pid: -self.balances[(pid, sub_key)],
        )
        page = ordered[offset : offset + limit]
        payload = [
            {**self._row(pid, sub_key), "rank": offset + i + 1}
            for i, pid in enumerate(page)
        ]
        return httpx.Response(200, json=payload)


@pytest.fixture
def backend() -> FakeCurrencyBackend:
    """Empty fake currency backend."""
    return FakeCurrencyBackend()


@pytest.fixture
def make_client() -> Callable[..., DekigokoroClient]:
    """Build a client whose transport is a MockTransport around a handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], token: str = "test-token"):
        return DekigokoroClient(token, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def client(backend: FakeCurrencyBackend, make_client) -> DekigokoroClient:
    """Client wired to the fake currency backend."""
    return make_client(backend.handle)


@pytest.fixture
def clear_settings_cache():
    """Reset the cached settings singleton around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
