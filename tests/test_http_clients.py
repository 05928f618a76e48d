"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from fitness_tracker.adapters.supabase_auth_client import HttpxSupabaseAuthClient


def _client(handler) -> HttpxSupabaseAuthClient:  # type: ignore[no-untyped-def]
    return HttpxSupabaseAuthClient(
        base_url="https://example.supabase.co",
        api_key="anon-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def test_auth_client_get_user_sends_token() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/user"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["Authorization"] == "Bearer token-1"
        return httpx.Response(200, json={"id": "user-1", "email": "a@example.com"})

    client = _client(handler)

    assert asyncio.run(client.get_user("token-1")) == {
        "id": "user-1",
        "email": "a@example.com",
    }


def test_auth_client_rejected_token_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"msg": "invalid JWT"})

    assert asyncio.run(_client(handler).get_user("expired")) is None


def test_auth_client_server_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_client(handler).get_user("token-1"))


def test_auth_client_sign_out() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(204)

    client = _client(handler)
    asyncio.run(client.sign_out("token-1"))
    asyncio.run(client.close())

    assert calls == ["/auth/v1/logout"]


def test_auth_client_create_strips_trailing_slash() -> None:
    client = HttpxSupabaseAuthClient.create("https://example.supabase.co/", "key")

    assert client.base_url == "https://example.supabase.co"
    asyncio.run(client.close())
