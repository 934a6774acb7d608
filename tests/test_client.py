"""Tests for the HTTP fetch layer."""

from __future__ import annotations

import httpx
import pytest

from markdowndown.core.client import fetch_text
from markdowndown.core.errors import NetworkError
from markdowndown.core.models import HttpConfig

FAST_RETRIES = HttpConfig(max_retries=2, retry_delay=0)


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestFetchText:
    """Tests for successful fetches."""

    async def test_returns_body(self) -> None:
        async with _client(lambda request: httpx.Response(200, text="<p>Hi</p>")) as client:
            assert await fetch_text("https://example.com", client=client) == "<p>Hi</p>"

    async def test_sends_user_agent_and_extra_headers(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, text="ok")

        config = HttpConfig(user_agent="test-agent/1.0")
        async with _client(handler) as client:
            await fetch_text(
                "https://example.com", config, headers={"Accept": "text/html"}, client=client
            )
        assert seen["user-agent"] == "test-agent/1.0"
        assert seen["accept"] == "text/html"


class TestRetries:
    """Tests for retry behavior."""

    async def test_retries_server_errors_then_succeeds(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) < 3:
                return httpx.Response(503)
            return httpx.Response(200, text="recovered")

        async with _client(handler) as client:
            result = await fetch_text("https://example.com", FAST_RETRIES, client=client)
        assert result == "recovered"
        assert len(calls) == 3

    async def test_gives_up_after_max_retries(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        async with _client(handler) as client:
            with pytest.raises(NetworkError) as exc_info:
                await fetch_text("https://example.com", FAST_RETRIES, client=client)
        assert exc_info.value.status_code == 500
        assert len(calls) == 3

    async def test_client_errors_not_retried(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(404)

        async with _client(handler) as client:
            with pytest.raises(NetworkError) as exc_info:
                await fetch_text("https://example.com/missing", FAST_RETRIES, client=client)
        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://example.com/missing"
        assert len(calls) == 1

    async def test_timeout_is_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with _client(handler) as client:
            with pytest.raises(NetworkError) as exc_info:
                await fetch_text("https://example.com", FAST_RETRIES, client=client)
        assert exc_info.value.timed_out is True


class TestNetworkErrorRetryable:
    """Tests for the retryable classification."""

    @pytest.mark.parametrize(
        ("status", "expected"), [(None, True), (429, True), (502, True), (404, False)]
    )
    def test_by_status(self, status: int | None, expected: bool) -> None:
        assert NetworkError("x", status_code=status).is_retryable is expected

    def test_explicit_flag_wins(self) -> None:
        assert NetworkError("x", retryable=False).is_retryable is False
