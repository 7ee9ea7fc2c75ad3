"""Unit tests for netdash.core.fetcher module."""

import asyncio

import httpx
import pytest

from netdash.core.fetcher import SnapshotFetcher
from netdash.errors import FetchFailureError

URL = "http://dashboard.test/data"


def fetch_once(handler) -> str:
    async def scenario() -> str:
        fetcher = SnapshotFetcher(URL, transport=httpx.MockTransport(handler))
        try:
            return await fetcher.fetch()
        finally:
            await fetcher.aclose()

    return asyncio.run(scenario())


class TestSnapshotFetcher:
    """Tests for SnapshotFetcher.fetch."""

    def test_returns_body_text(self) -> None:
        """Test a 200 response yields the raw payload."""
        # Arrange
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text=":$a\n#$0\n")

        # Act
        payload = fetch_once(handler)

        # Assert
        assert payload == ":$a\n#$0\n"
        assert seen == [URL]

    def test_error_status_raises_with_code(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        with pytest.raises(FetchFailureError) as exc_info:
            fetch_once(handler)

        assert exc_info.value.status_code == 503

    def test_connection_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchFailureError, match="error fetching"):
            fetch_once(handler)

    def test_timeout_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(FetchFailureError, match="timed out"):
            fetch_once(handler)

    def test_client_reused_across_fetches(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, text=str(len(calls)))

        async def scenario():
            fetcher = SnapshotFetcher(URL, transport=httpx.MockTransport(handler))
            first = await fetcher.fetch()
            client = fetcher._client
            second = await fetcher.fetch()
            same_client = fetcher._client is client
            await fetcher.aclose()
            return first, second, same_client, fetcher._client

        first, second, same_client, client_after_close = asyncio.run(scenario())

        assert (first, second) == ("1", "2")
        assert same_client
        assert client_after_close is None
