"""
Snapshot fetcher.

Fetches the raw snapshot payload over HTTP. Transport errors and non-2xx
answers surface as FetchFailureError so the poller can treat every failure
the same way.
"""

from __future__ import annotations

import logging

import httpx

from netdash.errors import FetchFailureError

logger = logging.getLogger(__name__)


class SnapshotFetcher:
    """
    Fetches snapshot payloads from one URL.

    The underlying ``httpx.AsyncClient`` is created lazily and reused across
    polls; call ``aclose`` when done.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        :param url: Snapshot endpoint URL
        :param timeout: Request timeout in seconds
        :param transport: Optional transport, e.g. ``httpx.MockTransport``
        """
        self.url = url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            )
        return self._client

    async def fetch(self) -> str:
        """
        Fetch the current payload as text.

        :raises FetchFailureError: On transport errors or a non-2xx status
        """
        try:
            response = await self._get_client().get(self.url)
        except httpx.TimeoutException as e:
            raise FetchFailureError(f"timed out fetching {self.url}") from e
        except httpx.HTTPError as e:
            raise FetchFailureError(f"error fetching {self.url}: {e}") from e

        if not response.is_success:
            raise FetchFailureError(
                f"HTTP {response.status_code} from {self.url}",
                status_code=response.status_code,
            )
        return response.text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
