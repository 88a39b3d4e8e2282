"""HTTP transport to the bridge.

Bodies go out as text so raw commands reach the bridge byte-for-byte.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class BridgeTransport:
    """Thin wrapper around ``httpx.AsyncClient`` returning response text."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client exists."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def request(self, method: str, url: str, body: str | None = None) -> str:
        """Send a request and return the response body.

        Raises:
            httpx.HTTPStatusError: On a non-2xx status
            httpx.RequestError: On connection or timeout failures
        """
        client = await self._ensure_client()
        content = body.encode("utf-8") if body is not None else None

        logger.debug(f"{method} {url} {body or ''}".rstrip())
        try:
            response = await client.request(method, url, content=content)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Bridge returned {e.response.status_code} for {method} {url}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request to bridge failed for {method} {url}: {e}")
            raise

        return response.text

    async def get(self, url: str) -> str:
        return await self.request("GET", url)

    async def put(self, url: str, body: str) -> str:
        return await self.request("PUT", url, body)

    async def post(self, url: str, body: str | None = None) -> str:
        return await self.request("POST", url, body)

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
