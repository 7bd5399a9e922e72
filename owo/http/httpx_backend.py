"""
httpx Backend

Asynchronous requester built on an `httpx.AsyncClient`.

Usage:
    async with httpx.AsyncClient() as client:
        requester = HttpxRequester(client)
        result = await requester.shorten_url(key, "https://example.com")

Requests are only built and responses only decoded outside of the awaited
network call, so nothing but the exchange itself suspends.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from owo.builder import PreparedRequest, as_file_upload, prepare_shorten, prepare_upload
from owo.config.settings import OwoConfig, resolve
from owo.http.response import HttpResponse
from owo.requester import UploadInput
from owo.schemas import ShortenResponse, TransportException, UploadResponse

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class HttpxRequester:
    """
    Asynchronous implementation of AsyncOwoRequester.

    Supports the full interface, uploads included: the multipart body is
    built by owo.builder and sent as raw content.
    """

    backend = "httpx"

    def __init__(
        self,
        client: Optional["httpx.AsyncClient"] = None,
        *,
        config: Optional[OwoConfig] = None,
    ) -> None:
        """
        Initialize the requester.

        Args:
            client: AsyncClient to send requests with. When omitted, one is
                created on first use and closed by aclose().
            config: Endpoint configuration (defaults when None)
        """
        self.config = resolve(config)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> "httpx.AsyncClient":
        """Lazy-load httpx client."""
        if self._client is None:
            try:
                import httpx
            except ImportError:
                raise ImportError("httpx package required: pip install owo[httpx]")
            self._client = httpx.AsyncClient()
        return self._client

    async def send(self, prepared: PreparedRequest) -> HttpResponse:
        """
        Send one prepared request.

        Raises:
            TransportException: If the exchange could not be completed.
        """
        import httpx

        client = self._get_client()
        logger.debug(
            "%s %s (%d bytes)", prepared.method, prepared.url, prepared.body_size
        )

        try:
            response = await client.request(
                prepared.method,
                prepared.url,
                params=prepared.params,
                headers=prepared.headers,
                content=prepared.content,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportException(
                prepared.redact(f"{prepared.method} {prepared.url} failed: {e}"),
                details={"backend": self.backend, "error_type": type(e).__name__},
            ) from e

        logger.debug("%s %s -> %d", prepared.method, prepared.url, response.status_code)
        return HttpResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
            url=prepared.url,
        )

    async def upload_file(
        self,
        key: str,
        data: UploadInput,
        filename: Optional[str] = None,
    ) -> UploadResponse:
        """Upload a single file."""
        return await self.upload_files(key, [as_file_upload(data, filename)])

    async def upload_files(
        self,
        key: str,
        files: Sequence[UploadInput],
    ) -> UploadResponse:
        """
        Upload several files in one request.

        Raises:
            TooManyFilesException: If more than config.max_files are given.
        """
        prepared = prepare_upload(key, files, self.config)
        response = await self.send(prepared)
        return response.to_upload_response()

    async def shorten_url(self, key: str, url: str) -> ShortenResponse:
        """Shorten `url`, returning the shortened link."""
        prepared = prepare_shorten(key, url, self.config)
        response = await self.send(prepared)
        return response.to_shorten_response()

    async def aclose(self) -> None:
        """Close the client if this requester created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxRequester":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"HttpxRequester(api_base={self.config.api_base!r})"
