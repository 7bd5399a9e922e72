"""
Key-holding Clients

Light wrappers pairing an API key with a requester, so the key need not be
passed on every call.

Usage:
    client = OwoClient("my-key")
    print(client.shorten_url("https://example.com").url)

    async with AsyncOwoClient("my-key") as client:
        result = await client.upload_file(png_bytes)
"""

from __future__ import annotations

from typing import Optional, Sequence

from owo.config.settings import OwoConfig
from owo.http.httpx_backend import HttpxRequester
from owo.http.requests_backend import RequestsRequester
from owo.requester import AsyncOwoRequester, OwoRequester, UploadInput
from owo.schemas import ShortenResponse, UploadResponse


class OwoClient:
    """
    Blocking client bound to one API key.

    Uses a RequestsRequester with its own session unless a requester is
    given.
    """

    def __init__(
        self,
        key: str,
        requester: Optional[OwoRequester] = None,
        *,
        config: Optional[OwoConfig] = None,
    ) -> None:
        if not key:
            raise ValueError("API key must not be empty")
        self.key = key
        self.requester = requester if requester is not None else RequestsRequester(config=config)

    def upload_file(
        self,
        data: UploadInput,
        filename: Optional[str] = None,
    ) -> UploadResponse:
        """Shortcut for OwoRequester.upload_file."""
        return self.requester.upload_file(self.key, data, filename)

    def upload_files(self, files: Sequence[UploadInput]) -> UploadResponse:
        """Shortcut for OwoRequester.upload_files."""
        return self.requester.upload_files(self.key, files)

    def shorten_url(self, url: str) -> ShortenResponse:
        """Shortcut for OwoRequester.shorten_url."""
        return self.requester.shorten_url(self.key, url)

    def close(self) -> None:
        close = getattr(self.requester, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "OwoClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        # Never include the key.
        return f"OwoClient(requester={self.requester!r})"


class AsyncOwoClient:
    """
    Asynchronous client bound to one API key.

    Uses an HttpxRequester with its own AsyncClient unless a requester is
    given.
    """

    def __init__(
        self,
        key: str,
        requester: Optional[AsyncOwoRequester] = None,
        *,
        config: Optional[OwoConfig] = None,
    ) -> None:
        if not key:
            raise ValueError("API key must not be empty")
        self.key = key
        self.requester = requester if requester is not None else HttpxRequester(config=config)

    async def upload_file(
        self,
        data: UploadInput,
        filename: Optional[str] = None,
    ) -> UploadResponse:
        """Shortcut for AsyncOwoRequester.upload_file."""
        return await self.requester.upload_file(self.key, data, filename)

    async def upload_files(self, files: Sequence[UploadInput]) -> UploadResponse:
        """Shortcut for AsyncOwoRequester.upload_files."""
        return await self.requester.upload_files(self.key, files)

    async def shorten_url(self, url: str) -> ShortenResponse:
        """Shortcut for AsyncOwoRequester.shorten_url."""
        return await self.requester.shorten_url(self.key, url)

    async def aclose(self) -> None:
        aclose = getattr(self.requester, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "AsyncOwoClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"AsyncOwoClient(requester={self.requester!r})"
