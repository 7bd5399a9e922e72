"""
Requester Interface

Defines the contract every HTTP backend adapter satisfies.

Each operation sends exactly one HTTP request: no retries, no follow-up
calls. The synchronous contract blocks the calling thread; the asynchronous
one returns coroutines the caller awaits on their own event loop.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union, runtime_checkable

from owo.builder import BytesLike
from owo.schemas import FileUpload, ShortenResponse, UploadResponse

UploadInput = Union[BytesLike, FileUpload]


@runtime_checkable
class OwoRequester(Protocol):
    """
    Protocol for blocking backends.

    Implemented by owo.http.requests_backend.RequestsRequester.
    """

    def upload_file(
        self,
        key: str,
        data: UploadInput,
        filename: Optional[str] = None,
    ) -> UploadResponse:
        """Upload a single file."""
        ...

    def upload_files(
        self,
        key: str,
        files: Sequence[UploadInput],
    ) -> UploadResponse:
        """Upload up to MAX_FILES files in one request."""
        ...

    def shorten_url(self, key: str, url: str) -> ShortenResponse:
        """Shorten a URL."""
        ...


@runtime_checkable
class AsyncOwoRequester(Protocol):
    """
    Protocol for asynchronous backends.

    Implemented by owo.http.httpx_backend.HttpxRequester.
    """

    async def upload_file(
        self,
        key: str,
        data: UploadInput,
        filename: Optional[str] = None,
    ) -> UploadResponse:
        """Upload a single file."""
        ...

    async def upload_files(
        self,
        key: str,
        files: Sequence[UploadInput],
    ) -> UploadResponse:
        """Upload up to MAX_FILES files in one request."""
        ...

    async def shorten_url(self, key: str, url: str) -> ShortenResponse:
        """Shorten a URL."""
        ...
