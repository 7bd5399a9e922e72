"""
Oneshot Helpers

Functions that create a throwaway requester for a single call. Each call
opens and closes its own connection pool, so prefer a long-lived requester
for repeated use.
"""

from __future__ import annotations

from typing import Optional, Sequence

from owo.config.settings import OwoConfig
from owo.http.httpx_backend import HttpxRequester
from owo.http.requests_backend import RequestsRequester
from owo.requester import UploadInput
from owo.schemas import ShortenResponse, UploadResponse


def upload_file(
    key: str,
    data: UploadInput,
    filename: Optional[str] = None,
    *,
    config: Optional[OwoConfig] = None,
) -> UploadResponse:
    """Upload a single file with a fresh requests session."""
    with RequestsRequester(config=config) as requester:
        return requester.upload_file(key, data, filename)


def upload_files(
    key: str,
    files: Sequence[UploadInput],
    *,
    config: Optional[OwoConfig] = None,
) -> UploadResponse:
    """Upload several files with a fresh requests session."""
    with RequestsRequester(config=config) as requester:
        return requester.upload_files(key, files)


def shorten_url(
    key: str,
    url: str,
    *,
    config: Optional[OwoConfig] = None,
) -> ShortenResponse:
    """Shorten a URL with a fresh requests session."""
    with RequestsRequester(config=config) as requester:
        return requester.shorten_url(key, url)


async def upload_file_async(
    key: str,
    data: UploadInput,
    filename: Optional[str] = None,
    *,
    config: Optional[OwoConfig] = None,
) -> UploadResponse:
    """Upload a single file with a fresh httpx client."""
    async with HttpxRequester(config=config) as requester:
        return await requester.upload_file(key, data, filename)


async def upload_files_async(
    key: str,
    files: Sequence[UploadInput],
    *,
    config: Optional[OwoConfig] = None,
) -> UploadResponse:
    """Upload several files with a fresh httpx client."""
    async with HttpxRequester(config=config) as requester:
        return await requester.upload_files(key, files)


async def shorten_url_async(
    key: str,
    url: str,
    *,
    config: Optional[OwoConfig] = None,
) -> ShortenResponse:
    """Shorten a URL with a fresh httpx client."""
    async with HttpxRequester(config=config) as requester:
        return await requester.shorten_url(key, url)
