"""
Common test fixtures shared by all modules.

Provides factory functions for:
- Upload payloads (PNG bytes, FileUpload)
- Service response bodies (upload / shorten / error)
- Fake backend clients (requests session mock, httpx MockTransport)
- Multipart body inspection

No factory touches the network.
"""

import json
from dataclasses import dataclass
from email.parser import BytesParser
from typing import Any, Callable, Optional
from unittest.mock import Mock

import httpx
import requests

from owo.schemas import FileUpload


TEST_KEY = "abc123"

# 8-byte PNG signature followed by the start of an IHDR chunk.
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n"
    b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"
    b"\x1f\x15\xc4\x89"
)


# =============================================================================
# Payload Factories
# =============================================================================

def make_png(extra: bytes = b"") -> bytes:
    """Create PNG-looking bytes, optionally with a distinguishing tail."""
    return PNG_BYTES + extra


def make_file_upload(
    data: Optional[bytes] = None,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
) -> FileUpload:
    """Create a FileUpload for testing."""
    return FileUpload(
        data=data if data is not None else make_png(),
        filename=filename,
        content_type=content_type,
    )


# =============================================================================
# Response Body Factories
# =============================================================================

def make_uploaded_file_dict(
    url: str = "abcdef.png",
    hash: str = "d41d8cd98f00b204e9800998ecf8427e",
    name: Optional[str] = None,
    size: int = 33,
    **extra: Any,
) -> dict[str, Any]:
    """Create one entry of an upload response's `files` list."""
    entry: dict[str, Any] = {"hash": hash, "name": name, "size": size, "url": url}
    entry.update(extra)
    return entry


def make_upload_body(*urls: str, **extra: Any) -> bytes:
    """Create a successful upload response body."""
    files = [make_uploaded_file_dict(url=u) for u in (urls or ("abcdef.png",))]
    payload: dict[str, Any] = {"success": True, "files": files}
    payload.update(extra)
    return json.dumps(payload).encode("utf-8")


def make_shorten_body(url: str = "https://short.url/x") -> bytes:
    """Create a successful JSON shorten response body."""
    return json.dumps(
        {"success": True, "results": [{"ResultUrl": url}]}
    ).encode("utf-8")


def make_error_body(code: Any = 401, message: str = "bad key") -> bytes:
    """Create an API error response body."""
    return json.dumps({"error": code, "message": message}).encode("utf-8")


# =============================================================================
# Fake Backends
# =============================================================================

def make_requests_response(
    status_code: int = 200,
    content: bytes = b"",
    content_type: str = "application/json",
) -> Mock:
    """Create a stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.headers = {"Content-Type": content_type}
    return response


def make_requests_session(
    response: Optional[Mock] = None,
    error: Optional[Exception] = None,
) -> Mock:
    """
    Create a mock requests.Session.

    `session.request` returns `response`, or raises `error` when given.
    """
    session = Mock(spec=requests.Session)
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value = response or make_requests_response(
            content=make_upload_body()
        )
    return session


def make_httpx_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.AsyncClient:
    """Create an AsyncClient whose requests are answered by `handler`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class RecordingHandler:
    """
    MockTransport handler that records requests and replays one response.
    """

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b"",
        content_type: str = "application/json",
        error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.content_type = content_type
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            content=self.content,
            headers={"Content-Type": self.content_type},
        )


# =============================================================================
# Multipart Inspection
# =============================================================================

@dataclass(frozen=True)
class MultipartPart:
    """One decoded part of a multipart/form-data body."""
    name: Optional[str]
    filename: Optional[str]
    content_type: Optional[str]
    data: bytes


def parse_multipart(body: bytes, content_type: str) -> list[MultipartPart]:
    """Split a multipart/form-data body into its parts."""
    message = BytesParser().parsebytes(
        b"Content-Type: " + content_type.encode("ascii") + b"\r\n\r\n" + body
    )
    if not message.is_multipart():
        raise ValueError(f"Not a multipart body: {content_type!r}")
    return [
        MultipartPart(
            name=part.get_param("name", header="content-disposition"),
            filename=part.get_filename(),
            content_type=part.get("Content-Type"),
            data=part.get_payload(decode=True),
        )
        for part in message.get_payload()
    ]
