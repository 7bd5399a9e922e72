"""
Request Builder

Pure functions that turn an upload or shorten call into a PreparedRequest:
the method, URL, query, headers and body of exactly one HTTP request.

The multipart body is encoded here with urllib3 rather than by each HTTP
library, so both backends send byte-identical uploads and the body can be
inspected before it is sent.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union
from urllib.parse import quote, quote_plus

from urllib3 import encode_multipart_formdata

from owo import constants
from owo.config.settings import OwoConfig, resolve
from owo.schemas import (
    FileUpload,
    ShortenRequest,
    TooManyFilesException,
    UploadRequest,
)

BytesLike = Union[bytes, bytearray, memoryview]

# Leading bytes of formats worth labelling precisely. Checked in order.
_MAGIC_NUMBERS: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"%PDF-", "application/pdf"),
)

@dataclass(frozen=True)
class PreparedRequest:
    """
    A fully built HTTP request, independent of any HTTP library.

    The API key only ever appears in `params`, never in `url`, so `url` is
    safe to log.
    """
    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("Content-Type")

    @property
    def body_size(self) -> int:
        return len(self.content) if self.content is not None else 0

    def redact(self, text: str) -> str:
        """Mask the API key wherever it appears in `text`."""
        key = self.params.get("key")
        if not key:
            return text
        for form in sorted({key, quote(key, safe=""), quote_plus(key)}, key=len, reverse=True):
            text = text.replace(form, "***")
        return text


# =============================================================================
# Content type inference
# =============================================================================

def sniff_content_type(data: BytesLike, filename: Optional[str] = None) -> str:
    """
    Infer a content type for an upload payload.

    Magic bytes win over the filename; anything unidentified is
    application/octet-stream.
    """
    head = bytes(data[:16])
    for magic, content_type in _MAGIC_NUMBERS:
        if head.startswith(magic):
            return content_type
    # RIFF....WEBP
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"

    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed

    return constants.DEFAULT_CONTENT_TYPE


def _default_filename(content_type: str) -> str:
    if content_type == constants.DEFAULT_CONTENT_TYPE:
        return "file"
    extension = mimetypes.guess_extension(content_type) or ""
    return f"file{extension}"


# =============================================================================
# Multipart encoding
# =============================================================================

def encode_multipart(
    files: Iterable[FileUpload],
    *,
    field_name: str = constants.UPLOAD_FIELD,
    boundary: Optional[str] = None,
) -> tuple[bytes, str]:
    """
    Encode files as a multipart/form-data body.

    Every file becomes one part named `field_name`, in order. Payloads are
    copied into the body as-is.

    Returns:
        (body, content_type) where content_type carries the boundary.
    """
    fields = []
    for upload in files:
        content_type = upload.content_type or sniff_content_type(
            upload.data, upload.filename
        )
        filename = upload.filename or _default_filename(content_type)
        fields.append((field_name, (filename, bytes(upload.data), content_type)))

    return encode_multipart_formdata(fields, boundary=boundary)


# =============================================================================
# Request construction
# =============================================================================

def _base_headers(config: OwoConfig) -> dict[str, str]:
    return {"User-Agent": config.user_agent}


def build_upload_request(
    request: UploadRequest,
    config: Optional[OwoConfig] = None,
) -> PreparedRequest:
    """
    Build the multipart POST for an upload.

    Raises:
        TooManyFilesException: If more files are given than the service
            accepts in one request.
    """
    config = resolve(config)
    if len(request.files) > config.max_files:
        raise TooManyFilesException(count=len(request.files), limit=config.max_files)

    body, content_type = encode_multipart(request.files)
    headers = _base_headers(config)
    headers["Content-Type"] = content_type

    return PreparedRequest(
        method="POST",
        url=config.upload_url,
        params={"key": request.key},
        headers=headers,
        content=body,
    )


def build_shorten_request(
    request: ShortenRequest,
    config: Optional[OwoConfig] = None,
) -> PreparedRequest:
    """Build the GET that asks the service to shorten a URL."""
    config = resolve(config)
    return PreparedRequest(
        method="GET",
        url=config.shorten_url,
        params={"action": "shorten", "url": request.url, "key": request.key},
        headers=_base_headers(config),
    )


def as_file_upload(
    data: Union[BytesLike, FileUpload],
    filename: Optional[str] = None,
) -> FileUpload:
    """Wrap raw bytes as a FileUpload; FileUpload values pass through."""
    if isinstance(data, FileUpload):
        return data
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")
    return FileUpload(data=bytes(data), filename=filename)


def prepare_upload(
    key: str,
    files: Iterable[Union[BytesLike, FileUpload]],
    config: Optional[OwoConfig] = None,
) -> PreparedRequest:
    """Validate upload arguments and build the request in one step."""
    request = UploadRequest(key=key, files=[as_file_upload(f) for f in files])
    return build_upload_request(request, config)


def prepare_shorten(
    key: str,
    url: str,
    config: Optional[OwoConfig] = None,
) -> PreparedRequest:
    """Validate shorten arguments and build the request in one step."""
    return build_shorten_request(ShortenRequest(key=key, url=url), config)
