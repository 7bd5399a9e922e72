"""
HTTP Response

Library-neutral view of a response, filled in by each backend adapter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from owo.decoding import decode_shorten_response, decode_upload_response
from owo.schemas import ShortenResponse, UploadResponse


@dataclass(frozen=True)
class HttpResponse:
    """
    Response from an HTTP request.
    """
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def content_type(self) -> Optional[str]:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None

    def to_upload_response(self) -> UploadResponse:
        """Decode as the result of a file upload."""
        return decode_upload_response(self.status_code, self.content)

    def to_shorten_response(self) -> ShortenResponse:
        """Decode as the result of a shorten request."""
        return decode_shorten_response(
            self.status_code, self.content, self.content_type
        )
