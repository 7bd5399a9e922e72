"""
API Models

Typed representations of the service's requests and responses.

Responses are Pydantic models parsed out from JSON bodies; unknown fields
are ignored and missing required fields fail validation. Requests are plain
dataclasses that live only for the duration of one call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Responses
# =============================================================================

class UploadedFile(BaseModel):
    """Information about a single uploaded file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    hash: Optional[str] = Field(
        default=None,
        description="Identifying hash of the uploaded file, if reported",
    )
    name: Optional[str] = Field(
        default=None,
        description="Name of the file when uploaded, if given",
    )
    size: Optional[int] = Field(
        default=None,
        description="Size of the file in bytes, if reported",
        ge=0,
    )
    url: str = Field(
        ...,
        description="URL (or URL fragment) to the file",
        min_length=1,
    )


class UploadResponse(BaseModel):
    """
    Body of a successful file upload.

    Only ever built from a success body: service-reported failures are raised
    as ApiException by the decoder instead.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    success: bool = Field(
        ...,
        description="Whether uploading the file(s) was successful",
    )
    files: list[UploadedFile] = Field(
        ...,
        description="The uploaded files, in request order",
        min_length=1,
    )

    @property
    def url(self) -> str:
        """URL of the first uploaded file."""
        return self.files[0].url

    @property
    def urls(self) -> list[str]:
        """URLs of all uploaded files."""
        return [f.url for f in self.files]


class ShortenResponse(BaseModel):
    """A shortened URL."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str = Field(
        ...,
        description="The shortened URL",
        min_length=1,
    )

    def __str__(self) -> str:
        return self.url


# =============================================================================
# Requests
# =============================================================================

@dataclass(frozen=True)
class FileUpload:
    """
    One file to upload.

    `data` is read, never modified. When `content_type` is None the builder
    infers one from the payload or filename.
    """
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


@dataclass(frozen=True)
class UploadRequest:
    """An upload of one or more files under an API key."""
    key: str
    files: list[FileUpload] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require_key(self.key)
        if not self.files:
            raise ValueError("At least one file is required")


@dataclass(frozen=True)
class ShortenRequest:
    """A request to shorten `url` under an API key."""
    key: str
    url: str

    def __post_init__(self) -> None:
        _require_key(self.key)
        if not self.url:
            raise ValueError("URL to shorten must not be empty")


def _require_key(key: str) -> None:
    if not key:
        raise ValueError("API key must not be empty")
