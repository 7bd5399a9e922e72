"""
Schemas

Public API for request/response models and the error taxonomy.
"""

from .errors import (
    ApiException,
    DecodeException,
    ErrorKind,
    HttpStatusException,
    OwoError,
    OwoException,
    TooManyFilesException,
    TransportException,
)
from .models import (
    FileUpload,
    ShortenRequest,
    ShortenResponse,
    UploadRequest,
    UploadResponse,
    UploadedFile,
)

__all__ = [
    # Errors
    "ApiException",
    "DecodeException",
    "ErrorKind",
    "HttpStatusException",
    "OwoError",
    "OwoException",
    "TooManyFilesException",
    "TransportException",
    # Models
    "FileUpload",
    "ShortenRequest",
    "ShortenResponse",
    "UploadRequest",
    "UploadResponse",
    "UploadedFile",
]
