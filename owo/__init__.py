"""
owo

Client library for the whats-th.is file upload and URL shortening API, over
a blocking (requests) or asynchronous (httpx) backend.
"""

from .builder import (
    PreparedRequest,
    build_shorten_request,
    build_upload_request,
    encode_multipart,
    sniff_content_type,
)
from .client import AsyncOwoClient, OwoClient
from .config import OwoConfig
from .constants import MAX_FILES, USER_AGENT, __version__
from .decoding import decode_shorten_response, decode_upload_response
from .http import HttpResponse, HttpxRequester, RequestsRequester
from .requester import AsyncOwoRequester, OwoRequester
from .schemas import (
    ApiException,
    DecodeException,
    ErrorKind,
    FileUpload,
    HttpStatusException,
    OwoError,
    OwoException,
    ShortenRequest,
    ShortenResponse,
    TooManyFilesException,
    TransportException,
    UploadedFile,
    UploadRequest,
    UploadResponse,
)

__all__ = [
    "__version__",
    "MAX_FILES",
    "USER_AGENT",
    # Configuration
    "OwoConfig",
    # Requesters
    "AsyncOwoRequester",
    "HttpxRequester",
    "OwoRequester",
    "RequestsRequester",
    "AsyncOwoClient",
    "OwoClient",
    # Request building
    "PreparedRequest",
    "build_shorten_request",
    "build_upload_request",
    "encode_multipart",
    "sniff_content_type",
    # Response decoding
    "HttpResponse",
    "decode_shorten_response",
    "decode_upload_response",
    # Models
    "FileUpload",
    "ShortenRequest",
    "ShortenResponse",
    "UploadRequest",
    "UploadResponse",
    "UploadedFile",
    # Errors
    "ApiException",
    "DecodeException",
    "ErrorKind",
    "HttpStatusException",
    "OwoError",
    "OwoException",
    "TooManyFilesException",
    "TransportException",
]
