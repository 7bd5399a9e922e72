"""
HTTP Backends

Requester implementations over requests (blocking) and httpx (async).
Each backend library is an optional extra and is imported on first use.
"""

from .httpx_backend import HttpxRequester
from .requests_backend import RequestsRequester
from .response import HttpResponse

__all__ = [
    "HttpResponse",
    "HttpxRequester",
    "RequestsRequester",
]
