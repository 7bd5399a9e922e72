"""
Test fixtures package for owo tests.

This package provides factory functions for creating test objects:
- common.py: payloads, response bodies, fake HTTP backends and a
  multipart parser for inspecting upload bodies

Usage:
    from fixtures import make_png, make_requests_session

    def test_something():
        session = make_requests_session()
        requester = RequestsRequester(session)
"""

from .common import (
    PNG_BYTES,
    TEST_KEY,
    MultipartPart,
    RecordingHandler,
    make_error_body,
    make_file_upload,
    make_httpx_client,
    make_png,
    make_requests_response,
    make_requests_session,
    make_shorten_body,
    make_upload_body,
    make_uploaded_file_dict,
    parse_multipart,
)

__all__ = [
    "PNG_BYTES",
    "TEST_KEY",
    "MultipartPart",
    "RecordingHandler",
    "make_error_body",
    "make_file_upload",
    "make_httpx_client",
    "make_png",
    "make_requests_response",
    "make_requests_session",
    "make_shorten_body",
    "make_upload_body",
    "make_uploaded_file_dict",
    "parse_multipart",
]
