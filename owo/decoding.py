"""
Response Decoding

Maps raw response bytes plus an HTTP status code onto typed results.

Decoding is pure: no I/O, no logging. Every failure surfaces as an
OwoException subclass:

- ApiException: the body is a well-formed error reported by the service,
  whatever the status code
- HttpStatusException: non-2xx status without a recognisable error body
- DecodeException: 2xx status with a malformed or unexpected body
"""

from __future__ import annotations

import json
from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import ValidationError

from owo.schemas import (
    ApiException,
    DecodeException,
    HttpStatusException,
    ShortenResponse,
    UploadResponse,
)

# How much of an unexpected body to keep in error details.
_EXCERPT_LIMIT = 200

_URL_SCHEMES = ("http", "https")


def decode_upload_response(status_code: int, body: bytes) -> UploadResponse:
    """
    Decode the response to a file upload.

    Raises:
        ApiException: If the service reported an error.
        HttpStatusException: If the status is not 2xx and the body carries
            no API error.
        DecodeException: If a 2xx body is not a valid upload result.
    """
    ok, payload = _load_json(body)
    if ok:
        _raise_api_error(payload)

    if not _is_success(status_code):
        raise HttpStatusException(status_code, details={"body": _excerpt(body)})

    if not ok:
        raise DecodeException(
            "Upload response is not valid JSON",
            details={"body": _excerpt(body)},
        )

    try:
        return UploadResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodeException(
            "Upload response does not match the expected schema",
            details={"errors": _validation_messages(e)},
        ) from e


def decode_shorten_response(
    status_code: int,
    body: bytes,
    content_type: Optional[str] = None,
) -> ShortenResponse:
    """
    Decode the response to a shorten request.

    The service answers either with JSON or with the shortened URL as plain
    text; JSON is assumed when the content type says so or the body opens
    like a JSON document.

    Raises:
        ApiException: If the service reported an error.
        HttpStatusException: If the status is not 2xx and the body carries
            no API error.
        DecodeException: If a 2xx body holds no shortened URL.
    """
    try:
        text = body.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        if not _is_success(status_code):
            raise HttpStatusException(status_code) from e
        raise DecodeException("Shorten response is not valid UTF-8") from e

    looks_like_json = text[:1] in ("{", "[", '"') or text == "null" or (
        content_type is not None and "json" in content_type.lower()
    )

    if looks_like_json:
        ok, payload = _load_json(body)
        if ok:
            _raise_api_error(payload)
        if not _is_success(status_code):
            raise HttpStatusException(status_code, details={"body": _excerpt(body)})
        if not ok:
            raise DecodeException(
                "Shorten response is not valid JSON",
                details={"body": _excerpt(body)},
            )
        url = _shortened_url(payload)
        if url is None:
            raise DecodeException(
                "Shorten response carries no shortened URL",
                details={"body": _excerpt(body)},
            )
        return ShortenResponse(url=url)

    if not _is_success(status_code):
        raise HttpStatusException(status_code, details={"body": _excerpt(body)})

    # Plain text: the body is the URL and nothing else.
    if not _is_absolute_url(text):
        raise DecodeException(
            "Plain-text shorten response is not an absolute http(s) URL",
            details={"body": _excerpt(body)},
        )
    return ShortenResponse(url=text)


# =============================================================================
# Helpers
# =============================================================================

def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _is_absolute_url(text: str) -> bool:
    if not text or any(ch.isspace() for ch in text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    return parts.scheme.lower() in _URL_SCHEMES and bool(parts.netloc)


def _load_json(body: bytes) -> tuple[bool, Any]:
    """Parse JSON, reporting failure instead of raising."""
    try:
        return True, json.loads(body)
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return False, None


def _raise_api_error(payload: Any) -> None:
    """
    Raise ApiException if `payload` is an error reported by the service.

    Recognised shapes:
    - {"error": 401, "message": "bad key"}
    - {"error": {"code": 401, "message": "bad key"}}
    - {"success": false, "errorcode": 400, "description": "..."}
    """
    if not isinstance(payload, dict):
        return

    error = payload.get("error")
    if isinstance(error, dict):
        raise ApiException(
            code=_code(error.get("code")),
            message=_message(error.get("message"), payload.get("message")),
        )
    if error is not None and error is not False:
        raise ApiException(
            code=_code(error),
            message=_message(
                payload.get("message"),
                payload.get("description"),
                error if isinstance(error, str) else None,
            ),
        )

    if payload.get("success") is False:
        raise ApiException(
            code=_code(payload.get("errorcode")),
            message=_message(payload.get("description"), payload.get("message")),
        )


def _code(value: Any) -> int | str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, str)):
        return value
    return None


def _message(*candidates: Any) -> str:
    for candidate in candidates:
        if candidate is not None and candidate != "":
            return candidate if isinstance(candidate, str) else str(candidate)
    return "The service reported an error"


def _shortened_url(payload: Any) -> Optional[str]:
    """Pull the shortened URL out of any of the known success shapes."""
    if isinstance(payload, str):
        return payload.strip() or None
    if not isinstance(payload, dict):
        return None

    results = payload.get("results")
    if isinstance(results, list) and results and isinstance(results[0], dict):
        for key in ("ResultUrl", "resultUrl", "url"):
            value = results[0].get(key)
            if isinstance(value, str) and value:
                return value

    for key in ("result", "url"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value

    return None


def _excerpt(body: bytes) -> str:
    text = body[:_EXCERPT_LIMIT].decode("utf-8", errors="replace")
    if len(body) > _EXCERPT_LIMIT:
        text += "..."
    return text


def _validation_messages(error: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in e['loc']) or '<root>'}: {e['msg']}"
        for e in error.errors()
    ]
