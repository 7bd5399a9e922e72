"""
Error Taxonomy

Defines both the Pydantic model for structured error communication and the
Python exceptions raised by requesters and decoders.

Every failure a caller can observe is an OwoException subclass; errors from
requests or httpx are wrapped, never leaked.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Kinds (Machine-Readable Constants)
# =============================================================================

class ErrorKind(str, Enum):
    """Stable machine-readable error kinds."""

    # Connection, TLS or timeout failures raised by the HTTP backend
    TRANSPORT = "TRANSPORT"
    # Unexpected status code without a recognisable API error body
    HTTP = "HTTP"
    # Malformed or unexpected response body
    DECODE = "DECODE"
    # Well-formed error reported by the service itself
    API = "API"
    # Request rejected before sending: too many files in one upload
    TOO_MANY_FILES = "TOO_MANY_FILES"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class OwoError(BaseModel):
    """
    Error model for passing failures around without exceptions.

    Useful when results of many calls are collected and reported together.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    kind: ErrorKind = Field(
        ...,
        description="Stable machine-readable error kind",
        examples=[ErrorKind.API],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "OwoException":
        """Convert this error model to the matching exception."""
        details = dict(self.details)
        if self.kind is ErrorKind.API:
            return ApiException(
                code=details.pop("code", None),
                message=self.message,
                details=details,
            )
        if self.kind is ErrorKind.HTTP:
            return HttpStatusException(
                status_code=details.pop("status_code", 0),
                message=self.message,
                details=details,
            )
        if self.kind is ErrorKind.TOO_MANY_FILES:
            return TooManyFilesException(
                count=details.get("count", 0),
                limit=details.get("limit", 0),
            )
        return _EXCEPTIONS_BY_KIND[self.kind](self.message, details=details)


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class OwoException(Exception):
    """
    Base exception for all owo client errors.

    Carries structured error information and can be converted to an
    OwoError model.
    """

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> OwoError:
        """Convert this exception to an OwoError model."""
        return OwoError(
            kind=self.kind,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={self.message!r})"


class TransportException(OwoException):
    """Raised when the HTTP backend fails to complete the exchange."""

    kind = ErrorKind.TRANSPORT


class HttpStatusException(OwoException):
    """Raised when the service answers with an unexpected status code."""

    kind = ErrorKind.HTTP

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["status_code"] = status_code
        super().__init__(
            message=message or f"Unexpected HTTP status {status_code}",
            details=full_details,
        )
        self.status_code = status_code


class DecodeException(OwoException):
    """Raised when a response body is malformed or missing required fields."""

    kind = ErrorKind.DECODE


class ApiException(OwoException):
    """
    Raised when the service reports an error of its own.

    `code` and `message` are carried verbatim from the response body.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        code: int | str | None,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["code"] = code
        super().__init__(message=message, details=full_details)
        self.code = code

    def __repr__(self) -> str:
        return f"ApiException(code={self.code!r}, message={self.message!r})"


class TooManyFilesException(OwoException):
    """Raised when an upload would carry more files than the service allows."""

    kind = ErrorKind.TOO_MANY_FILES

    def __init__(
        self,
        count: int,
        limit: int,
    ) -> None:
        super().__init__(
            message=f"Too many files to upload: {count} > {limit}",
            details={"count": count, "limit": limit},
        )
        self.count = count
        self.limit = limit


_EXCEPTIONS_BY_KIND: dict[ErrorKind, type[OwoException]] = {
    ErrorKind.TRANSPORT: TransportException,
    ErrorKind.DECODE: DecodeException,
}
