"""
requests Backend

Blocking requester built on a `requests.Session`.

Usage:
    session = requests.Session()
    requester = RequestsRequester(session)

    result = requester.shorten_url(key, "https://example.com")
    print(result.url)

The session stays the caller's: pooling, TLS, proxies and timeouts are
whatever it was configured with.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from owo.builder import PreparedRequest, as_file_upload, prepare_shorten, prepare_upload
from owo.config.settings import OwoConfig, resolve
from owo.http.response import HttpResponse
from owo.requester import UploadInput
from owo.schemas import ShortenResponse, TransportException, UploadResponse

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


class RequestsRequester:
    """
    Synchronous implementation of OwoRequester.

    Holds no state besides the session, so one instance may be shared by any
    code the session itself may be shared by.
    """

    backend = "requests"

    def __init__(
        self,
        session: Optional["requests.Session"] = None,
        *,
        config: Optional[OwoConfig] = None,
    ) -> None:
        """
        Initialize the requester.

        Args:
            session: Session to send requests with. When omitted, one is
                created on first use and closed by close().
            config: Endpoint configuration (defaults when None)
        """
        self.config = resolve(config)
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> "requests.Session":
        """Lazy-load requests session."""
        if self._session is None:
            try:
                import requests
            except ImportError:
                raise ImportError("requests package required: pip install owo[requests]")
            self._session = requests.Session()
        return self._session

    def send(self, prepared: PreparedRequest) -> HttpResponse:
        """
        Send one prepared request.

        Raises:
            TransportException: If the exchange could not be completed.
        """
        import requests

        session = self._get_session()
        logger.debug(
            "%s %s (%d bytes)", prepared.method, prepared.url, prepared.body_size
        )

        try:
            response = session.request(
                method=prepared.method,
                url=prepared.url,
                params=prepared.params,
                headers=prepared.headers,
                data=prepared.content,
            )
            content = response.content
        except requests.RequestException as e:
            raise TransportException(
                prepared.redact(f"{prepared.method} {prepared.url} failed: {e}"),
                details={"backend": self.backend, "error_type": type(e).__name__},
            ) from e

        logger.debug("%s %s -> %d", prepared.method, prepared.url, response.status_code)
        return HttpResponse(
            status_code=response.status_code,
            content=content,
            headers=dict(response.headers),
            url=prepared.url,
        )

    def upload_file(
        self,
        key: str,
        data: UploadInput,
        filename: Optional[str] = None,
    ) -> UploadResponse:
        """
        Upload a single file.

        Raises:
            ApiException: If the service rejects the upload.
            TransportException: If the request could not be sent.
        """
        return self.upload_files(key, [as_file_upload(data, filename)])

    def upload_files(
        self,
        key: str,
        files: Sequence[UploadInput],
    ) -> UploadResponse:
        """
        Upload several files in one request.

        Raises:
            TooManyFilesException: If more than config.max_files are given.
        """
        prepared = prepare_upload(key, files, self.config)
        return self.send(prepared).to_upload_response()

    def shorten_url(self, key: str, url: str) -> ShortenResponse:
        """Shorten `url`, returning the shortened link."""
        prepared = prepare_shorten(key, url, self.config)
        return self.send(prepared).to_shorten_response()

    def close(self) -> None:
        """Close the session if this requester created it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RequestsRequester":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RequestsRequester(api_base={self.config.api_base!r})"
