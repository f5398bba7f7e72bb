"""Transport handle: one configured httpx.Client plus the per-request options set on it.

A handle is created once per connection and closed exactly once. Options are
set on it before each exchange, then perform() runs one blocking streamed
transfer. Failures surface as TransportHandleError subclasses; the connection
translates them to Result values.
"""
from __future__ import annotations

from typing import Callable, Protocol, Sequence

import httpx

from sfsclient.app.infrastructure.http.response_accumulator import WriteSignal

WriteCallback = Callable[[bytes], "int | WriteSignal"]

_WRITE_ERROR_TEXT = "Failure writing output to destination"


class TransportHandleError(Exception):
    """Base for transport handle failures."""


class TransportSetupError(TransportHandleError):
    """Raised when the handle cannot be created or an option cannot be applied."""


class TransportInfoError(TransportHandleError):
    """Raised when information about the last transfer is unavailable."""


class TransportError(TransportHandleError):
    """Raised when the transfer itself fails; cause holds the httpx exception, if any."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class WriteRejectedError(TransportError):
    """Raised when the write callback refuses a chunk and the transfer is aborted."""


class ErrorSink(Protocol):
    def write(self, text: str) -> None: ...


class TransportHandle:
    """Owns one httpx.Client for its whole lifetime. Not safe for concurrent use."""

    def __init__(
        self,
        *,
        timeout: httpx.Timeout | None = None,
        transport: httpx.BaseTransport | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        try:
            self._client = httpx.Client(
                timeout=timeout if timeout is not None else httpx.Timeout(5.0),
                transport=transport,
                headers=headers,
                follow_redirects=False,
            )
        except (ValueError, TypeError, OSError) as exc:
            raise TransportSetupError(f"failed to init transport handle: {exc}") from exc
        self._closed = False
        self._method = "GET"
        self._url: httpx.URL | None = None
        self._body: bytes | None = None
        self._headers: list[tuple[str, str]] = []
        self._error_sink: ErrorSink | None = None
        self._write_callback: WriteCallback | None = None
        self._response_code: int | None = None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def error_sink(self) -> ErrorSink | None:
        return self._error_sink

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransportSetupError("transport handle is closed")

    def set_http_get(self) -> None:
        self._ensure_open()
        self._method = "GET"
        self._body = None

    def set_http_post(self, body: str) -> None:
        self._ensure_open()
        try:
            encoded = body.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise TransportSetupError(f"request body is not encodable as UTF-8: {exc}") from exc
        self._method = "POST"
        # Copied at set time; later changes to the caller's data are not seen.
        self._body = encoded

    def set_url(self, url: str) -> None:
        self._ensure_open()
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise TransportSetupError(f"invalid url {url!r}: {exc}") from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise TransportSetupError(f"unsupported url {url!r}")
        self._url = parsed

    def set_headers(self, headers: Sequence[tuple[str, str]] | None) -> None:
        self._ensure_open()
        self._headers = list(headers) if headers else []

    def set_error_buffer(self, sink: ErrorSink | None) -> None:
        self._ensure_open()
        self._error_sink = sink

    def set_write_callback(self, callback: WriteCallback | None) -> None:
        self._ensure_open()
        self._write_callback = callback

    def response_code(self) -> int:
        if self._response_code is None:
            raise TransportInfoError("no response code available for the last transfer")
        return self._response_code

    def perform(self) -> None:
        """Run one blocking exchange, streaming the body into the write callback."""
        self._ensure_open()
        if self._url is None:
            raise TransportSetupError("no url set on transport handle")
        self._response_code = None

        request = self._client.build_request(
            self._method,
            self._url,
            headers=self._headers,
            content=self._body,
        )
        try:
            response = self._client.send(request, stream=True)
            try:
                for chunk in response.iter_bytes():
                    if self._write_callback is None:
                        continue
                    if self._write_callback(chunk) is WriteSignal.REJECTED:
                        self._report(_WRITE_ERROR_TEXT)
                        raise WriteRejectedError(_WRITE_ERROR_TEXT)
            finally:
                response.close()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            text = str(exc) or type(exc).__name__
            self._report(text)
            raise TransportError(text, cause=exc) from exc

        self._response_code = response.status_code

    def _report(self, text: str) -> None:
        if self._error_sink is not None:
            self._error_sink.write(text)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._error_sink = None
        self._write_callback = None
        self._client.close()
