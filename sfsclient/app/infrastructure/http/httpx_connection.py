"""Connection implementation driving a TransportHandle backed by httpx."""
from __future__ import annotations

from types import TracebackType
from typing import Callable

from sfsclient.app.constants import CONTENT_TYPE, MAX_RESPONSE_CHARACTERS
from sfsclient.app.domain.error_handling import fail_and_log, log_if_failed
from sfsclient.app.domain.result import Result, ResultCode
from sfsclient.app.infrastructure.http.code_translation import (
    http_status_to_result,
    transport_error_to_result,
)
from sfsclient.app.infrastructure.http.diagnostic_buffer import DiagnosticBuffer
from sfsclient.app.infrastructure.http.header_list import HeaderList, HttpHeader
from sfsclient.app.infrastructure.http.response_accumulator import ResponseAccumulator
from sfsclient.app.infrastructure.http.transport_handle import (
    TransportError,
    TransportHandle,
    TransportInfoError,
    TransportSetupError,
    WriteRejectedError,
)
from sfsclient.app.ports.connection import Connection
from sfsclient.app.ports.reporting_handler import ReportingHandler


class HttpxConnection(Connection):
    """Connection implementation that owns one TransportHandle for its lifetime.

    Each get/post call is one blocking exchange. The instance must not be
    shared between threads; a call made while another is in flight fails
    with CONNECTION_UNEXPECTED_ERROR.
    """

    def __init__(
        self,
        handle: TransportHandle,
        handler: ReportingHandler,
        *,
        max_response_characters: int = MAX_RESPONSE_CHARACTERS,
    ) -> None:
        self._handle = handle
        self._handler = handler
        self._accumulator = ResponseAccumulator(max_response_characters)
        self._in_flight = False

    def __enter__(self) -> "HttpxConnection":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def get(self, url: str) -> Result[str]:
        if not url:
            return fail_and_log(self._handler, ResultCode.INVALID_ARGUMENT, "url cannot be empty")

        def configure() -> Result[str]:
            self._handle.set_http_get()
            self._handle.set_headers(None)
            return self._perform(url)

        return self._exchange(configure)

    def post(self, url: str, body: str) -> Result[str]:
        if not url:
            return fail_and_log(self._handler, ResultCode.INVALID_ARGUMENT, "url cannot be empty")

        def configure() -> Result[str]:
            with HeaderList() as headers:
                added = headers.add(HttpHeader.CONTENT_TYPE, CONTENT_TYPE.JSON)
                if added.is_failure:
                    return log_if_failed(self._handler, added)
                self._handle.set_http_post(body)
                self._handle.set_headers(headers.as_pairs())
                try:
                    return self._perform(url)
                finally:
                    self._handle.set_headers(None)

        return self._exchange(configure)

    def close(self) -> None:
        self._handle.close()

    def _exchange(self, configure: Callable[[], Result[str]]) -> Result[str]:
        if self._in_flight:
            return fail_and_log(
                self._handler,
                ResultCode.CONNECTION_UNEXPECTED_ERROR,
                "connection is already performing a request",
            )
        self._in_flight = True
        try:
            return configure()
        except TransportSetupError as exc:
            return fail_and_log(self._handler, ResultCode.CONNECTION_SETUP_FAILED, f"Transport setup error: {exc}")
        finally:
            self._in_flight = False

    def _perform(self, url: str) -> Result[str]:
        self._handle.set_url(url)

        with DiagnosticBuffer(self._handle, self._handler) as diagnostics:
            self._accumulator.reset()
            self._handle.set_write_callback(self._accumulator.write)

            try:
                self._handle.perform()
            except TransportError as exc:
                if isinstance(exc, WriteRejectedError):
                    self._handler.log(
                        "warning",
                        "response_too_large",
                        url=url,
                        max_characters=self._accumulator.max_characters,
                    )
                self._accumulator.reset()
                return log_if_failed(self._handler, transport_error_to_result(exc.cause, diagnostics.text))

            body = self._accumulator.getvalue()
            self._accumulator.reset()

            try:
                status_code = self._handle.response_code()
            except TransportInfoError as exc:
                return fail_and_log(self._handler, ResultCode.CONNECTION_UNEXPECTED_ERROR, f"Transport error: {exc}")

            status = http_status_to_result(status_code)
            if status.is_failure:
                return log_if_failed(self._handler, status)
            return Result.success(body)
