"""Scoped diagnostic buffer bound to a transport handle for one transfer attempt."""
from __future__ import annotations

from types import TracebackType

from sfsclient.app.constants import ERROR_BUFFER_SIZE
from sfsclient.app.infrastructure.http.transport_handle import TransportHandle, TransportSetupError
from sfsclient.app.ports.reporting_handler import ReportingHandler


class DiagnosticBuffer:
    """Captures the transport's error text while bound to a handle.

    Entering binds the buffer (TransportSetupError if that fails); exiting
    always unbinds it, whatever way the block is left. The captured text stays
    readable after unbinding.
    """

    def __init__(
        self,
        handle: TransportHandle,
        handler: ReportingHandler,
        capacity: int = ERROR_BUFFER_SIZE,
    ) -> None:
        self._handle = handle
        self._handler = handler
        self._capacity = capacity
        self._text = ""
        self._bound = False

    def __enter__(self) -> "DiagnosticBuffer":
        self._text = ""
        self._handle.set_error_buffer(self)
        self._bound = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unbind()

    @property
    def bound(self) -> bool:
        return self._bound

    @property
    def text(self) -> str:
        return self._text

    def write(self, text: str) -> None:
        # Leave room for the terminator, as the native buffer does.
        self._text = text[: self._capacity - 1]

    def unbind(self) -> None:
        if not self._bound:
            return
        self._bound = False
        try:
            self._handle.set_error_buffer(None)
        except TransportSetupError as exc:
            self._handler.log("warning", "error_buffer_unset_failed", error=str(exc))
