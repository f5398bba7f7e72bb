from __future__ import annotations

import httpx
import pytest

from sfsclient.app.infrastructure.http.diagnostic_buffer import DiagnosticBuffer
from sfsclient.app.infrastructure.http.transport_handle import TransportHandle, TransportSetupError


@pytest.fixture()
def handle():
    h = TransportHandle(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    yield h
    h.close()


def test_binds_on_enter_and_unbinds_on_exit(handle, reporting_handler):
    with DiagnosticBuffer(handle, reporting_handler) as buffer:
        assert buffer.bound is True
        assert handle.error_sink is buffer

    assert buffer.bound is False
    assert handle.error_sink is None


def test_unbinds_when_block_raises(handle, reporting_handler):
    with pytest.raises(RuntimeError):
        with DiagnosticBuffer(handle, reporting_handler):
            raise RuntimeError("boom")

    assert handle.error_sink is None


def test_text_is_truncated_to_capacity_and_kept_after_exit(handle, reporting_handler):
    with DiagnosticBuffer(handle, reporting_handler, capacity=8) as buffer:
        buffer.write("abcdefghijkl")

    assert buffer.text == "abcdefg"


def test_bind_on_closed_handle_raises(handle, reporting_handler):
    handle.close()

    with pytest.raises(TransportSetupError):
        with DiagnosticBuffer(handle, reporting_handler):
            pass


def test_unbind_failure_is_logged_not_raised(handle, reporting_handler):
    with DiagnosticBuffer(handle, reporting_handler) as buffer:
        handle.close()

    assert buffer.bound is False
    assert "error_buffer_unset_failed" in reporting_handler.event_names()
