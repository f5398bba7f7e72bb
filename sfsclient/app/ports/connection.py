"""Connection port: contract for one blocking GET/POST exchange with the feed service.

Application code depends on this port; infrastructure (httpx) implements it.
Failures come back as Result values, never as exceptions.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from sfsclient.app.domain.result import Result


@runtime_checkable
class Connection(Protocol):
    """Port: perform GET/POST requests. One instance serves one caller at a time."""

    def get(self, url: str) -> Result[str]:
        """Perform GET; on success the Result value is the response body."""
        ...

    def post(self, url: str, body: str) -> Result[str]:
        """Perform POST with a JSON body sent verbatim; on success the value is the response body."""
        ...

    def close(self) -> None:
        """Release the underlying transport handle. Safe to call more than once."""
        ...
