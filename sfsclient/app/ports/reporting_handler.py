"""Diagnostics port: contract for structured log emission.

The connection layer calls into this port to report failures; it never
configures or owns the logging backend.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sfsclient.app.domain.result import Result


@runtime_checkable
class ReportingHandler(Protocol):
    """Port: receives structured diagnostics. Implementations live in infrastructure."""

    def log(self, level: str, event: str, *, depth: int = 0, **fields: Any) -> None:
        """Emit one structured event at the given loguru level name.

        depth is how many frames above the direct caller the event is attributed to.
        """
        ...

    def log_failure(self, result: Result[Any], *, depth: int = 0, **fields: Any) -> None:
        """Emit the failure carried by result. No-op for successful results."""
        ...
