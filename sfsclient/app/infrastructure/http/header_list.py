"""Request header list owned by a single request attempt."""
from __future__ import annotations

from enum import Enum
from types import TracebackType

from sfsclient.app.domain.result import Result, ResultCode

_FORBIDDEN_CHARACTERS = ("\r", "\n", "\0")


class HttpHeader(str, Enum):
    CONTENT_TYPE = "Content-Type"


class HeaderList:
    """Ordered "Name: value" entries; cleared when the owning attempt leaves its scope."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def __enter__(self) -> "HeaderList":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def add(self, header: HttpHeader, value: str) -> Result[None]:
        if any(ch in value for ch in _FORBIDDEN_CHARACTERS):
            return Result.failure(ResultCode.CONNECTION_SETUP_FAILED, "Failed to add header to header list")
        self._entries.append(f"{header.value}: {value}")
        return Result.success()

    def as_pairs(self) -> list[tuple[str, str]]:
        pairs = []
        for entry in self._entries:
            name, _, value = entry.partition(": ")
            pairs.append((name, value))
        return pairs

    def release(self) -> None:
        self._entries.clear()
