"""Bounded, append-only buffer the transport streams response bytes into."""
from __future__ import annotations

from enum import Enum

from sfsclient.app.constants import MAX_RESPONSE_CHARACTERS


class WriteSignal(Enum):
    REJECTED = "rejected"


# Returned by write() instead of a byte count; tells the transport to abort.
WRITE_REJECTED = WriteSignal.REJECTED


class ResponseAccumulator:
    """Collects response chunks; never grows past max_characters.

    write() may be called many times per transfer. A chunk that would push the
    total over the cap is refused whole and the transfer must be aborted, so
    a partially read body is never handed back as if it were complete.
    """

    def __init__(self, max_characters: int = MAX_RESPONSE_CHARACTERS) -> None:
        if max_characters <= 0:
            raise ValueError("max_characters must be positive")
        self._max_characters = int(max_characters)
        self._buffer = bytearray()

    @property
    def max_characters(self) -> int:
        return self._max_characters

    @property
    def size(self) -> int:
        return len(self._buffer)

    def reset(self) -> None:
        self._buffer = bytearray()

    def write(self, chunk: bytes) -> int | WriteSignal:
        if len(self._buffer) + len(chunk) > self._max_characters:
            return WRITE_REJECTED
        self._buffer.extend(chunk)
        return len(chunk)

    def getbuffer(self) -> bytes:
        return bytes(self._buffer)

    def getvalue(self) -> str:
        """Body as text; bytes that are not UTF-8 survive as surrogates.

        value.encode("utf-8", "surrogateescape") gives back the received bytes.
        """
        return self._buffer.decode("utf-8", errors="surrogateescape")
