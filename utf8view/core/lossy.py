"""Lossy repair of arbitrary bytes into an owned, always-valid UTF-8 buffer."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .classifier import byte_view, classify
from .errors import InvalidReplacementError, ReleasedBufferError
from .validator import validate
from .view import Utf8View

log = logging.getLogger(__name__)

REPLACEMENT_CHARACTER = "\ufffd"
# U+FFFD = 1110(1111) 10(111111) 10(111101)
REPLACEMENT_BYTES = b"\xef\xbf\xbd"


class OwnedUtf8Buffer:
    """Repaired bytes owned by exactly one holder.

    Use it as a context manager to release it on scope exit. Releasing twice
    is a no-op; any other access after release raises ReleasedBufferError.
    Memoryviews handed out through ``data`` and ``as_view`` are released too,
    so reading them afterwards raises ValueError. Sub-slices cut from such a
    view before release keep their own reference and stay readable.
    """

    def __init__(self, data: Optional[bytearray] = None) -> None:
        self._data: Optional[bytearray] = bytearray() if data is None else data
        self._exports: List[memoryview] = []

    @property
    def released(self) -> bool:
        return self._data is None

    def _owned(self) -> bytearray:
        if self._data is None:
            raise ReleasedBufferError("owned UTF-8 buffer used after release")
        return self._data

    def _export(self) -> memoryview:
        view = byte_view(self._owned())
        self._exports.append(view)
        return view

    @property
    def data(self) -> memoryview:
        return self._export()

    @property
    def length(self) -> int:
        return len(self._owned())

    def as_view(self) -> Utf8View:
        """Borrow the repaired bytes as a validated view, valid until release."""
        view = self._export()
        return Utf8View(view, len(view))

    def release(self) -> None:
        if self._data is None:
            return
        log.debug("releasing owned buffer of %d bytes", len(self._data))
        for view in self._exports:
            try:
                view.release()
            except BufferError:
                # a consumer still holds a buffer export of this view
                log.warning("memoryview of released buffer is still exported")
        self._exports.clear()
        self._data = None

    def __len__(self) -> int:
        return self.length

    def __bytes__(self) -> bytes:
        return bytes(self._owned())

    def __enter__(self) -> "OwnedUtf8Buffer":
        self._owned()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._data is None:
            return "OwnedUtf8Buffer(<released>)"
        return f"OwnedUtf8Buffer({bytes(self._data)!r})"


@dataclass(frozen=True)
class LossyRepair:
    """Replace every invalid byte with ``replacement`` and keep the rest."""

    replacement: bytes = REPLACEMENT_BYTES

    def __post_init__(self) -> None:
        if not self.replacement or not validate(self.replacement).valid:
            raise InvalidReplacementError(
                f"replacement must be a non-empty valid UTF-8 sequence, got {self.replacement!r}"
            )

    def repair(self, data) -> OwnedUtf8Buffer:
        """Return an owned copy of ``data`` that is guaranteed valid UTF-8.

        One replacement is written per invalid byte; the scan resumes at the
        very next byte. Only an allocation failure yields an empty buffer.
        """
        if data is None:
            return OwnedUtf8Buffer()

        data = byte_view(data)
        marker = bytes(self.replacement)
        width = len(marker)
        size = len(data)

        try:
            buffer = bytearray(size * width)
        except MemoryError:
            log.warning("could not allocate %d bytes for lossy repair", size * width)
            return OwnedUtf8Buffer()

        used = 0
        offset = 0
        replaced = 0
        while offset < size:
            result = classify(data, offset)
            if result.valid:
                span = result.next_offset - offset
                buffer[used:used + span] = data[offset:result.next_offset]
                used += span
                offset = result.next_offset
            else:
                buffer[used:used + width] = marker
                used += width
                offset += 1
                replaced += 1

        del buffer[used:]
        if replaced:
            log.debug("replaced %d invalid byte(s); %d -> %d bytes", replaced, size, used)
        return OwnedUtf8Buffer(buffer)


_DEFAULT_REPAIR = LossyRepair()


def make_lossy(data) -> OwnedUtf8Buffer:
    """Repair ``data`` with the U+FFFD replacement character."""
    return _DEFAULT_REPAIR.repair(data)


def release(owned: OwnedUtf8Buffer) -> None:
    owned.release()
