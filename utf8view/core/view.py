"""Zero-copy views over validated UTF-8 and boundary-checked slicing."""

from dataclasses import dataclass
from typing import Iterator, Optional

from .classifier import byte_view
from .validator import validate


@dataclass(frozen=True)
class Utf8View:
    """Borrowed, read-only window onto bytes known to be valid UTF-8.

    The view holds a memoryview of the caller's buffer rather than a copy, so
    it stays correct only while that buffer is left unmodified.
    """

    data: memoryview
    length: int

    def __len__(self) -> int:
        return self.length

    def __bytes__(self) -> bytes:
        return self.data.tobytes()

    def __str__(self) -> str:
        return str(self.data, "utf-8")

    def __iter__(self) -> Iterator:
        from .cursor import make_cursor

        return make_cursor(self)


def make_view(data) -> Optional[Utf8View]:
    """Wrap ``data`` in a view if every byte of it is valid UTF-8, else None."""
    validity = validate(data)
    if not validity.valid:
        return None
    return Utf8View(byte_view(data), validity.valid_upto)


def is_boundary_byte(byte: int) -> bool:
    """Return True unless ``byte`` is a continuation byte (10xxxxxx)."""
    return byte <= 0b01111111 or byte >= 0b11000000


def is_boundary(data, position: int) -> bool:
    """Return True if a scalar value starts at ``position`` of ``data``.

    The end of the buffer counts as a boundary; positions outside it do not.
    An absent buffer has no boundaries.
    """
    if data is None:
        return False
    if isinstance(data, Utf8View):
        data = data.data
    else:
        data = byte_view(data)
    size = len(data)
    if position == size:
        return True
    if not 0 <= position < size:
        return False
    return is_boundary_byte(data[position])


def slice_view(view: Utf8View, start: int, length: int) -> Optional[Utf8View]:
    """Return the sub-view of ``length`` bytes at ``start``.

    ``start`` is clamped to the view and the end is truncated to it. A range
    that would split a character yields None; nothing is repaired or copied.
    """
    size = view.length
    start = min(max(start, 0), size)
    end = min(start + max(length, 0), size)
    if not (is_boundary(view, start) and is_boundary(view, end)):
        return None
    return Utf8View(view.data[start:end], end - start)
