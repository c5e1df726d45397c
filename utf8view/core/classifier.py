"""Byte classifier deciding whether one UTF-8 scalar value starts at an offset."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CharValidity:
    """Outcome of classifying the bytes at one offset.

    ``next_offset`` equals the input offset when ``valid`` is False.
    """

    valid: bool
    next_offset: int


def _is_continuation(byte: int) -> bool:
    return byte & 0b11000000 == 0b10000000


def byte_view(data) -> memoryview:
    """Return a read-only, byte-addressed memoryview over ``data`` without copying."""
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


def char_width(lead: int) -> int:
    """Return the encoded width announced by a leading byte, 0 if it is not one."""
    if lead & 0b10000000 == 0b00000000:
        return 1
    if lead & 0b11100000 == 0b11000000:
        return 2
    if lead & 0b11110000 == 0b11100000:
        return 3
    if lead & 0b11111000 == 0b11110000:
        return 4
    return 0


def classify(data, offset: int) -> CharValidity:
    """Classify the scalar value encoding starting at ``data[offset]``.

    Reads at most four bytes and never past ``len(data)``. A sequence that is
    truncated by the end of the buffer is invalid.
    """
    rejected = CharValidity(False, offset)
    remaining = len(data) - offset
    if offset < 0 or remaining <= 0:
        return rejected

    lead = data[offset]
    width = char_width(lead)
    if width == 0 or width > remaining:
        return rejected
    if width == 1:
        return CharValidity(True, offset + 1)

    for i in range(1, width):
        if not _is_continuation(data[offset + i]):
            return rejected

    second = data[offset + 1]
    if width == 2:
        # 110(00001) 10(111111) is the last value a single byte already covers
        if lead & 0b00011111 < 0b00000010:
            return rejected
    elif width == 3:
        if lead & 0b00001111 == 0 and second & 0b00111111 < 0b00100000:
            return rejected
        # U+D800..U+DFFF: ED A0 80 .. ED BF BF
        if lead == 0xED and 0xA0 <= second <= 0xBF:
            return rejected
    else:
        if lead & 0b00000111 == 0 and second & 0b00111111 < 0b00010000:
            return rejected

    return CharValidity(True, offset + width)
