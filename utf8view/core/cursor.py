"""Character-at-a-time traversal of a validated view."""

from dataclasses import dataclass
from typing import Optional

from .view import Utf8View, is_boundary_byte


@dataclass(frozen=True)
class Utf8Char:
    """One scalar value encoding, borrowed from its view.

    A zero-length character marks an exhausted cursor.
    """

    data: memoryview
    length: int

    @property
    def is_terminal(self) -> bool:
        return self.length == 0

    @property
    def code_point(self) -> int:
        from .codepoint import code_point

        return code_point(self)

    def __bytes__(self) -> bytes:
        return self.data.tobytes()

    def __str__(self) -> str:
        return str(self.data, "utf-8")


class CharCursor:
    """Forward-only cursor over the characters of a view.

    ``next_char`` keeps returning the terminal character once the view is
    exhausted. Iterating the cursor instead stops with StopIteration.
    """

    def __init__(self, view: Utf8View) -> None:
        self.view = view
        self.position = 0

    def next_char(self) -> Utf8Char:
        data = self.view.data
        end = self.view.length
        start = self.position
        if start >= end:
            return Utf8Char(data[end:end], 0)

        position = start + 1
        while position < end and not is_boundary_byte(data[position]):
            position += 1
        self.position = position
        return Utf8Char(data[start:position], position - start)

    def __iter__(self) -> "CharCursor":
        return self

    def __next__(self) -> Utf8Char:
        char = self.next_char()
        if char.is_terminal:
            raise StopIteration
        return char


def make_cursor(view: Utf8View) -> CharCursor:
    return CharCursor(view)


def next_char(cursor: CharCursor) -> Utf8Char:
    return cursor.next_char()


def nth(view: Utf8View, index: int) -> Optional[Utf8Char]:
    """Return the character at ``index`` (zero-based), or None if out of range.

    Walks from the start on every call.
    """
    if index < 0:
        return None
    cursor = make_cursor(view)
    char = cursor.next_char()
    while not char.is_terminal and index > 0:
        char = cursor.next_char()
        index -= 1
    if char.is_terminal:
        return None
    return char


def count(view: Utf8View) -> int:
    """Return the number of characters in ``view``."""
    total = 0
    for _ in make_cursor(view):
        total += 1
    return total
