"""Core modules for UTF-8 validation and traversal."""

from .classifier import CharValidity, char_width, classify  # noqa: F401
from .codepoint import code_point  # noqa: F401
from .cursor import CharCursor, Utf8Char, count, make_cursor, next_char, nth  # noqa: F401
from .errors import InvalidReplacementError, ReleasedBufferError, Utf8ViewError  # noqa: F401
from .lossy import (  # noqa: F401
    REPLACEMENT_BYTES,
    REPLACEMENT_CHARACTER,
    LossyRepair,
    OwnedUtf8Buffer,
    make_lossy,
    release,
)
from .validator import Utf8Validity, validate  # noqa: F401
from .view import Utf8View, is_boundary, is_boundary_byte, make_view, slice_view  # noqa: F401
