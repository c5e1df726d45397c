"""Validate, repair and walk UTF-8 byte data without decoding it."""

from utf8view.core import (  # noqa: F401
    REPLACEMENT_BYTES,
    REPLACEMENT_CHARACTER,
    CharCursor,
    CharValidity,
    InvalidReplacementError,
    LossyRepair,
    OwnedUtf8Buffer,
    ReleasedBufferError,
    Utf8Char,
    Utf8Validity,
    Utf8View,
    Utf8ViewError,
    char_width,
    classify,
    code_point,
    count,
    is_boundary,
    is_boundary_byte,
    make_cursor,
    make_lossy,
    make_view,
    next_char,
    nth,
    release,
    slice_view,
    validate,
)

__version__ = "0.1.0"
