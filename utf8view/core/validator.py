"""Whole-buffer UTF-8 validation."""

import logging
from dataclasses import dataclass

from .classifier import byte_view, classify

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Utf8Validity:
    """Validity verdict for a buffer.

    ``valid_upto`` is the length of the longest valid prefix, which is the
    whole buffer when ``valid`` is True.
    """

    valid: bool
    valid_upto: int


def validate(data) -> Utf8Validity:
    """Scan ``data`` once and report how much of it is valid UTF-8."""
    if data is None:
        return Utf8Validity(False, 0)

    data = byte_view(data)
    offset = 0
    end = len(data)
    while offset < end:
        result = classify(data, offset)
        if not result.valid:
            log.debug("invalid UTF-8 at byte %d of %d", offset, end)
            return Utf8Validity(False, offset)
        offset = result.next_offset

    return Utf8Validity(True, offset)
