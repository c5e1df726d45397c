"""Scalar value decoding for single characters."""

# Payload mask of the leading byte, indexed by encoded length.
_LEAD_MASKS = (0, 0b01111111, 0b00011111, 0b00001111, 0b00000111)


def code_point(char) -> int:
    """Return the Unicode scalar value encoded by ``char``.

    ``char`` must come from a validated view. The terminal character decodes
    to 0.
    """
    length = char.length
    if length == 0:
        return 0
    data = char.data
    value = data[0] & _LEAD_MASKS[length]
    for i in range(1, length):
        value = (value << 6) | (data[i] & 0b00111111)
    return value
