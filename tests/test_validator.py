"""Tests for the byte classifier and whole-buffer validation."""

import pytest

from utf8view import CharValidity, Utf8Char, char_width, classify, code_point, validate

# english 1 byte per character, russian 2, japanese 3, emoji 4
SAMPLE_TEXT = "Hello Здравствуйте こんにちは 🚩😁"
SAMPLE = SAMPLE_TEXT.encode("utf-8")
SAMPLE_LEN = 5 + 1 + 12 * 2 + 1 + 5 * 3 + 1 + 2 * 4


def _as_char(data):
    return Utf8Char(memoryview(data), len(data))


def test_validate_ok():
    validity = validate(SAMPLE)
    assert validity.valid is True
    assert validity.valid_upto == SAMPLE_LEN


def test_validate_hello():
    validity = validate(b"Hello")
    assert validity.valid is True
    assert validity.valid_upto == 5


def test_validate_stops_at_first_invalid_byte():
    validity = validate(b"Hi\xC0\xC0")
    assert validity.valid is False
    assert validity.valid_upto == 2


def test_validate_reports_longest_valid_prefix():
    data = "Hello Здравствуйте".encode("utf-8") + b"\xC0\xC0" + " こんにちは 🚩😁".encode("utf-8")
    validity = validate(data)
    assert validity.valid is False
    assert validity.valid_upto == 5 + 1 + 12 * 2


@pytest.mark.parametrize(
    "data",
    [
        b"\x7F",  # last 1 byte: 0(1111111)
        b"\xC2\x80",  # first 2 byte: 110(00010) 10(000000)
        b"\xDF\xBF",  # last 2 byte
        b"\xE0\xA0\x80",  # first 3 byte: 1110(0000) 10(100000) 10(000000)
        b"\xEF\xBF\xBF",  # last 3 byte
        b"\xF0\x90\x80\x80",  # first 4 byte: 11110(000) 10(010000) 10(000000) 10(000000)
        b"\xF7\xBF\xBF\xBF",  # last 4 byte pattern
    ],
)
def test_validate_boundary_encodings(data):
    validity = validate(data)
    assert validity.valid is True
    assert validity.valid_upto == len(data)


@pytest.mark.parametrize(
    "data",
    [b"\xED\xA0\x80", b"\xED\xAC\x80", b"\xED\xA0\x8C", b"\xED\xBF\xBF"],
)
def test_surrogates_rejected(data):
    assert validate(data) == validate(b"\xED\xA0\x80")
    assert validate(data).valid is False
    assert validate(data).valid_upto == 0


def test_ed_below_surrogate_range_accepted():
    # U+D7FF
    assert validate(b"\xED\x9F\xBF").valid is True


@pytest.mark.parametrize(
    "actual, overlong",
    [
        (b"H", b"\xC1\x88"),
        (b"H", b"\xE0\x81\x88"),
        (b"H", b"\xF0\x80\x81\x88"),
        ("д".encode("utf-8"), b"\xE0\x90\xB4"),
        ("д".encode("utf-8"), b"\xF0\x80\x90\xB4"),
        ("こ".encode("utf-8"), b"\xF0\x83\x81\x93"),
        (b"\x7F", b"\xC1\xBF"),
        (b"\xDF\xBF", b"\xE0\x9F\xBF"),
        (b"\xEF\xBF\xBF", b"\xF0\x8F\xBF\xBF"),
    ],
)
def test_overlong_encodings_rejected(actual, overlong):
    assert code_point(_as_char(actual)) == code_point(_as_char(overlong))

    validity = validate(actual)
    assert validity.valid is True
    assert validity.valid_upto == len(actual)

    validity = validate(overlong)
    assert validity.valid is False
    assert validity.valid_upto == 0


@pytest.mark.parametrize("lead", [0xC0, 0xC1])
def test_two_byte_overlong_leads_always_invalid(lead):
    for second in range(0x80, 0xC0):
        assert validate(bytes([lead, second])).valid is False


def test_three_and_four_byte_overlong_ranges():
    for second in range(0x80, 0xA0):
        assert validate(bytes([0xE0, second, 0x80])).valid is False
    for second in range(0x80, 0x90):
        assert validate(bytes([0xF0, second, 0x80, 0x80])).valid is False


def test_every_scalar_value_validates():
    text = "".join(
        chr(cp) for cp in range(0, 0x110000, 0x3F) if not 0xD800 <= cp <= 0xDFFF
    )
    data = text.encode("utf-8")
    validity = validate(data)
    assert validity.valid is True
    assert validity.valid_upto == len(data)


@pytest.mark.parametrize(
    "data, valid_upto",
    [
        (b"ab\xE3\x81", 2),
        (b"\xF0\x9F\x98", 0),
        (b"\xC3", 0),
        (b"ok\x80", 2),
        (b"\xE3\x81\x41", 0),
        (b"\xF8\x88\x80\x80\x80", 0),
    ],
)
def test_truncated_and_malformed_sequences(data, valid_upto):
    validity = validate(data)
    assert validity.valid is False
    assert validity.valid_upto == valid_upto


def test_validate_none_is_invalid():
    validity = validate(None)
    assert validity.valid is False
    assert validity.valid_upto == 0


def test_validate_empty_and_nul():
    assert validate(b"").valid_upto == 0
    assert validate(b"").valid is True
    # NUL is an ordinary byte, not a terminator
    assert validate(b"a\x00b").valid_upto == 3


def test_validate_accepts_bytes_like():
    assert validate(bytearray(SAMPLE)).valid_upto == SAMPLE_LEN
    assert validate(memoryview(SAMPLE)[6:30]).valid_upto == 24


def test_validate_rejects_text():
    with pytest.raises(TypeError):
        validate(SAMPLE_TEXT)


def test_classify_single_characters():
    assert classify(b"H", 0) == CharValidity(True, 1)
    assert classify("д".encode("utf-8"), 0) == CharValidity(True, 2)
    assert classify("xこ".encode("utf-8"), 1) == CharValidity(True, 4)
    assert classify("😁".encode("utf-8"), 0) == CharValidity(True, 4)


def test_classify_failure_makes_no_progress():
    assert classify(b"\x80", 0) == CharValidity(False, 0)
    assert classify(b"ab\xC0\xC0", 2) == CharValidity(False, 2)
    assert classify(b"abc", 3) == CharValidity(False, 3)
    assert classify(b"abc", -1) == CharValidity(False, -1)


def test_classify_never_reads_past_end():
    data = memoryview("😁".encode("utf-8"))[:3]
    assert classify(data, 0) == CharValidity(False, 0)


@pytest.mark.parametrize(
    "lead, width",
    [(0x41, 1), (0x7F, 1), (0x80, 0), (0xBF, 0), (0xC2, 2), (0xE3, 3), (0xF0, 4), (0xF8, 0), (0xFF, 0)],
)
def test_char_width(lead, width):
    assert char_width(lead) == width
