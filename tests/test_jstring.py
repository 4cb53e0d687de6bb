import pytest

from zipkit.jstring import (
    utf16_length_of_utf8,
    utf16_to_utf8,
    utf8_length_of_utf16,
    utf8_to_utf16,
)


def _units(text):
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def test_ascii_round_trip():
    units = utf8_to_utf16(b"hello")
    assert units == [ord(c) for c in "hello"]
    assert utf16_to_utf8(units) == b"hello"


def test_two_byte_sequence():
    assert utf16_to_utf8([0xE9]) == b"\xc3\xa9"
    assert utf8_to_utf16(b"\xc3\xa9") == [0xE9]


def test_bmp_text_matches_standard_encoding():
    text = "zip \u00e9\u4e2d\u20ac"
    assert utf16_to_utf8(_units(text)) == text.encode("utf-8")
    assert utf8_to_utf16(text.encode("utf-8")) == _units(text)


def test_four_byte_sequence_becomes_surrogate_pair():
    text = "\U0001F600"
    units = utf8_to_utf16(text.encode("utf-8"))
    assert units == _units(text)
    assert len(units) == 2
    assert 0xD800 <= units[0] < 0xDC00
    assert 0xDC00 <= units[1] < 0xE000


def test_surrogates_encoded_one_unit_at_a_time():
    pair = _units("\U0001F600")
    encoded = utf16_to_utf8(pair)
    assert len(encoded) == 6
    assert utf8_to_utf16(encoded) == pair


def test_lone_surrogate_is_kept():
    encoded = utf16_to_utf8([0xD800])
    assert encoded == "\ud800".encode("utf-8", "surrogatepass")
    assert utf8_to_utf16(encoded) == [0xD800]


def test_empty():
    assert utf16_to_utf8([]) == b""
    assert utf8_to_utf16(b"") == []
    assert utf8_length_of_utf16([]) == 0
    assert utf16_length_of_utf8(b"") == 0


@pytest.mark.parametrize("text", ["abc", "\u00e9t\u00e9", "\u4e2d\u6587", "a\U0001F600b"])
def test_lengths_agree_with_conversions(text):
    units = _units(text)
    assert utf8_length_of_utf16(units) == len(utf16_to_utf8(units))
    data = text.encode("utf-8")
    assert utf16_length_of_utf8(data) == len(utf8_to_utf16(data))


def test_unit_out_of_range_rejected():
    with pytest.raises(ValueError):
        utf16_to_utf8([0x10000])
    with pytest.raises(ValueError):
        utf8_length_of_utf16([-1])


def test_malformed_utf8_rejected():
    with pytest.raises(ValueError):
        utf8_to_utf16(b"\xff\xfe")