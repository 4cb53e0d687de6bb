"""Conversions between UTF-16 code units and UTF-8 bytes.

UTF-16 text is a sequence of 16-bit code units given as ints. The UTF-16
to UTF-8 direction encodes each code unit on its own. A surrogate pair
therefore becomes two 3-byte sequences, and a lone surrogate is kept
rather than rejected. The UTF-8 to UTF-16 direction decodes 4-byte
sequences into surrogate pairs and accepts the 3-byte surrogate form
that the other direction produces.
"""

from __future__ import annotations

from typing import Iterable, Sequence

_MAX_UNIT = 0xFFFF


def _check_units(units: Iterable[int]) -> list[int]:
    checked = []
    for unit in units:
        if not 0 <= unit <= _MAX_UNIT:
            raise ValueError(f"UTF-16 code unit out of range: {unit!r}")
        checked.append(unit)
    return checked


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8, one code unit at a time."""
    return b"".join(
        chr(unit).encode("utf-8", "surrogatepass") for unit in _check_units(units)
    )


def utf8_to_utf16(data: bytes | bytearray | memoryview) -> list[int]:
    """Decode UTF-8 bytes into UTF-16 code units.

    Raises ``UnicodeDecodeError`` (a ``ValueError``) on malformed input.
    """
    text = bytes(data).decode("utf-8", "surrogatepass")
    units: list[int] = []
    for ch in text:
        cp = ord(ch)
        if cp > _MAX_UNIT:
            cp -= 0x10000
            units.append(0xD800 | (cp >> 10))
            units.append(0xDC00 | (cp & 0x3FF))
        else:
            units.append(cp)
    return units


def utf8_length_of_utf16(units: Sequence[int]) -> int:
    """The number of UTF-8 bytes that ``units`` encode to."""
    return sum(
        1 if unit < 0x80 else 2 if unit < 0x800 else 3 for unit in _check_units(units)
    )


def utf16_length_of_utf8(data: bytes | bytearray | memoryview) -> int:
    """The number of UTF-16 code units that ``data`` decodes to."""
    return len(utf8_to_utf16(data))