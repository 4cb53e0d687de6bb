"""A mutable string of UTF-16 code units."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable, Union

from zipkit.jstring import utf16_to_utf8, utf8_to_utf16

String16Like = Union["String16", str, bytes, bytearray, Iterable[int], None]


def _str_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def _to_units(value: String16Like) -> list[int]:
    if value is None:
        return []
    if isinstance(value, String16):
        return list(value._units)
    if isinstance(value, str):
        return _str_units(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return utf8_to_utf16(value)
    units = list(value)
    for unit in units:
        if not isinstance(unit, int) or not 0 <= unit <= 0xFFFF:
            raise ValueError(f"UTF-16 code unit out of range: {unit!r}")
    return units


def _to_unit(c: str | int) -> int:
    if isinstance(c, str):
        units = _str_units(c)
        if len(units) != 1:
            raise ValueError(f"expected a single UTF-16 code unit, got {c!r}")
        return units[0]
    if not 0 <= c <= 0xFFFF:
        raise ValueError(f"UTF-16 code unit out of range: {c!r}")
    return c


def _check_index(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


@total_ordering
class String16:
    """Text held as UTF-16 code units.

    It can be built from a ``str``, from UTF-8 ``bytes``, from another
    ``String16`` or from an iterable of code units. Comparison is by code
    unit, and a string sorts before any longer string it starts.
    """

    def __init__(self, value: String16Like = None) -> None:
        self._units: list[int] = _to_units(value)

    @property
    def units(self) -> tuple[int, ...]:
        """The code units."""
        return tuple(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __str__(self) -> str:
        raw = b"".join(unit.to_bytes(2, "little") for unit in self._units)
        return raw.decode("utf-16-le", "surrogatepass")

    def __repr__(self) -> str:
        return f"String16({str(self)!r})"

    def __bytes__(self) -> bytes:
        return utf16_to_utf8(self._units)

    def __getitem__(self, key: int | slice) -> int | String16:
        if isinstance(key, slice):
            return String16(self._units[key])
        return self._units[key]

    def append(self, other: String16Like) -> None:
        """Add ``other`` to the end."""
        self._units.extend(_to_units(other))

    def __iadd__(self, other: String16Like) -> String16:
        self.append(other)
        return self

    def __add__(self, other: String16Like) -> String16:
        result = String16(self)
        result.append(other)
        return result

    def insert(self, pos: int, chars: String16Like) -> None:
        """Insert ``chars`` before ``pos``; a position past the end appends."""
        pos = min(_check_index(pos, "position"), len(self._units))
        self._units[pos:pos] = _to_units(chars)

    def find_first(self, c: str | int) -> int:
        """The index of the first occurrence of ``c``, or -1."""
        unit = _to_unit(c)
        try:
            return self._units.index(unit)
        except ValueError:
            return -1

    def find_last(self, c: str | int) -> int:
        """The index of the last occurrence of ``c``, or -1."""
        unit = _to_unit(c)
        for idx in range(len(self._units) - 1, -1, -1):
            if self._units[idx] == unit:
                return idx
        return -1

    def starts_with(self, prefix: String16Like) -> bool:
        """Whether the string begins with ``prefix``."""
        units = _to_units(prefix)
        return self._units[:len(units)] == units

    def make_lower(self) -> None:
        """Lower-case the ASCII letters A to Z; other units are left alone."""
        self._units = [
            unit + 0x20 if 0x41 <= unit <= 0x5A else unit for unit in self._units
        ]

    def replace_all(self, replace_this: str | int, with_this: str | int) -> None:
        """Replace every occurrence of one code unit with another."""
        old, new = _to_unit(replace_this), _to_unit(with_this)
        self._units = [new if unit == old else unit for unit in self._units]

    def remove(self, length: int, begin: int = 0) -> None:
        """Delete ``length`` code units starting at ``begin``, stopping at the end."""
        _check_index(length, "length")
        _check_index(begin, "begin")
        del self._units[begin:begin + length]

    def compare(self, other: String16Like) -> int:
        """Negative, zero or positive as this string sorts before, with or after ``other``."""
        mine, theirs = self._units, _to_units(other)
        for left, right in zip(mine, theirs):
            if left != right:
                return left - right
        return len(mine) - len(theirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (String16, str)):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (String16, str)):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(tuple(self._units))