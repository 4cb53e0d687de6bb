"""Little-endian field access, byte swapping and DOS timestamp decoding."""

from __future__ import annotations

from dataclasses import dataclass

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


def swap_long(v: int) -> int:
    """Reverse the byte order of a 32-bit unsigned value."""
    v &= _MASK32
    return (
        ((v << 24) & 0xFF000000)
        | ((v << 8) & 0x00FF0000)
        | ((v >> 8) & 0x0000FF00)
        | (v >> 24)
    )


def swap_short(v: int) -> int:
    """Reverse the byte order of a 16-bit unsigned value."""
    v &= _MASK16
    return ((v << 8) & 0xFF00) | (v >> 8)


def _field(buf: bytes, offset: int, size: int) -> bytes:
    if offset < 0:
        raise ValueError(f"negative offset {offset}")
    chunk = bytes(buf[offset:offset + size])
    if len(chunk) != size:
        raise ValueError(
            f"need {size} bytes at offset {offset}, buffer holds {len(buf)}"
        )
    return chunk


def get2le(buf: bytes, offset: int = 0) -> int:
    """Read an unsigned 16-bit little-endian value at ``offset``."""
    return int.from_bytes(_field(buf, offset, 2), "little")


def get4le(buf: bytes, offset: int = 0) -> int:
    """Read an unsigned 32-bit little-endian value at ``offset``."""
    return int.from_bytes(_field(buf, offset, 4), "little")


@dataclass(frozen=True)
class ZipTime:
    """Broken-down form of a packed Zip date/time value.

    ``year`` counts years since 1900 and ``month`` is the month exactly as
    stored in the archive (1 for January), mirroring the fields of a C
    ``struct tm`` filled from the packed value.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @property
    def calendar_year(self) -> int:
        """The four-digit year."""
        return self.year + 1900


def zip_time_to_parts(when: int) -> ZipTime:
    """Split a packed value (date in the high 16 bits, time in the low) into parts."""
    date = when >> 16
    return ZipTime(
        year=((date >> 9) & 0x7F) + 80,
        month=(date >> 5) & 0x0F,
        day=date & 0x1F,
        hour=(when >> 11) & 0x1F,
        minute=(when >> 5) & 0x3F,
        second=(when & 0x1F) << 1,
    )