"""A set of 32 bits, numbered from the most significant bit (0) down to 31."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_BITS = 32


def _check_index(n: int) -> int:
    if not 0 <= n < _BITS:
        raise ValueError(f"bit index must be in 0..31, got {n}")
    return n


def _clz(v: int) -> int:
    return _BITS - v.bit_length()


def _ctz(v: int) -> int:
    return (v & -v).bit_length() - 1


@dataclass
class BitSet32:
    """A set of 32 bits that can be marked or cleared one at a time.

    Bit 0 is the most significant bit of ``value`` and bit 31 the least.
    """

    value: int = 0

    def __post_init__(self) -> None:
        self.value &= _MASK32

    @staticmethod
    def value_for_bit(n: int) -> int:
        """The mask that has only bit ``n`` set."""
        return 0x80000000 >> _check_index(n)

    def clear(self) -> None:
        """Unmark every bit."""
        self.value = 0

    def count(self) -> int:
        """The number of marked bits."""
        return self.value.bit_count()

    def is_empty(self) -> bool:
        """Whether no bit is marked."""
        return self.value == 0

    def is_full(self) -> bool:
        """Whether every bit is marked."""
        return self.value == _MASK32

    def has_bit(self, n: int) -> bool:
        """Whether bit ``n`` is marked."""
        return bool(self.value & self.value_for_bit(n))

    def mark_bit(self, n: int) -> None:
        """Mark bit ``n``."""
        self.value |= self.value_for_bit(n)

    def clear_bit(self, n: int) -> None:
        """Unmark bit ``n``."""
        self.value &= ~self.value_for_bit(n) & _MASK32

    def first_marked_bit(self) -> int:
        """The lowest-numbered marked bit."""
        if self.is_empty():
            raise ValueError("no bit is marked")
        return _clz(self.value)

    def first_unmarked_bit(self) -> int:
        """The lowest-numbered unmarked bit."""
        if self.is_full():
            raise ValueError("every bit is marked")
        return _clz(~self.value & _MASK32)

    def last_marked_bit(self) -> int:
        """The highest-numbered marked bit."""
        if self.is_empty():
            raise ValueError("no bit is marked")
        return 31 - _ctz(self.value)

    def clear_first_marked_bit(self) -> int:
        """Unmark the lowest-numbered marked bit and return its index."""
        n = self.first_marked_bit()
        self.clear_bit(n)
        return n

    def mark_first_unmarked_bit(self) -> int:
        """Mark the lowest-numbered unmarked bit and return its index."""
        n = self.first_unmarked_bit()
        self.mark_bit(n)
        return n

    def clear_last_marked_bit(self) -> int:
        """Unmark the highest-numbered marked bit and return its index."""
        n = self.last_marked_bit()
        self.clear_bit(n)
        return n

    def get_index_of_bit(self, n: int) -> int:
        """The number of marked bits numbered below ``n``."""
        below = ~(_MASK32 >> _check_index(n)) & _MASK32
        return (self.value & below).bit_count()