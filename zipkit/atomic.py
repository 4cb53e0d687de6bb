"""A 32-bit signed integer with thread-safe read-modify-write operations."""

from __future__ import annotations

import threading

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def _wrap(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT32_MAX else value


class AtomicInt32:
    """A shared 32-bit counter; arithmetic wraps around like two's complement.

    The arithmetic and bitwise operations return the previous value.
    """

    def __init__(self, value: int = 0) -> None:
        self._value = _wrap(value)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"AtomicInt32({self.load()})"

    def _update(self, func) -> int:
        with self._lock:
            old = self._value
            self._value = _wrap(func(old))
            return old

    def inc(self) -> int:
        """Add one; return the previous value."""
        return self._update(lambda v: v + 1)

    def dec(self) -> int:
        """Subtract one; return the previous value."""
        return self._update(lambda v: v - 1)

    def add(self, value: int) -> int:
        """Add ``value``; return the previous value."""
        return self._update(lambda v: v + value)

    def bitwise_and(self, value: int) -> int:
        """And with ``value``; return the previous value."""
        return self._update(lambda v: v & value)

    def bitwise_or(self, value: int) -> int:
        """Or with ``value``; return the previous value."""
        return self._update(lambda v: v | value)

    def load(self) -> int:
        """The current value."""
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        """Replace the value."""
        with self._lock:
            self._value = _wrap(value)

    def compare_and_set(self, old_value: int, new_value: int) -> bool:
        """Store ``new_value`` if the value equals ``old_value``; report whether it did."""
        with self._lock:
            if self._value != _wrap(old_value):
                return False
            self._value = _wrap(new_value)
            return True