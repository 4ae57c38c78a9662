"""A pointer packed together with a 16-bit counter, and an atomic cell for it."""

from __future__ import annotations

import threading
from typing import Any

PTR_BITS = 48
COUNT_BITS = 16
_COUNT_MASK = (1 << COUNT_BITS) - 1


def _same_ptr(a: Any, b: Any) -> bool:
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    return a is b


class PackedPtr:
    """A reference (or integer address) paired with a counter that wraps at 2**16."""

    __slots__ = ("_ptr", "_count")

    def __init__(self, ptr: Any = None, count: int = 0) -> None:
        self._ptr = None
        self._count = 0
        self.ptr = ptr
        self.count = count

    @property
    def ptr(self) -> Any:
        return self._ptr

    @ptr.setter
    def ptr(self, value: Any) -> None:
        if isinstance(value, int) and not 0 <= value < (1 << PTR_BITS):
            raise ValueError(f"address does not fit in {PTR_BITS} bits")
        self._ptr = value

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._count = value & _COUNT_MASK

    def increment_count(self) -> None:
        """Add one to the counter, wrapping at 2**16."""
        self.count = self._count + 1

    def decrement_count(self) -> None:
        """Subtract one from the counter, wrapping below zero."""
        self.count = self._count - 1

    def copy(self) -> PackedPtr:
        return PackedPtr(self._ptr, self._count)

    __copy__ = copy

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PackedPtr):
            return NotImplemented
        return _same_ptr(self._ptr, other._ptr) and self._count == other._count

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PackedPtr({self._ptr!r}, {self._count})"


class AtomicPackedPtr:
    """A :class:`PackedPtr` cell whose operations are atomic with respect to each other."""

    def __init__(self, value: PackedPtr | None = None) -> None:
        self._lock = threading.Lock()
        self._value = PackedPtr() if value is None else value.copy()

    def load(self) -> PackedPtr:
        """A copy of the current value."""
        with self._lock:
            return self._value.copy()

    def store(self, value: PackedPtr) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value.copy()

    def exchange(self, value: PackedPtr) -> PackedPtr:
        """Replace the current value and return the previous one."""
        with self._lock:
            old = self._value
            self._value = value.copy()
            return old

    def compare_exchange(self, expected: PackedPtr, desired: PackedPtr) -> tuple[bool, PackedPtr]:
        """Store ``desired`` if the current value equals ``expected``.

        Returns whether it was stored and a copy of the value observed before.
        """
        with self._lock:
            observed = self._value.copy()
            if self._value == expected:
                self._value = desired.copy()
                return True, observed
            return False, observed