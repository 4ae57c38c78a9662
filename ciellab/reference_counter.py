"""A reference count that sticks at zero once it has dropped there."""

from __future__ import annotations

import threading

SIZE_BITS = 64
ZERO_FLAG = 1 << (SIZE_BITS - 1)


class ReferenceCounter:
    """Thread-safe counter for shared ownership.

    Once a decrement brings the count to zero it is marked as zero for good:
    later increments fail and :meth:`load` keeps reporting zero. A counter
    constructed at zero reads as one until it is first decremented.
    """

    def __init__(self, initial: int = 1) -> None:
        if initial < 0:
            raise ValueError("initial count must not be negative")
        self._impl = initial
        self._lock = threading.Lock()

    def load(self) -> int:
        """The current count; zero only once the counter is stuck at zero."""
        with self._lock:
            res = self._impl
        if res & ZERO_FLAG:
            return 0
        return res if res != 0 else 1

    def increment_if_not_zero(self, diff: int = 1) -> bool:
        """Add ``diff``; returns ``False`` if the counter was already stuck at zero."""
        with self._lock:
            res = self._impl
            self._impl += diff
        return (res & ZERO_FLAG) == 0

    def decrement(self, diff: int = 1) -> bool:
        """Subtract ``diff``; returns ``True`` only for the call that reaches zero."""
        with self._lock:
            res = self._impl
            if res < diff:
                raise ValueError("decrement below zero")
            self._impl -= diff
            if res == diff and self._impl == 0:
                self._impl = ZERO_FLAG
                return True
            return False

    def __int__(self) -> int:
        return self.load()

    def __repr__(self) -> str:
        return f"ReferenceCounter({self.load()})"