"""A pointer cell guarded by its own lock."""

from __future__ import annotations

import threading
from typing import Any


class SpinlockPtr:
    """Holds a reference that may only be read or replaced while locked.

    Used as a context manager, entering locks and yields the reference.
    """

    def __init__(self, ptr: Any = None) -> None:
        self._ptr = ptr
        self._lock = threading.Lock()

    def is_locked(self) -> bool:
        return self._lock.locked()

    def _require_locked(self) -> None:
        if not self._lock.locked():
            raise RuntimeError("SpinlockPtr is not locked")

    def lock(self) -> Any:
        """Acquire the lock and return the stored reference."""
        self._lock.acquire()
        return self._ptr

    def unlock(self) -> None:
        """Release the lock."""
        self._require_locked()
        self._lock.release()

    def swap_unlock(self, ptr: Any) -> Any:
        """Store ``ptr``, release the lock, and return the previous reference."""
        self._require_locked()
        old, self._ptr = self._ptr, ptr
        self._lock.release()
        return old

    def ptr(self) -> Any:
        """The stored reference; the lock must be held."""
        self._require_locked()
        return self._ptr

    def store(self, ptr: Any) -> None:
        """Replace the stored reference; the lock must be held."""
        self._require_locked()
        self._ptr = ptr

    def __enter__(self) -> Any:
        return self.lock()

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.unlock()
        return False