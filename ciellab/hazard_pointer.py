"""Hazard pointers: deferred destruction of objects other threads may still read."""

from __future__ import annotations

import os
import threading
from typing import Any, Callable

DEFAULT_CLEANUP_THRESHOLD = 1000


class AtomicRef:
    """A reference cell whose operations are atomic with respect to each other."""

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> Any:
        with self._lock:
            return self._value

    def store(self, value: Any) -> None:
        with self._lock:
            self._value = value

    def exchange(self, value: Any) -> Any:
        """Replace the value and return the previous one."""
        with self._lock:
            old = self._value
            self._value = value
            return old


class RetiredList:
    """Garbage waiting to be destroyed; each item must have a ``destroy()`` method.

    Owned by a single thread at a time, so it needs no synchronisation.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, garbage: Any) -> None:
        """Add ``garbage`` to the list."""
        if garbage is None:
            raise ValueError("cannot retire None")
        if not callable(getattr(garbage, "destroy", None)):
            raise TypeError("garbage must have a destroy() method")
        self._items.append(garbage)

    def cleanup(self, is_protected: Callable[[Any], bool]) -> None:
        """Destroy every item for which ``is_protected`` is false, newest first."""
        kept = []
        for garbage in reversed(self._items):
            if is_protected(garbage):
                kept.append(garbage)
            else:
                garbage.destroy()
        kept.reverse()
        self._items = kept

    def __len__(self) -> int:
        return len(self._items)


class _HazardSlot:
    """Per-thread state; only ``in_use`` and ``protected`` are read by others."""

    __slots__ = ("in_use", "protected", "num_retires_since_cleanup", "retired")

    def __init__(self, in_use: bool) -> None:
        self.in_use = in_use
        self.protected: Any = None
        self.num_retires_since_cleanup = 0
        self.retired = RetiredList()


class _SlotOwner:
    """Holds a thread's slot and gives it back when the thread goes away."""

    __slots__ = ("slot",)

    def __init__(self, slot: _HazardSlot) -> None:
        self.slot = slot

    def __del__(self) -> None:
        self.slot.protected = None
        self.slot.in_use = False


class HazardPointer:
    """Lets each thread protect one object and retire objects safely.

    A retired object is destroyed only once no thread protects it. Cleanup
    runs automatically every ``cleanup_threshold`` retires on a thread.
    """

    def __init__(self, cleanup_threshold: int = DEFAULT_CLEANUP_THRESHOLD) -> None:
        if cleanup_threshold < 1:
            raise ValueError("cleanup_threshold must be at least 1")
        self._cleanup_threshold = cleanup_threshold
        self._slots = [_HazardSlot(False) for _ in range(max(1, os.cpu_count() or 1))]
        self._slots_lock = threading.Lock()
        self._local = threading.local()

    def _acquire_slot(self) -> _HazardSlot:
        with self._slots_lock:
            for slot in self._slots:
                if not slot.in_use:
                    slot.in_use = True
                    return slot
            slot = _HazardSlot(True)
            self._slots.append(slot)
            return slot

    def _my_slot(self) -> _HazardSlot:
        owner = getattr(self._local, "owner", None)
        if owner is None:
            owner = _SlotOwner(self._acquire_slot())
            self._local.owner = owner
        return owner.slot

    def protect(self, source: AtomicRef) -> Any:
        """Load from ``source`` and protect the loaded object; returns it."""
        slot = self._my_slot()
        res = source.load()
        while True:
            if res is None:
                return None
            slot.protected = res
            cur = source.load()
            if res is cur:
                return res
            res = cur

    def release(self) -> None:
        """Stop protecting anything on this thread."""
        self._my_slot().protected = None

    def retire(self, garbage: Any) -> None:
        """Hand ``garbage`` over for destruction once it is unprotected."""
        if garbage is None:
            return
        slot = self._my_slot()
        slot.retired.push(garbage)
        slot.num_retires_since_cleanup += 1
        if slot.num_retires_since_cleanup >= self._cleanup_threshold:
            self._cleanup(slot)

    def cleanup(self) -> None:
        """Destroy this thread's retired objects that no thread protects."""
        self._cleanup(self._my_slot())

    def _cleanup(self, slot: _HazardSlot) -> None:
        slot.num_retires_since_cleanup = 0
        with self._slots_lock:
            slots = list(self._slots)
        protected_ids = {id(p) for p in (s.protected for s in slots) if p is not None}
        slot.retired.cleanup(lambda g: id(g) in protected_ids)