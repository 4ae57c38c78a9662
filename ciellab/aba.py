"""Load-linked / store-conditional on a pointer, guarded against the ABA problem.

Each successful store bumps a 16-bit tag, so a stale reader fails even when the
pointer has returned to the value it read. After 2**16 intervening stores the
tag wraps and the protection is lost.
"""

from __future__ import annotations

from typing import Any

from ciellab.packed_ptr import AtomicPackedPtr, PackedPtr


class AbaReader:
    """A snapshot of an :class:`Aba` cell that may be conditionally replaced."""

    __slots__ = ("_old", "_parent")

    def __init__(self, old: PackedPtr, parent: Aba) -> None:
        self._old = old
        self._parent = parent

    @property
    def ptr(self) -> Any:
        """The pointer seen by the latest read or failed store."""
        return self._old.ptr

    def store_conditional(self, ptr: Any) -> bool:
        """Store ``ptr`` if nothing was stored since this snapshot.

        On failure the snapshot is refreshed to the current value.
        """
        desired = PackedPtr(ptr, self._old.count + 1)
        ok, observed = self._parent._cell.compare_exchange(self._old, desired)
        self._old = desired if ok else observed
        return ok


class Aba:
    """A pointer cell read through :class:`AbaReader` snapshots."""

    def __init__(self) -> None:
        self._cell = AtomicPackedPtr(PackedPtr(None, 0))

    def read(self) -> AbaReader:
        """Take a snapshot of the current pointer."""
        return AbaReader(self._cell.load(), self)