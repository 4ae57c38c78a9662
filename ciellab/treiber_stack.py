"""A lock-free style intrusive stack of nodes linked through their ``next`` attribute."""

from __future__ import annotations

from typing import Any

from ciellab.aba import Aba


class TreiberStack:
    """An intrusive LIFO stack; each node must have a writable ``next`` attribute."""

    def __init__(self) -> None:
        self._stack = Aba()

    def push(self, first: Any, last: Any = None) -> None:
        """Push the chain ``first .. last`` (already linked by ``next``) on top.

        With ``last`` omitted, pushes the single node ``first``.
        """
        if last is None:
            last = first
        reader = self._stack.read()
        while True:
            last.next = reader.ptr
            if reader.store_conditional(first):
                return

    def pop(self) -> Any:
        """Remove and return the top node, or ``None`` when empty."""
        reader = self._stack.read()
        while True:
            top = reader.ptr
            if top is None:
                return None
            if reader.store_conditional(top.next):
                return top

    def pop_all(self) -> Any:
        """Detach the whole chain and return its head, or ``None`` when empty."""
        reader = self._stack.read()
        while True:
            top = reader.ptr
            if top is None:
                return None
            if reader.store_conditional(None):
                return top