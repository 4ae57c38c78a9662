"""A multi-producer, single-consumer intrusive queue.

Nodes are linked through their own ``next`` attribute. Any number of threads
may push; only one thread at a time may process.
"""

from __future__ import annotations

import threading
from typing import Any, Callable


class _Stub:
    """Placeholder front node used while the queue has never held anything."""

    __slots__ = ("next",)

    def __init__(self) -> None:
        self.next: Any = None


class MpscQueue:
    """Intrusive queue; each node must have a writable ``next`` attribute.

    The most recently pushed node stays in the queue after :meth:`process`,
    because a producer may still be linking past it. It is handed out by a
    later :meth:`process` once more nodes follow it, or by
    :meth:`destructive_process`.
    """

    def __init__(self) -> None:
        self._stub = _Stub()
        self._front: Any = self._stub
        self._back: Any = None
        self._back_lock = threading.Lock()

    def push(self, first: Any, last: Any = None) -> None:
        """Append the chain ``first .. last`` (already linked by ``next``).

        With ``last`` omitted, appends the single node ``first``.
        """
        if first is None:
            raise ValueError("cannot push None")
        if last is None:
            last = first
        last.next = None
        with self._back_lock:
            prev = self._back
            self._back = last
        if prev is not None:
            prev.next = first
            return
        self._front = first

    def process(self, callback: Callable[[Any], bool]) -> None:
        """Hand each ready node to ``callback`` in order.

        The callback returns ``False`` to stop early; the node it was given
        counts as processed either way.
        """
        cur = self._front
        back = self._back
        if cur is self._stub:
            return
        while cur is not back:
            nxt = cur.next
            if nxt is None:
                # A push is halfway done: back moved but the link is not set yet.
                break
            if not callback(cur):
                self._front = nxt
                return
            cur = nxt
        self._front = cur

    def destructive_process(self, callback: Callable[[Any], Any]) -> None:
        """Hand every remaining node to ``callback``; no producer may be active."""
        cur = self._front
        if cur is self._stub:
            return
        while cur is not None:
            nxt = cur.next
            callback(cur)
            cur = nxt