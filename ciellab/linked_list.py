"""A doubly linked list with cursors that keeps spare nodes for reuse."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from ciellab.compare import RangeOrdering


class _Node:
    __slots__ = ("prev", "next", "value")

    def __init__(self) -> None:
        self.prev: _Node = self
        self.next: _Node = self
        self.value: Any = None


class _Sentinel(_Node):
    """The end node of a list; it holds no value."""

    __slots__ = ()


class ListCursor:
    """A position in a :class:`LinkedList`, valid while its node is in place."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    @property
    def at_end(self) -> bool:
        """Whether this cursor is the end position of its list."""
        return isinstance(self._node, _Sentinel)

    @property
    def value(self) -> Any:
        """The element at this position."""
        if self.at_end:
            raise IndexError("cursor is at the end of the list")
        return self._node.value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self.at_end:
            raise IndexError("cursor is at the end of the list")
        self._node.value = new_value

    def next(self) -> ListCursor:
        """The cursor one step forward."""
        return ListCursor(self._node.next)

    def prev(self) -> ListCursor:
        """The cursor one step back."""
        return ListCursor(self._node.prev)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self.at_end:
            return "ListCursor(<end>)"
        return f"ListCursor({self._node.value!r})"


def _check_cursor(pos: Any) -> _Node:
    if not isinstance(pos, ListCursor):
        raise TypeError("expected a ListCursor")
    return pos._node


class LinkedList(RangeOrdering):
    """A doubly linked list.

    Removed nodes are kept and reused by later insertions instead of being
    thrown away. Equality and ordering compare the elements in order.
    """

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._end = _Sentinel()
        self._spare: list[_Node] = []
        self._size = 0
        self._construct(self._end, iterable)

    # internal node management

    def _acquire(self, value: Any) -> _Node:
        node = self._spare.pop() if self._spare else _Node()
        node.value = value
        return node

    def _construct(self, pos: _Node, values: Iterable[Any]) -> ListCursor:
        """Insert ``values`` before ``pos``; on failure undo what was inserted."""
        before = pos.prev
        last = before
        try:
            for value in values:
                node = self._acquire(value)
                node.prev = last
                node.next = pos
                last.next = node
                pos.prev = node
                last = node
                self._size += 1
        except BaseException:
            self._destroy(before.next, pos)
            raise
        return ListCursor(before.next)

    def _destroy(self, first: _Node, last: _Node) -> ListCursor:
        """Unlink the nodes in ``[first, last)`` and keep them as spares."""
        before = first.prev
        node = first
        while node is not last:
            if isinstance(node, _Sentinel):
                raise ValueError("range runs past the end of the list")
            following = node.next
            node.value = None
            node.prev = node.next = node
            self._spare.append(node)
            self._size -= 1
            node = following
        before.next = last
        last.prev = before
        return ListCursor(last)

    # size and iteration

    @property
    def spare_nodes(self) -> int:
        """Number of nodes kept for reuse."""
        return len(self._spare)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._end.next
        while node is not self._end:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._end.prev
        while node is not self._end:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def begin(self) -> ListCursor:
        """Cursor at the first element, or the end cursor when empty."""
        return ListCursor(self._end.next)

    def end(self) -> ListCursor:
        """Cursor one past the last element."""
        return ListCursor(self._end)

    def front(self) -> Any:
        """The first element."""
        if not self._size:
            raise IndexError("front of an empty list")
        return self._end.next.value

    def back(self) -> Any:
        """The last element."""
        if not self._size:
            raise IndexError("back of an empty list")
        return self._end.prev.value

    # modifiers

    def insert(self, pos: ListCursor, value: Any, count: int = 1) -> ListCursor:
        """Insert ``count`` copies of ``value`` before ``pos``.

        Returns a cursor at the first inserted element, or ``pos`` when
        nothing was inserted.
        """
        node = _check_cursor(pos)
        if count < 0:
            raise ValueError("count must not be negative")
        return self._construct(node, (value for _ in range(count)))

    def insert_range(self, pos: ListCursor, iterable: Iterable[Any]) -> ListCursor:
        """Insert the items of ``iterable`` before ``pos``, in order."""
        return self._construct(_check_cursor(pos), iterable)

    def erase(self, first: ListCursor, last: ListCursor | None = None) -> ListCursor:
        """Remove ``first`` alone, or the range ``[first, last)``.

        Returns the cursor that follows the removed elements.
        """
        start = _check_cursor(first)
        if last is None:
            if isinstance(start, _Sentinel):
                raise IndexError("cannot erase the end position")
            stop = start.next
        else:
            stop = _check_cursor(last)
        return self._destroy(start, stop)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self._construct(self._end, (value,))

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._construct(self._end.next, (value,))

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop from an empty list")
        node = self._end.prev
        value = node.value
        self._destroy(node, self._end)
        return value

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("pop from an empty list")
        node = self._end.next
        value = node.value
        self._destroy(node, node.next)
        return value

    def clear(self) -> None:
        """Remove every element, keeping the nodes for reuse."""
        self._destroy(self._end.next, self._end)

    def resize(self, count: int, value: Any = None) -> None:
        """Shrink to ``count`` elements, or grow by appending ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        if self._size >= count:
            node: _Node = self._end
            for _ in range(self._size - count):
                node = node.prev
            self._destroy(node, self._end)
        else:
            self._construct(self._end, (value for _ in range(count - self._size)))

    def assign(self, iterable: Iterable[Any]) -> None:
        """Replace the contents with the items of ``iterable``."""
        items = iter(iterable)
        node = self._end.next
        while node is not self._end:
            try:
                node.value = next(items)
            except StopIteration:
                self._destroy(node, self._end)
                return
            node = node.next
        self._construct(self._end, items)

    def assign_n(self, count: int, value: Any) -> None:
        """Replace the contents with ``count`` copies of ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        self.assign(value for _ in range(count))

    def swap(self, other: LinkedList) -> None:
        """Exchange contents with ``other``; each list keeps its own end cursor."""
        if other is self:
            return
        mine, theirs = self._end, other._end
        mine.prev, theirs.prev = theirs.prev, mine.prev
        mine.next, theirs.next = theirs.next, mine.next
        for sentinel in (mine, theirs):
            sentinel.next.prev = sentinel
            sentinel.prev.next = sentinel
        self._spare, other._spare = other._spare, self._spare
        self._size, other._size = other._size, self._size

    def copy(self) -> LinkedList:
        """Return a new list with the same elements."""
        return LinkedList(self)

    __copy__ = copy