"""Element-wise comparison of sized iterable ranges."""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any

_END = object()


def _is_range(value: Any) -> bool:
    return isinstance(value, Iterable)


def _is_sized_range(value: Any) -> bool:
    return isinstance(value, Iterable) and isinstance(value, Sized)


def range_equal(lhs: Any, rhs: Any) -> bool:
    """True when both ranges have the same length and equal elements in order."""
    if len(lhs) != len(rhs):
        return False
    return all(a == b for a, b in zip(lhs, rhs))


def range_less(lhs: Any, rhs: Any) -> bool:
    """Lexicographical ``lhs < rhs`` using only the elements' ``<``."""
    right = iter(rhs)
    for a in lhs:
        b = next(right, _END)
        if b is _END:
            return False
        if a < b:
            return True
        if b < a:
            return False
    return next(right, _END) is not _END


class RangeOrdering:
    """Mixin giving a sized iterable range-wise equality and ordering."""

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: Any) -> bool:
        if not _is_sized_range(other):
            return NotImplemented
        return range_equal(self, other)

    def __ne__(self, other: Any) -> bool:
        if not _is_sized_range(other):
            return NotImplemented
        return not range_equal(self, other)

    def __lt__(self, other: Any) -> bool:
        if not _is_range(other):
            return NotImplemented
        return range_less(self, other)

    def __le__(self, other: Any) -> bool:
        if not _is_range(other):
            return NotImplemented
        return not range_less(other, self)

    def __gt__(self, other: Any) -> bool:
        if not _is_range(other):
            return NotImplemented
        return range_less(other, self)

    def __ge__(self, other: Any) -> bool:
        if not _is_range(other):
            return NotImplemented
        return not range_less(self, other)