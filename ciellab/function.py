"""A nullable, copyable wrapper around a callable target."""

from __future__ import annotations

import copy
from typing import Any, Callable


class BadFunctionCall(Exception):
    """Raised when an empty :class:`Function` is called."""

    def __init__(self, message: str = "bad_function_call") -> None:
        super().__init__(message)


def _clone_target(target: Callable[..., Any] | None) -> Callable[..., Any] | None:
    return None if target is None else copy.copy(target)


class Function:
    """Holds a copy of a callable, or nothing.

    Constructing from another :class:`Function` copies its target; copying
    gives the new wrapper its own copy of the callable object.
    """

    def __init__(self, target: Any = None) -> None:
        self._target: Callable[..., Any] | None = None
        self.assign(target)

    def assign(self, target: Any) -> None:
        """Replace the stored target; ``None`` or an empty Function clears it."""
        if target is self:
            return
        if isinstance(target, Function):
            self._target = _clone_target(target._target)
            return
        if target is not None and not callable(target):
            raise TypeError(f"{type(target).__name__!r} object is not callable")
        self._target = target

    def swap(self, other: Function) -> None:
        """Exchange targets with ``other``."""
        self._target, other._target = other._target, self._target

    def copy(self) -> Function:
        """Return a new Function holding a copy of this target."""
        return Function(self)

    __copy__ = copy

    def __bool__(self) -> bool:
        return self._target is not None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._target is None:
            raise BadFunctionCall()
        return self._target(*args, **kwargs)

    def __eq__(self, other: Any) -> bool:
        if other is None:
            return self._target is None
        return NotImplemented

    __hash__ = object.__hash__

    def target_type(self) -> type:
        """Type of the stored target, or ``type(None)`` when empty."""
        return type(self._target)

    def target(self, type_: type) -> Any:
        """The stored target if its type is exactly ``type_``, else ``None``."""
        if self._target is not None and type(self._target) is type_:
            return self._target
        return None

    def __repr__(self) -> str:
        return f"Function({self._target!r})"