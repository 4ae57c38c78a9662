"""Scope guards that run an action when a block is left."""

from __future__ import annotations

from typing import Any, Callable


class Finally:
    """Runs ``func`` once when the guarded block exits, unless released."""

    def __init__(self, func: Callable[[], Any]) -> None:
        if not callable(func):
            raise TypeError("Finally requires a callable")
        self._func = func
        self._valid = True

    @property
    def active(self) -> bool:
        """Whether the action is still pending."""
        return self._valid

    def release(self) -> None:
        """Cancel the pending action."""
        self._valid = False

    def run(self) -> None:
        """Run the action now if it is still pending; it never runs twice."""
        if self._valid:
            self._valid = False
            self._func()

    def __enter__(self) -> Finally:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.run()
        return False


def make_finally(func: Callable[[], Any]) -> Finally:
    """Create a :class:`Finally` guard for ``func``."""
    return Finally(func)