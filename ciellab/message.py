"""Bounded message formatting with ``{}`` placeholders."""

from __future__ import annotations

import sys
from typing import Any, TextIO

DEFAULT_BUFFER_SIZE = 512
_ADDRESS_MASK = (1 << 64) - 1


def _address(value: Any) -> str:
    """Render an object's identity the way a pointer is rendered."""
    raw = 0 if value is None else id(value)
    return "0x" + format(raw & _ADDRESS_MASK, "016x")


class MessageBuilder:
    """Builds a message into a fixed-size buffer, silently truncating overflow.

    One slot of ``buffer_size`` is reserved for the terminator, so at most
    ``buffer_size - 1`` characters are kept.
    """

    def __init__(self, msg: str, *args: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._capacity = buffer_size - 1
        self._text = ""
        self.append_format(msg, *args)

    def _append_text(self, text: str) -> None:
        room = self._capacity - len(self._text)
        if room > 0:
            self._text += text[:room]

    def append(self, value: Any) -> None:
        """Append a string, an integer in decimal, or an object's address."""
        if isinstance(value, str):
            self._append_text(value)
        elif isinstance(value, int):
            self._append_text(str(int(value)))
        elif isinstance(value, (float, complex)):
            raise TypeError(f"cannot append value of type {type(value).__name__}")
        else:
            self._append_text(_address(value))

    def append_format(self, msg: str, *args: Any) -> None:
        """Append ``msg``, substituting each ``{}`` with the next argument."""
        rest = msg
        for arg in args:
            head, _, rest = rest.partition("{}")
            self._append_text(head)
            self.append(arg)
        self._append_text(rest)

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)


def format_message(msg: str, *args: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> str:
    """Return the formatted message, truncated to ``buffer_size - 1`` characters."""
    return str(MessageBuilder(msg, *args, buffer_size=buffer_size))


def print_message(
    msg: str, *args: Any, file: TextIO | None = None, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> None:
    """Write the formatted message to ``file`` (standard output by default)."""
    stream = sys.stdout if file is None else file
    stream.write(str(MessageBuilder(msg, *args, buffer_size=buffer_size)))


def println_message(
    msg: str, *args: Any, file: TextIO | None = None, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> None:
    """Write the formatted message followed by a newline, within the same buffer."""
    stream = sys.stdout if file is None else file
    builder = MessageBuilder(msg, *args, buffer_size=buffer_size)
    builder.append("\n")
    stream.write(str(builder))