"""Power-of-two alignment helpers for integer addresses and sizes."""

from __future__ import annotations

MAX_ALIGN = 16
"""Alignment guaranteed by the default allocator."""


def is_pow2(x: int) -> bool:
    """Whether ``x`` is a power of two; ``x`` must not be zero."""
    if x == 0:
        raise ValueError("is_pow2 is undefined for zero")
    return (x & (x - 1)) == 0


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or not is_pow2(alignment):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")


def is_aligned(address: int, alignment: int) -> bool:
    """Whether the non-null ``address`` is a multiple of ``alignment``."""
    if address == 0:
        raise ValueError("address must not be null")
    _check_alignment(alignment)
    return address % alignment == 0


def align_up(size: int, alignment: int) -> int:
    """Round ``size`` up to the next multiple of ``alignment``."""
    _check_alignment(alignment)
    mask = alignment - 1
    return (size + mask) & ~mask


def align_down(size: int, alignment: int) -> int:
    """Round ``size`` down to a multiple of ``alignment``."""
    _check_alignment(alignment)
    mask = alignment - 1
    return size & ~mask


def is_overaligned_for_new(alignment: int) -> bool:
    """Whether ``alignment`` exceeds what the default allocator guarantees."""
    return alignment > MAX_ALIGN