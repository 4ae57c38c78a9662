"""Message formatting, scope guards, range comparison, a callable wrapper, a linked list and concurrency primitives."""

__version__ = "0.1.0"

__all__ = [
    "message",
    "finally_",
    "compare",
    "function",
    "linked_list",
    "alignment",
    "packed_ptr",
    "aba",
    "treiber_stack",
    "spinlock_ptr",
    "reference_counter",
    "mpsc_queue",
    "hazard_pointer",
]