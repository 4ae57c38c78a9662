# ciellab

A small library of building blocks. It uses only the standard library.

| Module | What it holds |
| --- | --- |
| `ciellab.message` | `MessageBuilder`, `format_message`, `print_message` and `println_message`. These fill `{}` placeholders into a buffer of fixed size. |
| `ciellab.finally_` | `Finally` and `make_finally`. A scope guard that runs a callback once. |
| `ciellab.compare` | `range_equal`, `range_less` and the `RangeOrdering` mixin. They compare iterables element by element. |
| `ciellab.function` | `Function` and `BadFunctionCall`. A callable wrapper that may be empty. |
| `ciellab.linked_list` | `LinkedList` and `ListCursor`. A doubly linked list that reuses its nodes. |
| `ciellab.alignment` | `is_pow2`, `is_aligned`, `align_up`, `align_down`, `is_overaligned_for_new` and `MAX_ALIGN`. |
| `ciellab.packed_ptr` | `PackedPtr` and `AtomicPackedPtr`. |
| `ciellab.aba` | `Aba` and `AbaReader`. A tagged store-conditional that guards against the ABA problem. |
| `ciellab.treiber_stack` | `TreiberStack`. An intrusive stack. |
| `ciellab.spinlock_ptr` | `SpinlockPtr`. A reference that is guarded by its own lock. |
| `ciellab.reference_counter` | `ReferenceCounter`. A counter that stays at zero once it gets there. |
| `ciellab.mpsc_queue` | `MpscQueue`. An intrusive queue for many producers and one consumer. |
| `ciellab.hazard_pointer` | `HazardPointer`, `RetiredList` and `AtomicRef`. These defer destruction of shared objects. |

## Installation

```
pip install ciellab
```

## Usage

### Messages

`{}` placeholders are filled from left to right:

- Strings are inserted as they are.
- Integers are written in decimal.
- Any other object is written as a `0x...` identity address. `None` is written as all zeros.
- Floats raise `TypeError`.

The buffer keeps at most `buffer_size - 1` characters (default 512). Anything longer is cut off without an error.

```python
from ciellab.message import MessageBuilder, format_message

assert format_message("{} + {} = {}", 1, 2, 3) == "1 + 2 = 3"
assert format_message("Test integer: {}. Is this correct?", 2**63 - 1, buffer_size=25) == "Test integer: 9223372036"

mb = MessageBuilder("count: {}", 7)
mb.append("!")
assert str(mb) == "count: 7!" and len(mb) == 9
```

`print_message` writes the message to a stream, which is `sys.stdout` by default. `println_message` adds a newline that counts against the same buffer.

### Scope guards

```python
from ciellab.finally_ import make_finally

log = []
with make_finally(lambda: log.append("done")):
    log.append("work")
assert log == ["work", "done"]
```

- Call `release()` to cancel the action.
- Call `run()` to run it early.
- The action never runs more than once.

### Function

- `Function(target)` stores a callable.
- `Function()` and `Function(None)` are empty. An empty `Function` is false and compares equal to `None`. Calling it raises `BadFunctionCall`.
- Building one from another `Function`, or calling `copy()`, stores a shallow copy of the target.
- `swap` exchanges targets between two wrappers.
- `target_type()` returns the type of the stored target.
- `target(type_)` returns the stored target only if its type is exactly `type_`.

### LinkedList

```python
from ciellab.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
assert items.pop_back() == 3
assert list(items) == [0, 1, 2]

pos = items.begin().next()
items.insert(pos, 9, count=2)
assert list(items) == [0, 9, 9, 1, 2]
items.erase(items.begin(), pos)
assert list(items) == [1, 2]
assert items.spare_nodes == 4
assert items == [1, 2] and items < [1, 3]
```

Positions are `ListCursor` objects:

- Get them from `begin()` and `end()`.
- Move them with `next()` and `prev()`.
- Read and write the element through `.value`.

Other operations:

- Adding elements: `insert`, `insert_range`, `push_back` and `push_front`.
- Removing elements: `erase`, `pop_front` and `clear`.
- Changing size or contents: `resize`, `assign` and `assign_n`.
- `swap` and `copy`.

Removed nodes are kept, and later inserts use them again. Equality and ordering compare the elements in order. `front`, `back` and the `pop_*` methods raise `IndexError` on an empty list.

### Concurrency primitives

`TreiberStack` and `MpscQueue` are intrusive: every node must have a writable `next` attribute.

```python
from ciellab.treiber_stack import TreiberStack
from ciellab.mpsc_queue import MpscQueue

class Node:
    def __init__(self, value):
        self.value = value
        self.next = None

stack = TreiberStack()
a, b = Node(1), Node(2)
stack.push(a)
stack.push(b)
assert stack.pop() is b

queue = MpscQueue()
queue.push(Node(1))
queue.push(Node(2))
seen = []
queue.process(lambda n: seen.append(n.value) or True)
assert seen == [1]          # the last pushed node waits
queue.destructive_process(lambda n: seen.append(n.value))
assert seen == [1, 2]
```

`SpinlockPtr` hands out its reference while the lock is held. Use it as a context manager, or call `lock()` and `unlock()` yourself.

```python
from ciellab.spinlock_ptr import SpinlockPtr

counter = [0]
guarded = SpinlockPtr(counter)
with guarded as target:
    target[0] += 1
```

`ReferenceCounter` starts at one. The decrement that reaches zero returns `True`. After that the count stays at zero and later increments fail:

```python
from ciellab.reference_counter import ReferenceCounter

rc = ReferenceCounter()
assert rc.increment_if_not_zero()
assert not rc.decrement()
assert rc.decrement()
assert rc.load() == 0 and not rc.increment_if_not_zero()
```

`HazardPointer` lets each thread protect one object that it loaded from an `AtomicRef`:

- Retired objects must have a `destroy()` method.
- They are destroyed only when no thread protects them.
- Cleanup runs every `cleanup_threshold` retires (default 1000), or when you call `cleanup()`.

```python
from ciellab.hazard_pointer import AtomicRef, HazardPointer

class Garbage:
    destroyed = False
    def destroy(self):
        self.destroyed = True

hp = HazardPointer()
g = Garbage()
source = AtomicRef(g)
assert hp.protect(source) is g
source.store(None)
hp.retire(g)
hp.cleanup()
assert not g.destroyed
hp.release()
hp.cleanup()
assert g.destroyed
```

`PackedPtr` pairs a reference with a 16-bit counter that wraps around. An integer address must fit in 48 bits. `AtomicPackedPtr` has these atomic operations: `load`, `store`, `exchange` and `compare_exchange`.

`Aba.read()` returns an `AbaReader`. Each successful `store_conditional` increments the tag. After 2**16 stores the tag wraps around.

## What this package does not do

These primitives keep the interfaces and the ordering rules of lock-free structures. They are built on `threading.Lock`, not on hardware atomics, so they are neither lock-free nor fast. There are no memory-order options: every operation is fully synchronised.

## Running the tests

```
pip install ciellab[test]
pytest
```