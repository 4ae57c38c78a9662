import threading

import pytest

from ciellab.finally_ import Finally
from ciellab.spinlock_ptr import SpinlockPtr


def test_lock_returns_pointer_and_sets_state():
    obj = [0]
    sp = SpinlockPtr(obj)
    assert not sp.is_locked()
    assert sp.lock() is obj
    assert sp.is_locked()
    sp.unlock()
    assert not sp.is_locked()


def test_unlock_requires_lock():
    sp = SpinlockPtr()
    with pytest.raises(RuntimeError):
        sp.unlock()


def test_ptr_and_store_require_lock():
    sp = SpinlockPtr()
    with pytest.raises(RuntimeError):
        sp.ptr()
    with pytest.raises(RuntimeError):
        sp.store(object())


def test_store_while_locked():
    a, b = object(), object()
    sp = SpinlockPtr(a)
    sp.lock()
    assert sp.ptr() is a
    sp.store(b)
    assert sp.ptr() is b
    sp.unlock()
    assert sp.lock() is b
    sp.unlock()


def test_swap_unlock():
    a, b = object(), object()
    sp = SpinlockPtr(a)
    sp.lock()
    assert sp.swap_unlock(b) is a
    assert not sp.is_locked()
    assert sp.lock() is b
    sp.unlock()


def test_swap_unlock_requires_lock():
    sp = SpinlockPtr()
    with pytest.raises(RuntimeError):
        sp.swap_unlock(object())


def test_context_manager():
    obj = [0]
    sp = SpinlockPtr(obj)
    with sp as p:
        assert p is obj
        assert sp.is_locked()
    assert not sp.is_locked()


def test_lock():
    threads_num, operations_num = 16, 1000
    counter = [0]
    ptr = SpinlockPtr(counter)
    go = threading.Barrier(threads_num)

    def worker():
        go.wait()
        for _ in range(operations_num):
            p = ptr.lock()
            with Finally(ptr.unlock):
                p[0] += 1

    threads = [threading.Thread(target=worker) for _ in range(threads_num)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter[0] == threads_num * operations_num
    assert not ptr.is_locked()