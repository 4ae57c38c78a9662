from contextlib import ExitStack

import pytest

from ciellab.finally_ import Finally, make_finally


def test_defer():
    called = []
    with make_finally(lambda: called.append(True)):
        assert called == []
    assert called == [True]


def test_defer_order():
    state = {"counter": 0}
    result = {}

    def record(name):
        def action():
            state["counter"] += 1
            result[name] = state["counter"]

        return action

    with ExitStack() as stack:
        guards = [stack.enter_context(make_finally(record(name))) for name in ("a", "b", "c")]
        assert [guard.active for guard in guards] == [True, True, True]
        assert result == {}

    assert result == {"a": 3, "b": 2, "c": 1}


def test_defer_order_2():
    state = {"counter": 0}
    result = {}

    def action():
        for name in ("a", "b", "c"):
            state["counter"] += 1
            result[name] = state["counter"]

    with make_finally(action) as guard:
        assert guard.active is True
        assert result == {}

    assert result == {"a": 1, "b": 2, "c": 3}


def test_release_cancels_action():
    called = []
    with make_finally(lambda: called.append(1)) as guard:
        guard.release()
    assert called == []
    assert guard.active is False


def test_runs_once():
    called = []
    guard = Finally(lambda: called.append(1))
    guard.run()
    guard.run()
    with guard:
        pass
    assert called == [1]


def test_runs_on_exception_without_swallowing():
    called = []
    with pytest.raises(RuntimeError):
        with make_finally(lambda: called.append(1)):
            raise RuntimeError("boom")
    assert called == [1]


def test_requires_callable():
    with pytest.raises(TypeError):
        Finally(42)