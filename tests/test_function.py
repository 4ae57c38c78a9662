import functools

import pytest

from ciellab.function import BadFunctionCall, Function


class Relocatable:
    def __init__(self):
        self.v = [42]

    def __call__(self):
        return len(self.v), self.v[0]


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


class T1:
    def __call__(self):
        return 1


class T2:
    def __call__(self):
        return 0


class T3:
    def __call__(self):
        return 0

    def __and__(self, other):
        return 1


def test_copy_stack():
    f1 = Function(Relocatable())
    assert f1() == (1, 42)
    f2 = Function(f1)
    assert f1() == (1, 42)
    assert f2() == (1, 42)


def test_copy_holds_separate_target():
    f1 = Function(Counter())
    assert f1() == 1
    f2 = f1.copy()
    assert f1.target(Counter) is not f2.target(Counter)
    assert f2() == 2
    assert f1() == 2


def test_move_via_swap():
    f1 = Function(Relocatable())
    assert f1() == (1, 42)
    f2 = Function()
    f2.swap(f1)
    assert not f1
    assert f2() == (1, 42)


def test_swap_exchanges_targets():
    f1 = Function(lambda: "a")
    f2 = Function(lambda: "b")
    f1.swap(f2)
    assert (f1(), f2()) == ("b", "a")


def test_overload_resolution_reference():
    t1 = T1()
    f1 = Function(functools.partial(t1))
    assert f1() == 1


def test_overload_resolution_2():
    t = T2()
    assert Function(t)() == 0
    assert Function(T2())() == 0


def test_overload_resolution_3():
    assert Function(T3())() == 0


def test_empty_call_raises():
    f = Function()
    with pytest.raises(BadFunctionCall):
        f()


def test_compare_with_none():
    assert Function() == None  # noqa: E711
    assert (Function(len) == None) is False  # noqa: E711


def test_construct_from_empty_function_is_empty():
    f = Function(Function())
    assert f.__bool__() is False
    assert f == None  # noqa: E711
    with pytest.raises(BadFunctionCall):
        f()


def test_arguments_are_forwarded():
    f = Function(lambda a, b=0: a * 10 + b)
    assert f(3, b=4) == 34


def test_assign_and_clear():
    f = Function(len)
    assert f("abc") == 3
    f.assign(str.upper)
    assert f("abc") == "ABC"
    f.assign(None)
    assert bool(f) is False
    with pytest.raises(BadFunctionCall):
        f("abc")


def test_self_assign_keeps_target():
    f = Function(len)
    f.assign(f)
    assert f([1, 2]) == 2


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        Function(5)


def test_target_type_and_target():
    t = T2()
    f = Function(t)
    assert f.target_type() is T2
    assert f.target(T2) is t
    assert f.target(T1) is None
    assert Function().target_type() is type(None)
    assert Function().target(T2) is None


def test_bad_function_call_message():
    assert str(BadFunctionCall()) == "bad_function_call"