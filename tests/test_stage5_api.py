import pytest
from maybe_functors import (
    ABSENT,
    Absent,
    Present,
    apply,
    bind,
    compose,
    curry,
    fmap,
    identity,
    is_absent,
    is_present,
    join,
    lift2,
    pure,
)


def test_free_functions():
    assert pure(1) == Present(1)
    assert fmap(Present(2), lambda x: x * 5) == Present(10)
    assert apply(pure(lambda x: x - 1), Present(2)) == Present(1)
    assert bind(Present(2), lambda x: Absent()) == Absent()


def test_curried_order_independence():
    curried = pure(lambda x: lambda y: x + y)
    assert apply(apply(curried, Present(1)), Present(2)) == Present(3)
    assert apply(apply(curried, Present(2)), Present(1)) == Present(3)
    assert apply(apply(curried, Present(1)), Absent()) == Absent()
    assert apply(apply(curried, Absent()), Present(1)) == Absent()


def test_join():
    assert join(Present(Present(4))) == Present(4)
    assert join(Present(Absent())) == Absent()
    assert join(Absent()) == Absent()


def test_lift2():
    assert lift2(lambda a, b: a + b, Present(1), Present(2)) == Present(3)
    assert lift2(lambda a, b: a + b, Absent(), Present(2)) == Absent()
    assert lift2(lambda a, b: a + b, Present(1), Absent()) == Absent()


def test_predicates():
    assert is_present(Present(None))
    assert is_absent(ABSENT)
    assert not is_present(5)
    assert not is_absent(None)


def test_compose():
    f = lambda x: x + 1
    g = lambda x: x * 10
    assert compose(f, g)(2) == 21
    assert compose()(7) == 7
    assert compose(f)(1) == 2


def test_identity():
    marker = object()
    assert identity(marker) is marker


def test_curry():
    add3 = curry(lambda a, b, c: a + b + c)
    assert add3(1)(2)(3) == 6
    assert curry(lambda a, b=5: a + b)(1) == 6
    assert curry(lambda a, b=5: a + b, 2)(1)(1) == 2


def test_curry_rejects_zero_arity():
    with pytest.raises(ValueError, match="arity of at least 1"):
        curry(lambda: 0)
