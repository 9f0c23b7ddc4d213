import pytest
from maybe_functors.core.maybe import Absent, Maybe, Present


def step(x):
    return Present(x - 1) if x > 0 else Absent()


def explode(x):
    raise AssertionError(f"function should not be called, got {x!r}")


def test_bind_applies():
    assert Present(2).bind(step) == Present(1)


def test_bind_chains():
    assert Present(3).bind(step).bind(step) == Present(1)


def test_bind_propagates_absent():
    assert Present(1).bind(step).bind(step).bind(step) == Absent()


def test_bind_absent_never_calls():
    assert Absent().bind(explode) == Absent()
    assert Present(0).bind(step).bind(explode).bind(explode) == Absent()


def test_bind_does_not_rewrap():
    assert Present(1).bind(lambda x: Present(Present(x))) == Present(Present(1))


@pytest.mark.parametrize("x", [0, 1, 5])
def test_left_identity(x):
    assert Maybe.pure(x).bind(step) == step(x)


@pytest.mark.parametrize("m", [Present(4), Present(0), Absent()])
def test_right_identity(m):
    assert m.bind(Maybe.pure) == m


@pytest.mark.parametrize("m", [Present(4), Present(1), Present(0), Absent()])
def test_associativity(m):
    double = lambda x: Present(x * 2)
    assert m.bind(step).bind(double) == m.bind(lambda x: step(x).bind(double))


def test_long_chain_short_circuits():
    calls = []

    def counted(x):
        calls.append(x)
        return step(x)

    m = Present(3)
    for _ in range(20):
        m = m.bind(counted)
    assert m == Absent()
    assert calls == [3, 2, 1, 0]
