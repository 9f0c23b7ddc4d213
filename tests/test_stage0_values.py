import copy
import pickle

import pytest
from maybe_functors.core.errors import ValueAccessError
from maybe_functors.core.maybe import ABSENT, Absent, Maybe, Present


def test_present_value():
    assert Present(5).value == 5
    assert Present(5).is_present()
    assert not Present(5).is_absent()


def test_absent_value_access_fails():
    with pytest.raises(ValueAccessError, match="Absent cannot contain a value"):
        Absent().value


def test_value_access_error_is_type_error():
    with pytest.raises(TypeError):
        ABSENT.value


def test_present_equality():
    assert Present(1) == Present(1)
    assert Present(1) != Present(2)
    assert Present([1, 2]) == Present([1, 2])
    assert Present(1) != Absent()
    assert Absent() != Present(1)


def test_absent_is_shared():
    assert Absent() is Absent()
    assert Absent() is ABSENT
    assert Absent() == Absent()
    assert hash(Absent()) == hash(ABSENT)
    assert copy.copy(ABSENT) is ABSENT
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


def test_present_is_immutable():
    p = Present(3)
    with pytest.raises(AttributeError):
        p.value = 4
    assert p.value == 3


def test_maybe_is_abstract():
    with pytest.raises(TypeError):
        Maybe()


def test_pure_wraps_as_present():
    assert Maybe.pure(1) == Present(1)
    assert Present.pure("x") == Present("x")
    assert Absent.pure(None) == Present(None)


def test_truthiness_and_repr():
    assert not Absent()
    assert Present(0)
    assert repr(Present("a")) == "Present('a')"
    assert repr(Absent()) == "Absent()"


def test_hashable_containers():
    assert {Present(1), Present(1), Absent(), Absent()} == {Present(1), ABSENT}


class Quiet(Absent):
    pass


def test_absent_subclass_keeps_own_instance():
    assert type(Quiet()) is Quiet
    assert Quiet() is Quiet()
    assert Quiet() is not ABSENT
    assert type(Absent()) is Absent
    assert Quiet() == ABSENT
    assert pickle.loads(pickle.dumps(Quiet())) is Quiet()
