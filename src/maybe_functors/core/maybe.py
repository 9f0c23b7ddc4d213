from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from .capabilities import Monad
from .contracts import overrides
from .errors import ValueAccessError

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Monad[T]):
    """
    A container holding zero or one value.

    Behaves like a list of at most one element: `Present(x)` holds `x`,
    `Absent()` holds nothing. Present relies on the shared capability
    defaults for `map` and `bind`; Absent overrides all three operations to
    return itself without calling the supplied function.
    """

    @classmethod
    def pure(cls, value: Any) -> "Maybe[Any]":
        return Present(value)

    @abstractmethod
    def is_present(self) -> bool:
        ...

    def is_absent(self) -> bool:
        return not self.is_present()


@dataclass(frozen=True, repr=False)
class Present(Maybe[T]):
    value: T

    def __repr__(self) -> str:
        return f"Present({self.value!r})"

    def is_present(self) -> bool:
        return True

    @overrides("Applicative")
    def apply(self, other: Maybe[Any]) -> Maybe[Any]:
        # The function side decides, but absence on the value side absorbs too.
        if other.is_absent():
            return ABSENT
        return super().apply(other)


class Absent(Maybe[Any]):
    _instance: Optional["Absent"] = None

    def __new__(cls) -> "Absent":
        # One instance per class; subclasses must not reuse the parent's.
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = super().__new__(cls)
            cls._instance = instance
        return instance

    def __repr__(self) -> str:
        return "Absent()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (type(self), ())

    @property
    def value(self) -> Any:
        raise ValueAccessError("Absent cannot contain a value")

    def is_present(self) -> bool:
        return False

    @overrides("Functor")
    def map(self, func: Callable[[Any], U]) -> "Absent":
        return self

    @overrides("Applicative")
    def apply(self, other: Maybe[Any]) -> "Absent":
        return self

    @overrides("Monad")
    def bind(self, func: Callable[[Any], Maybe[U]]) -> "Absent":
        return self


ABSENT = Absent()
