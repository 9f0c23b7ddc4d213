from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from .contracts import default_definition

T = TypeVar("T")
U = TypeVar("U")


class Functor(ABC, Generic[T]):
    """
    Containers that can lift a plain function over their contents.

    The default `map` unwraps `self.value`, applies the function and rewraps
    the result with the container's own class. Variants without a value must
    override it.
    """

    value: Any

    @default_definition("Functor")
    def map(self, func: Callable[[T], U]) -> "Functor[U]":
        return type(self)(func(self.value))


class Applicative(Functor[T]):
    """
    Functors that can wrap a bare value (`pure`) and apply a wrapped function
    to a wrapped value (`apply`).

    `pure` has no generic definition; every applicative type provides its own.
    """

    @classmethod
    @abstractmethod
    def pure(cls, value: Any) -> "Applicative[Any]":
        raise NotImplementedError

    @default_definition("Applicative")
    def apply(self, other: "Applicative[Any]") -> "Applicative[Any]":
        return type(self)(self.value(other.value))


class Monad(Applicative[T]):
    """Applicatives that can sequence functions returning a new container."""

    @default_definition("Monad")
    def bind(self, func: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        return func(self.value)
