from functools import partial, reduce
from inspect import Parameter, signature
from typing import Any, Callable, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def identity(value: A) -> A:
    return value


def compose2(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    def inner(x: A) -> C:
        return f(g(x))

    return inner


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Right-to-left composition: compose(f, g)(x) == f(g(x))."""
    return reduce(compose2, fns, identity)


def _required_positional(fn: Callable[..., Any]) -> int:
    params = signature(fn).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)
        and p.default is Parameter.empty
    )


def curry(fn: Callable[..., Any], arity: Optional[int] = None) -> Callable[[Any], Any]:
    """
    Turn an n-ary callable into nested one-argument callables.

    curry(lambda x, y: x + y)(1)(2) == 3
    """
    if arity is None:
        arity = _required_positional(fn)
    if arity < 1:
        raise ValueError(f"curry needs an arity of at least 1, got {arity}")

    def inner(arg: Any) -> Any:
        if arity == 1:
            return fn(arg)
        return curry(partial(fn, arg), arity - 1)

    return inner
