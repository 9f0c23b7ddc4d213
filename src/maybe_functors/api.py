from typing import Any, Callable, Optional

from maybe_functors.core.fn import curry, identity
from maybe_functors.core.maybe import Maybe
from maybe_functors.laws.checks import default_laws
from maybe_functors.laws.pipeline import LawConfig, LawPipeline, LawResult


def pure(value: Any) -> Maybe[Any]:
    return Maybe.pure(value)


def fmap(container: Maybe[Any], func: Callable[[Any], Any]) -> Maybe[Any]:
    return container.map(func)


def apply(container_f: Maybe[Any], container_v: Maybe[Any]) -> Maybe[Any]:
    return container_f.apply(container_v)


def bind(container: Maybe[Any], func: Callable[[Any], Maybe[Any]]) -> Maybe[Any]:
    return container.bind(func)


def join(container: Maybe[Maybe[Any]]) -> Maybe[Any]:
    """Flatten one level of nesting: Present(Present(x)) -> Present(x)."""
    return container.bind(identity)


def lift2(func: Callable[[Any, Any], Any], a: Maybe[Any], b: Maybe[Any]) -> Maybe[Any]:
    return pure(curry(func, 2)).apply(a).apply(b)


def is_present(value: Any) -> bool:
    return isinstance(value, Maybe) and value.is_present()


def is_absent(value: Any) -> bool:
    return isinstance(value, Maybe) and value.is_absent()


def check_laws(config: Optional[LawConfig] = None) -> LawResult:
    pipeline = LawPipeline(config)
    for law in default_laws():
        pipeline.add_law(law)
    return pipeline.run()
