from itertools import product
from typing import Any, List

from maybe_functors.core.fn import compose, compose2, curry, identity
from maybe_functors.laws.pipeline import DiagnosticSink, Law, LawConfig


def _expect(diag: DiagnosticSink, code: str, law: str, lhs: Any, rhs: Any, case: str) -> None:
    if lhs != rhs:
        diag.error(code, f"{case}: {lhs!r} != {rhs!r}", location=law)


class FunctorIdentityLaw(Law):
    name = "FunctorIdentityLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for m in config.wrapped_samples():
            _expect(diag, "FUNCTOR001", self.name, m.map(identity), m, f"map({m!r}, identity)")


class FunctorCompositionLaw(Law):
    name = "FunctorCompositionLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for m in config.wrapped_samples():
            for f, g in product(config.functions, repeat=2):
                _expect(
                    diag,
                    "FUNCTOR002",
                    self.name,
                    m.map(compose(f, g)),
                    m.map(g).map(f),
                    f"map({m!r}, f . g)",
                )


class ApplicativeIdentityLaw(Law):
    name = "ApplicativeIdentityLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for v in config.wrapped_samples():
            _expect(
                diag,
                "APPLICATIVE001",
                self.name,
                config.wrap(identity).apply(v),
                v,
                f"apply(pure(identity), {v!r})",
            )


class ApplicativeHomomorphismLaw(Law):
    name = "ApplicativeHomomorphismLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for f, x in product(config.functions, config.samples):
            _expect(
                diag,
                "APPLICATIVE002",
                self.name,
                config.wrap(f).apply(config.wrap(x)),
                config.wrap(f(x)),
                f"apply(pure(f), pure({x!r}))",
            )


class ApplicativeInterchangeLaw(Law):
    name = "ApplicativeInterchangeLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for f, y in product(config.functions, config.samples):
            u = config.wrap(f)
            _expect(
                diag,
                "APPLICATIVE003",
                self.name,
                u.apply(config.wrap(y)),
                config.wrap(lambda g: g(y)).apply(u),
                f"apply(pure(f), pure({y!r}))",
            )


class ApplicativeCompositionLaw(Law):
    name = "ApplicativeCompositionLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for (f, g), w in product(product(config.functions, repeat=2), config.wrapped_samples()):
            u, v = config.wrap(f), config.wrap(g)
            _expect(
                diag,
                "APPLICATIVE004",
                self.name,
                config.wrap(curry(compose2, 2)).apply(u).apply(v).apply(w),
                u.apply(v.apply(w)),
                f"composition over {w!r}",
            )


class MonadLeftIdentityLaw(Law):
    name = "MonadLeftIdentityLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for k, x in product(config.binders, config.samples):
            _expect(diag, "MONAD001", self.name, config.wrap(x).bind(k), k(x), f"bind(pure({x!r}), k)")


class MonadRightIdentityLaw(Law):
    name = "MonadRightIdentityLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for m in config.wrapped_samples():
            _expect(diag, "MONAD002", self.name, m.bind(config.wrap), m, f"bind({m!r}, pure)")


class MonadAssociativityLaw(Law):
    name = "MonadAssociativityLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        for m in config.wrapped_samples():
            for k, h in product(config.binders, repeat=2):
                _expect(
                    diag,
                    "MONAD003",
                    self.name,
                    m.bind(k).bind(h),
                    m.bind(lambda a, k=k, h=h: k(a).bind(h)),
                    f"associativity over {m!r}",
                )


class AbsentAbsorptionLaw(Law):
    """map, apply and bind over the empty value return it without calling anything."""

    name = "AbsentAbsorptionLaw"

    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        empty = config.empty
        if empty is None:
            diag.warning("ABSENT000", f"{config.container.__name__} has no empty value; skipped", location=self.name)
            return

        calls: List[Any] = []

        def spy(x: Any) -> Any:
            calls.append(x)
            return x

        for x in config.samples:
            _expect(diag, "ABSENT001", self.name, empty.map(spy), empty, "map(empty, f)")
            _expect(diag, "ABSENT002", self.name, empty.apply(config.wrap(x)), empty, f"apply(empty, pure({x!r}))")
            _expect(diag, "ABSENT003", self.name, config.wrap(spy).apply(empty), empty, "apply(pure(f), empty)")
            _expect(diag, "ABSENT004", self.name, empty.bind(spy), empty, "bind(empty, k)")

        if calls:
            diag.error("ABSENT005", f"function invoked {len(calls)} times on the empty value", location=self.name)


def default_laws() -> List[Law]:
    return [
        FunctorIdentityLaw(),
        FunctorCompositionLaw(),
        ApplicativeIdentityLaw(),
        ApplicativeHomomorphismLaw(),
        ApplicativeInterchangeLaw(),
        ApplicativeCompositionLaw(),
        MonadLeftIdentityLaw(),
        MonadRightIdentityLaw(),
        MonadAssociativityLaw(),
        AbsentAbsorptionLaw(),
    ]
