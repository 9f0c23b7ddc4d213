from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

from loguru import logger

from maybe_functors.core.maybe import ABSENT, Absent, Maybe, Present


class DiagnosticSeverity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass
class Diagnostic:
    severity: DiagnosticSeverity
    code: str
    message: str
    location: Optional[str] = None


class DiagnosticSink:
    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def error(self, code: str, message: str, location: Optional[str] = None):
        self.diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, code, message, location))

    def warning(self, code: str, message: str, location: Optional[str] = None):
        self.diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, code, message, location))

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.ERROR]


def _step_down(x: Any) -> Maybe[Any]:
    return Present(x - 1) if x > 0 else Absent()


def _default_samples() -> List[Any]:
    return [0, 1, -3, 42]


def _default_functions() -> List[Callable[[Any], Any]]:
    return [lambda x: x + 1, lambda x: x * 2, lambda x: -x]


def _default_binders() -> List[Callable[[Any], Maybe[Any]]]:
    return [_step_down, lambda x: Present(x * 10), lambda x: Absent()]


@dataclass
class LawConfig:
    """
    Inputs for a law check run.

    `container` is the applicative type under test; its `pure` wraps every
    sample. `empty` is the container's absent value, or None when the type
    has none (absorption checks are then skipped).
    """
    samples: List[Any] = field(default_factory=_default_samples)
    functions: List[Callable[[Any], Any]] = field(default_factory=_default_functions)
    binders: List[Callable[[Any], Any]] = field(default_factory=_default_binders)
    container: type = Maybe
    empty: Optional[Any] = ABSENT

    def wrap(self, value: Any) -> Any:
        return self.container.pure(value)

    def wrapped_samples(self) -> List[Any]:
        wrapped = [self.wrap(x) for x in self.samples]
        if self.empty is not None:
            wrapped.append(self.empty)
        return wrapped


@dataclass
class LawResult:
    success: bool
    diagnostics: List[Diagnostic]
    checked: List[str] = field(default_factory=list)


class Law(ABC):
    name: str

    @abstractmethod
    def run(self, config: LawConfig, diag: DiagnosticSink) -> None:
        ...


class LawPipeline:
    def __init__(self, config: Optional[LawConfig] = None):
        self.config = config or LawConfig()
        self.laws: List[Law] = []

    def add_law(self, law: Law):
        self.laws.append(law)

    def run(self) -> LawResult:
        diag = DiagnosticSink()
        checked: List[str] = []
        container = self.config.container.__name__

        for law in self.laws:
            logger.debug("Checking {} for {}", law.name, container)
            try:
                law.run(self.config, diag)
            except Exception as exc:  # noqa: BLE001
                diag.error(
                    "LAW000",
                    f"{law.name} raised {type(exc).__name__}: {exc}",
                    location=law.name,
                )
            checked.append(law.name)

        errors = diag.errors
        logger.info(
            "Law check for {} finished: {} laws, {} errors",
            container,
            len(checked),
            len(errors),
        )
        return LawResult(success=not errors, diagnostics=diag.diagnostics, checked=checked)
