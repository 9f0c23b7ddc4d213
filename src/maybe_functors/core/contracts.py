from dataclasses import dataclass
from typing import Any, Dict, Optional

OPERATIONS = {
    "map": "Functor",
    "apply": "Applicative",
    "bind": "Monad",
}


@dataclass(frozen=True)
class Dispatch:
    capability: str
    operation: str
    overridden: bool = False


def _mark(func, capability: str, overridden: bool):
    operation = func.__name__
    expected = OPERATIONS.get(operation)
    if expected is None:
        raise ValueError(f"'{operation}' is not a capability operation")
    if expected != capability:
        raise ValueError(f"'{operation}' belongs to {expected}, not {capability}")
    func._dispatch = Dispatch(capability=capability, operation=operation, overridden=overridden)
    return func


def default_definition(capability: str):
    def decorator(func):
        return _mark(func, capability, overridden=False)
    return decorator


def overrides(capability: str):
    def decorator(func):
        return _mark(func, capability, overridden=True)
    return decorator


def dispatch_of(cls: type, operation: str) -> Optional[Dispatch]:
    method = getattr(cls, operation, None)
    return getattr(method, "_dispatch", None)


def dispatch_table(cls: type) -> Dict[str, str]:
    """
    Report which definition each capability operation resolves to on `cls`.

    Operations missing from `cls` are left out. A resolved method without a
    dispatch marker is reported as "override".
    """
    table: Dict[str, str] = {}
    for operation in OPERATIONS:
        if getattr(cls, operation, None) is None:
            continue
        info: Any = dispatch_of(cls, operation)
        if info is not None and not info.overridden:
            table[operation] = "default"
        else:
            table[operation] = "override"
    return table
