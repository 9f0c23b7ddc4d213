from loguru import logger

from maybe_functors.logging_config import configure_logging

configure_logging()

from maybe_functors.api import (  # noqa: E402
    apply,
    bind,
    check_laws,
    fmap,
    is_absent,
    is_present,
    join,
    lift2,
    pure,
)
from maybe_functors.core.contracts import dispatch_table  # noqa: E402
from maybe_functors.core.errors import ValueAccessError  # noqa: E402
from maybe_functors.core.fn import compose, curry, identity  # noqa: E402
from maybe_functors.core.maybe import ABSENT, Absent, Maybe, Present  # noqa: E402
from maybe_functors.laws.pipeline import LawConfig, LawPipeline, LawResult  # noqa: E402
from maybe_functors.laws.report import LawReport  # noqa: E402

__all__ = [
    "ABSENT",
    "Absent",
    "LawConfig",
    "LawPipeline",
    "LawReport",
    "LawResult",
    "Maybe",
    "Present",
    "ValueAccessError",
    "apply",
    "bind",
    "check_laws",
    "compose",
    "curry",
    "dispatch_table",
    "fmap",
    "identity",
    "is_absent",
    "is_present",
    "join",
    "lift2",
    "main",
    "pure",
]


def main() -> int:
    logger.info("maybe-functors law check invoked")
    result = check_laws()
    report = LawReport(result)
    if result.success:
        logger.info("\n{}", report)
        return 0
    logger.error("\n{}", report)
    return 1
