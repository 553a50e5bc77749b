# boardlab_picker/application/processing/constraints.py

"""Asynchronous inclusion filters for picker candidates"""

# Standard library imports
from collections.abc import Iterable
from dataclasses import dataclass
from inspect import isawaitable
from logging import getLogger

# Local imports
from boardlab_picker.core.types.aliases import Filter

logger = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PickConstraints[T]:
    """Ordered set of filters a candidate must all pass"""

    filters: tuple[Filter[T], ...] = ()

    @classmethod
    def of(cls, *filters: Filter[T]) -> "PickConstraints[T]":
        return cls(filters=tuple(filters))


async def matches_constraints[T](
    candidate: T, constraints: PickConstraints[T] | None = None
) -> bool:
    """Check a candidate against every filter, in order

    Evaluation stops at the first rejection. A filter that raises counts as a
    rejection of this candidate only; the error is logged and not propagated.

    Args:
        candidate: Value handed to each filter
        constraints: Filters to apply, None accepts everything

    Returns:
        True if all filters accept the candidate
    """
    if constraints is None:
        return True

    for candidate_filter in constraints.filters:
        try:
            passed = candidate_filter(candidate)
            if isawaitable(passed):
                passed = await passed
        except Exception:
            logger.warning("Pick filter failed; rejecting candidate", exc_info=True)
            return False
        if not passed:
            return False

    return True


async def filter_candidates[T](
    candidates: Iterable[T], constraints: PickConstraints[T] | None = None
) -> list[T]:
    """Keep exactly the candidates accepted by the constraints, in input order"""
    accepted = []
    for candidate in candidates:
        if await matches_constraints(candidate, constraints):
            accepted.append(candidate)
    return accepted
