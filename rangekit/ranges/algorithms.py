"""
Traversal algorithms over forward ranges.

Both algorithms advance the range they are given in place; pass a range
you no longer need, or build a fresh one.
"""

import logging
import warnings
from numbers import Number
from typing import Any, Callable

from rangekit.ranges.core import (
    Capability,
    InvocationError,
    Range,
    RangeTypeError,
    UnreliableComparisonWarning,
)

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = (type(None), bool, Number, str, bytes)


def _require_forward(name: str, rng: Any) -> Range:
    if not isinstance(rng, Range):
        raise RangeTypeError(f"{name} needs a range, got {type(rng).__name__}")
    if Capability.FORWARD not in rng.capabilities:
        raise RangeTypeError(f"{name} needs a forward range, got {rng!r}")
    return rng


def for_each(rng: Range, action: Callable[[Any], Any]) -> None:
    """
    Call action(element) for every element, front to back.

    The range is exhausted afterwards. An unbounded range never finishes;
    bound it with take() first.

    Raises:
        RangeTypeError: If rng is not a forward range
        InvocationError: If action is not callable (checked before any element is read)
    """
    _require_forward("for_each", rng)
    if not callable(action):
        raise InvocationError(f"for_each action must be callable, got {type(action).__name__}")

    while not rng.empty():
        action(rng.front())
        rng.pop_front()


def find(rng: Range, value: Any) -> Range:
    """
    Advance rng until its front equals value, or until it is empty.

    Returns the same range object, positioned at the match (not past it),
    or exhausted if nothing matched. Matching uses ==; for values other than
    None, booleans, numbers, strings and bytes an UnreliableComparisonWarning
    is issued, since == on such objects may not express the intended match.
    """
    from rangekit.config import current_config

    _require_forward("find", rng)
    if not isinstance(value, PRIMITIVE_TYPES) and current_config().warn_unreliable_comparison:
        warnings.warn(
            f"find() compares {type(value).__name__} values with ==; "
            "the match may not reflect identity or structure",
            UnreliableComparisonWarning,
            stacklevel=2,
        )

    steps = 0
    while not rng.empty() and rng.front() != value:
        rng.pop_front()
        steps += 1

    logger.debug(f"find({value!r}) advanced {steps} positions, found={not rng.empty()}")
    return rng
