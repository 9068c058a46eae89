"""
Core range abstractions.

This module defines the fundamental types for the range system:
- Range: Base class for all ranges (a cursor over a sequence or another range)
- Capability: Explicit flags naming what a concrete range type can do
- Forward / Backward: Advance mixins that concrete ranges opt into
- Errors and warnings raised by the range system
"""

import logging
import math
from collections.abc import Sequence
from enum import Flag
from typing import Any, ClassVar, Optional, Union

logger = logging.getLogger(__name__)

# End bound of a range that never runs out by cursor arithmetic.
UNBOUNDED = math.inf


class RangeError(Exception):
    """Base class for range errors."""
    pass


class ExhaustedRangeError(RangeError):
    """Raised when advancing (or strictly reading) an empty range."""
    pass


class RangeTypeError(RangeError, TypeError):
    """Raised when a range is built from an argument lacking a required capability."""
    pass


class InvocationError(RangeError, TypeError):
    """Raised when a non-callable is passed where a function is required."""
    pass


class UnreliableComparisonWarning(UserWarning):
    """Matching against a non-primitive value may not mean what the caller intends."""
    pass


class Capability(Flag):
    """
    Operations a concrete range type supports.

    Flags are declared per class and resolved per instance at construction,
    so they can be queried without invoking the operation.
    """
    NONE = 0
    FORWARD = 1
    BACKWARD = 2
    REWIND = 4
    BIDIRECTIONAL = FORWARD | BACKWARD


def is_range(obj: Any) -> bool:
    """Check whether obj is a Range."""
    return isinstance(obj, Range)


class Range:
    """
    A lazy, non-copying cursor over a source.

    The source is either a raw Sequence (read by index) or another Range
    (read by delegation). The cursor is the half-open pair [begin, end).

    Ranges are mutable: advancing changes the cursor in place, and a Range
    wrapping another Range advances the wrapped one too. Nested ranges alias
    their children, so a child must only be advanced through its owner
    while the owner is being traversed.

    Ranges support composition via operators:
    - range_a + range_b  → Chain (a, then b)
    - reversed(range)    → Retro (or the original, when already reversed)
    """

    capabilities: ClassVar[Capability] = Capability.NONE

    def __init__(
        self,
        source: Union[Sequence, "Range"],
        begin: int = 0,
        end: Optional[Union[int, float]] = None,
    ):
        if begin < 0:
            raise ValueError(f"{type(self).__name__} begin must not be negative, got {begin}")
        if end is not None and end < 0:
            raise ValueError(f"{type(self).__name__} end must not be negative, got {end}")

        if isinstance(source, Range):
            if end is None:
                end = UNBOUNDED
        elif isinstance(source, Sequence):
            length = len(source)
            end = length if end is None else min(end, length)
        else:
            raise RangeTypeError(
                f"{type(self).__name__} needs a sequence or a range, got {type(source).__name__}"
            )

        self.source = source
        self.begin = begin
        self.end = end

    # --------- capability queries ----------

    def supports_forward(self) -> bool:
        return Capability.FORWARD in self.capabilities

    def supports_backward(self) -> bool:
        return Capability.BACKWARD in self.capabilities

    def supports_rewind(self) -> bool:
        return Capability.REWIND in self.capabilities

    def is_bidirectional(self) -> bool:
        return Capability.BIDIRECTIONAL in self.capabilities

    @property
    def wraps_range(self) -> bool:
        """True when the source is another Range rather than a raw sequence."""
        return isinstance(self.source, Range)

    # --------- element access ----------

    def empty(self) -> bool:
        """True iff the cursor is exhausted (or the wrapped range is)."""
        if self.begin >= self.end:
            return True
        if self.wraps_range:
            return self.source.empty()
        return False

    def front(self) -> Any:
        """
        Current first element.

        On an empty range this returns None, unless strict access is
        configured, in which case ExhaustedRangeError is raised.
        """
        if self.empty():
            return self._missing("front")
        if self.wraps_range:
            return self.source.front()
        return self.source[self.begin]

    def back(self) -> Any:
        """Current last element; same empty-range rules as front()."""
        if self.empty():
            return self._missing("back")
        if self.wraps_range:
            return self.source.back()
        return self.source[self.end - 1]

    def rewind(self, begin: int) -> None:
        """
        Move the front of the cursor back to `begin`.

        Only positions already passed are valid targets, so `begin` must lie
        between 0 and the current begin.
        """
        if not self.supports_rewind():
            raise RangeTypeError(f"{type(self).__name__} cannot be rewound")
        if not 0 <= begin <= self.begin:
            raise ValueError(
                f"Cannot rewind {type(self).__name__} to {begin}; valid positions are 0..{self.begin}"
            )
        self.begin = begin

    def _missing(self, what: str) -> None:
        from rangekit.config import current_config

        if current_config().strict_access:
            raise ExhaustedRangeError(f"Cannot read {what} of an empty {type(self).__name__}")
        return None

    def _check_not_empty(self) -> None:
        if self.empty():
            raise ExhaustedRangeError(f"Cannot advance an exhausted {type(self).__name__}")

    # --------- python protocol ----------

    def __iter__(self):
        """Consume the range, yielding each front element in turn."""
        if not self.supports_forward():
            raise RangeTypeError(f"{type(self).__name__} cannot be advanced forward")
        while not self.empty():
            yield self.front()
            self.pop_front()

    def __add__(self, other: "Range") -> "Range":
        """Chain: self + other → elements of self, then of other."""
        from rangekit.ranges.composites import Chain
        if isinstance(other, Chain):
            return Chain([self] + other.children)
        if not isinstance(other, Range):
            return NotImplemented
        return Chain([self, other])

    def __reversed__(self) -> "Range":
        """Reverse: reversed(self) → Retro(self), or the original if self is a Retro."""
        from rangekit.ranges.builders import reverse
        return reverse(self)

    def __repr__(self) -> str:
        source = repr(self.source) if self.wraps_range else f"<{type(self.source).__name__}>"
        return f"{type(self).__name__}({source}, begin={self.begin}, end={self.end})"


class Forward:
    """Mixin granting pop_front() to a cursor range."""

    def pop_front(self) -> None:
        """Advance the front by one position."""
        self._check_not_empty()
        self.begin += 1
        if self.wraps_range:
            self.source.pop_front()


class Backward:
    """Mixin granting pop_back() to a cursor range."""

    def pop_back(self) -> None:
        """Retreat the back by one position."""
        self._check_not_empty()
        self.end -= 1
        if self.wraps_range:
            self.source.pop_back()
