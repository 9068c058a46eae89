"""
Primitive ranges.

These are the building blocks from which all ranges are composed:
- ForwardRange: Cursor advanced from the front
- BackwardRange: Cursor advanced from the back
- BidirectionalRange: Cursor advanced from either end
- Iota: Arithmetic sequence, materialized on demand
- Generated: Values pulled from a production function, memoized
"""

import logging
from collections.abc import Sequence
from numbers import Integral
from typing import Any, Callable, List, Optional, Union

from rangekit.ranges.core import (
    UNBOUNDED,
    Backward,
    Capability,
    Forward,
    InvocationError,
    Range,
    RangeTypeError,
)

logger = logging.getLogger(__name__)


class _CursorRange(Range):
    """
    Cursor over a sequence or another range.

    Over a raw sequence the cursor can be rewound; over another range it
    cannot, and the wrapped range must support every advance this type does.
    """

    def __init__(
        self,
        source: Union[Sequence, Range],
        begin: int = 0,
        end: Optional[int] = None,
    ):
        super().__init__(source, begin, end)
        if self.wraps_range:
            required = type(self).capabilities & Capability.BIDIRECTIONAL
            if (source.capabilities & required) != required:
                raise RangeTypeError(
                    f"{type(self).__name__} needs a source supporting {required}, "
                    f"got {type(source).__name__}"
                )
            self.capabilities = type(self).capabilities & ~Capability.REWIND


class ForwardRange(Forward, _CursorRange):
    """Range advanced from the front only."""
    capabilities = Capability.FORWARD | Capability.REWIND


class BackwardRange(Backward, _CursorRange):
    """Range advanced from the back only."""
    capabilities = Capability.BACKWARD | Capability.REWIND


class BidirectionalRange(Forward, Backward, _CursorRange):
    """Range advanced from either end."""
    capabilities = Capability.BIDIRECTIONAL | Capability.REWIND


def _span(start: int, end: int, step: int) -> int:
    """Number of values in start, start + step, ... stopping before end."""
    if step > 0:
        return max(0, (end - start + step - 1) // step)
    return max(0, (start - end - step - 1) // -step)


class Iota(Range):
    """
    Arithmetic sequence: start, start + step, start + 2*step, ...

    Values are computed only when the cursor reaches them and are kept in
    a growing buffer indexed by position, so rewinding (as Cycle does)
    never recomputes. Without an end the sequence is unbounded and must be
    bounded (e.g. with Take) before traversal.

    The cursor counts positions, not values: begin is the index of the
    current value and end is the number of values.
    """

    capabilities = Capability.FORWARD | Capability.REWIND

    def __init__(self, start: int = 0, end: Optional[int] = None, step: int = 1):
        for name, value in (("start", start), ("end", end), ("step", step)):
            if value is not None and (not isinstance(value, Integral) or isinstance(value, bool)):
                raise RangeTypeError(f"Iota {name} must be an integer, got {value!r}")
        if step == 0:
            raise ValueError("Iota step must not be zero")

        self.start = start
        self.stop = end
        self.step = step
        self._values: List[int] = [start]
        span = UNBOUNDED if end is None else _span(start, end, step)
        super().__init__(self._values, 0, None)
        self.end = span

    @property
    def bounded(self) -> bool:
        return self.end != UNBOUNDED

    def empty(self) -> bool:
        return self.begin >= self.end

    def front(self) -> Any:
        if self.empty():
            return self._missing("front")
        return self._values[self.begin]

    def back(self) -> Any:
        if self.empty():
            return self._missing("back")
        if not self.bounded:
            raise RangeTypeError("An unbounded Iota has no back element")
        return self.start + (self.end - 1) * self.step

    def pop_front(self) -> None:
        self._check_not_empty()
        self.begin += 1
        if self.begin == len(self._values) and not self.empty():
            self._values.append(self._values[-1] + self.step)

    def __contains__(self, value: Any) -> bool:
        """Whether value is among the remaining positions."""
        if not isinstance(value, Integral) or self.empty():
            return False
        offset = value - self.start
        if offset % self.step:
            return False
        position = offset // self.step
        return self.begin <= position < self.end

    def __repr__(self) -> str:
        end = "" if self.stop is None else f", end={self.stop}"
        return f"Iota(start={self.start}{end}, step={self.step}, position={self.begin})"


class Generated(Range):
    """
    Unbounded sequence pulled from a production function.

    The producer is called as producer(range, counter), where counter
    counts calls from zero and range.values holds everything produced so
    far. The first value is produced at construction; each advance that
    reaches an unseen position produces exactly one more. Values are never
    regenerated, and the sequence cannot be restarted.
    """

    capabilities = Capability.FORWARD

    def __init__(self, producer: Callable[["Generated", int], Any]):
        if not callable(producer):
            raise InvocationError(f"Generated needs a callable producer, got {type(producer).__name__}")

        self.producer = producer
        self.calls = 0
        self._values: List[Any] = []
        super().__init__(self._values, 0, None)
        self.end = UNBOUNDED
        self._produce()

    @property
    def values(self) -> List[Any]:
        """Values produced so far (read-only view for producers)."""
        return self._values

    def _produce(self) -> None:
        value = self.producer(self, self.calls)
        self.calls += 1
        self._values.append(value)
        logger.debug(f"Generated value #{self.calls}: {value!r}")

    def empty(self) -> bool:
        return False

    def front(self) -> Any:
        return self._values[self.begin]

    def back(self) -> Any:
        raise RangeTypeError("A Generated range has no back element")

    def pop_front(self) -> None:
        self.begin += 1
        if self.begin == len(self._values):
            self._produce()

    def __repr__(self) -> str:
        name = getattr(self.producer, "__name__", type(self.producer).__name__)
        return f"Generated({name}, position={self.begin})"
