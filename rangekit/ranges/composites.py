"""
Composite ranges.

These wrap one or more child ranges and present them as a new range:
- Retro: Reversal (front and back swapped)
- Chain: Sequential concatenation (a + b + c)
- Zip: Lockstep tuples, stopping at the shortest child
- Stride: Every n-th element
- Cycle: Endless repetition of a finite range
- Take: Bounded prefix

A composite is the sole mutator of its children while it is traversed.
"""

import logging
from collections.abc import Sequence
from numbers import Integral
from typing import Any, List, Optional, Tuple, Union

from rangekit.ranges.core import (
    UNBOUNDED,
    Capability,
    Range,
    RangeTypeError,
)

logger = logging.getLogger(__name__)


def _require(owner: str, child: Any, capability: Capability) -> Range:
    """Check that child is a Range declaring `capability`."""
    if not isinstance(child, Range):
        raise RangeTypeError(f"{owner} needs a range, got {type(child).__name__}")
    if (child.capabilities & capability) != capability:
        raise RangeTypeError(f"{owner} needs a range supporting {capability}, got {child!r}")
    return child


def _require_count(owner: str, name: str, value: Any) -> int:
    if not isinstance(value, Integral) or isinstance(value, bool):
        raise RangeTypeError(f"{owner} {name} must be an integer, got {value!r}")
    return int(value)


class Retro(Range):
    """
    Reversal of a bidirectional range.

    front() is the source's back() and popping the front pops the source's
    back, so the source cursor stays the single source of truth. The
    wrapped range is kept as `original`; reversing a Retro hands back that
    exact object instead of building a new one.

    Example:
        r = BidirectionalRange([1, 2, 3])
        assert reverse(reverse(r)) is r
    """

    capabilities = Capability.BIDIRECTIONAL

    def __init__(self, source: Range):
        _require("Retro", source, Capability.BIDIRECTIONAL)
        super().__init__(source)
        self.original = source

    def empty(self) -> bool:
        return self.source.empty()

    def front(self) -> Any:
        if self.empty():
            return self._missing("front")
        return self.source.back()

    def back(self) -> Any:
        if self.empty():
            return self._missing("back")
        return self.source.front()

    def pop_front(self) -> None:
        self._check_not_empty()
        self.source.pop_back()

    def pop_back(self) -> None:
        self._check_not_empty()
        self.source.pop_front()

    def retro(self) -> Range:
        """Undo the reversal, returning the wrapped range itself."""
        return self.original

    def __repr__(self) -> str:
        return f"Retro({self.source!r})"


class Chain(Range):
    """
    Sequential concatenation of forward ranges.

    The chain tracks the index of its current child. It is empty only when
    every child from that index on is empty, so an empty child in the
    middle is skipped rather than ending the chain.
    """

    capabilities = Capability.FORWARD

    def __init__(self, children: List[Range]):
        children = [_require("Chain", child, Capability.FORWARD) for child in children]
        super().__init__(children)
        self.children = children
        self.index = 0

    def _current(self) -> Optional[Range]:
        """First non-empty child at or after the current index."""
        for child in self.children[self.index:]:
            if not child.empty():
                return child
        return None

    def empty(self) -> bool:
        return self._current() is None

    def front(self) -> Any:
        current = self._current()
        if current is None:
            return self._missing("front")
        return current.front()

    def back(self) -> Any:
        for child in reversed(self.children[self.index:]):
            if not child.empty():
                return child.back()
        return self._missing("back")

    def pop_front(self) -> None:
        self._check_not_empty()
        while self.children[self.index].empty():
            self.index += 1
        self.children[self.index].pop_front()

    def __add__(self, other: Range) -> "Chain":
        """Extend chain: self + other."""
        if isinstance(other, Chain):
            return Chain(self.children + other.children)
        if not isinstance(other, Range):
            return NotImplemented
        return Chain(self.children + [other])

    def __repr__(self) -> str:
        return f"Chain({len(self.children)} ranges, index={self.index})"


class Zip(Range):
    """
    Lockstep combination of forward ranges.

    front() is a tuple of each child's front, in child order. The zip is
    empty as soon as any child is empty (zip-shortest); exhausted children
    are never padded with placeholders.
    """

    capabilities = Capability.FORWARD

    def __init__(self, children: List[Range]):
        children = [_require("Zip", child, Capability.FORWARD) for child in children]
        super().__init__(children)
        self.children = children

    def empty(self) -> bool:
        if not self.children:
            return True
        return any(child.empty() for child in self.children)

    def front(self) -> Tuple[Any, ...]:
        if self.empty():
            return self._missing("front")
        return tuple(child.front() for child in self.children)

    def back(self) -> Tuple[Any, ...]:
        if self.empty():
            return self._missing("back")
        # Children's backs only line up when every child has the same length.
        raise RangeTypeError("A Zip has no back element")

    def pop_front(self) -> None:
        self._check_not_empty()
        for child in self.children:
            if not child.empty():
                child.pop_front()

    def __repr__(self) -> str:
        return f"Zip({len(self.children)} ranges)"


class Stride(Range):
    """
    Every `step`-th element of a sequence or forward range.

    Over a range, each advance pops the source up to `step` times,
    stopping early once it runs dry, and emptiness is the source's.
    Over a raw sequence the cursor jumps by `step`.
    """

    capabilities = Capability.FORWARD

    def __init__(self, source: Union[Sequence, Range], step: int = 1):
        step = _require_count("Stride", "step", step)
        if step < 1:
            raise ValueError(f"Stride step must be positive, got {step}")
        if isinstance(source, Range):
            _require("Stride", source, Capability.FORWARD)
        super().__init__(source)
        self.step = step

    def empty(self) -> bool:
        if self.wraps_range:
            return self.source.empty()
        return self.begin >= self.end

    def pop_front(self) -> None:
        self._check_not_empty()
        self.begin += self.step
        if self.wraps_range:
            for _ in range(self.step):
                if self.source.empty():
                    break
                self.source.pop_front()

    def back(self) -> Any:
        if self.empty():
            return self._missing("back")
        if self.wraps_range:
            raise RangeTypeError("A Stride over a range has no back element")
        last = self.begin + (self.end - 1 - self.begin) // self.step * self.step
        return self.source[last]

    def __repr__(self) -> str:
        source = repr(self.source) if self.wraps_range else f"<{type(self.source).__name__}>"
        return f"Stride({source}, step={self.step}, begin={self.begin})"


class Cycle(Range):
    """
    Endless repetition of a finite, rewindable range.

    The cycle shares its child: after every `span` advances it rewinds the
    child to the begin it had when the cycle was built. Nothing else may
    advance the child meanwhile. A cycle over a non-empty child is never
    empty, so it must be bounded (e.g. with Take) before traversal.
    """

    capabilities = Capability.FORWARD

    def __init__(self, source: Range):
        _require("Cycle", source, Capability.FORWARD | Capability.REWIND)
        if source.end == UNBOUNDED:
            raise RangeTypeError(f"Cannot cycle an unbounded range: {source!r}")
        super().__init__(source)
        self.origin = source.begin
        self.span = max(0, source.end - source.begin)
        self.count = 0

    def empty(self) -> bool:
        return self.span == 0

    def front(self) -> Any:
        if self.empty():
            return self._missing("front")
        return self.source.front()

    def back(self) -> Any:
        if self.empty():
            return self._missing("back")
        return self.source.back()

    def pop_front(self) -> None:
        self._check_not_empty()
        self.source.pop_front()
        self.count += 1
        self.begin += 1
        if self.count >= self.span:
            logger.debug(f"Cycle rewinding {self.source!r} to {self.origin}")
            self.count = 0
            self.begin = 0
            self.source.rewind(self.origin)

    def __repr__(self) -> str:
        return f"Cycle({self.source!r}, span={self.span})"


class Take(Range):
    """
    First `count` elements of a sequence or forward range.

    The bound holds regardless of how much the source could still produce;
    the take also ends early if its source runs out first.
    """

    capabilities = Capability.FORWARD

    def __init__(self, source: Union[Sequence, Range], count: int):
        count = _require_count("Take", "count", count)
        if count < 0:
            raise ValueError(f"Take count must not be negative, got {count}")
        if isinstance(source, Range):
            _require("Take", source, Capability.FORWARD)
        super().__init__(source, 0, count)
        self.count = count

    def back(self) -> Any:
        if self.empty():
            return self._missing("back")
        if self.wraps_range:
            raise RangeTypeError("A Take over a range has no back element")
        return self.source[self.end - 1]

    def pop_front(self) -> None:
        self._check_not_empty()
        self.begin += 1
        if self.wraps_range:
            self.source.pop_front()

    def __repr__(self) -> str:
        source = repr(self.source) if self.wraps_range else f"<{type(self.source).__name__}>"
        return f"Take({source}, count={self.count}, taken={self.begin})"
