"""
Constructor functions for ranges.

These are the public way to build ranges; each checks its preconditions
and returns a new range (reverse() may return an existing one):

    over([1, 2, 3])                  → BidirectionalRange
    reverse(rng)                     → Retro, or the original of a Retro
    cycle(rng)                       → Cycle
    concat(a, b, ...)                → Chain
    zip(a, b, ...)                   → Zip
    take(rng, n)                     → Take
    stride(rng, n)                   → Stride
    range(start, end=None, step=1)   → Iota
    generate(producer)               → Generated

`zip` and `range` deliberately share names with the builtins; import
them qualified (e.g. `from rangekit import ranges as rk`) if that clashes.
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable, Optional, Union

from rangekit.ranges.composites import Chain, Cycle, Retro, Stride, Take, Zip
from rangekit.ranges.core import Range, RangeTypeError
from rangekit.ranges.primitives import BidirectionalRange, Generated, Iota

logger = logging.getLogger(__name__)


def over(source: Sequence, begin: int = 0, end: Optional[int] = None) -> BidirectionalRange:
    """Bidirectional range over a raw sequence."""
    return BidirectionalRange(source, begin, end)


def reverse(rng: Range) -> Range:
    """
    Reverse a bidirectional range.

    Reversing a Retro returns the very range it wraps, so
    reverse(reverse(r)) is r.
    """
    if isinstance(rng, Retro):
        return rng.original
    if not isinstance(rng, Range):
        raise RangeTypeError(f"reverse needs a range, got {type(rng).__name__}")
    if not rng.is_bidirectional():
        raise RangeTypeError(f"reverse needs a bidirectional range, got {rng!r}")
    return Retro(rng)


def cycle(rng: Range) -> Cycle:
    """Repeat a finite range endlessly."""
    return Cycle(rng)


def concat(*ranges: Range) -> Chain:
    """Chain ranges one after another."""
    return Chain(list(ranges))


def zip(*ranges: Range) -> Zip:
    """Advance ranges in lockstep, stopping at the shortest."""
    return Zip(list(ranges))


def take(rng: Union[Range, Sequence], count: int) -> Take:
    """Bound a range to its first `count` elements."""
    return Take(rng, count)


def stride(rng: Union[Range, Sequence], step: int) -> Stride:
    """Every `step`-th element of a range."""
    return Stride(rng, step)


def range(start: int = 0, end: Optional[int] = None, step: int = 1) -> Iota:
    """Arithmetic sequence from start (inclusive) to end (exclusive, or unbounded)."""
    return Iota(start, end, step)


def generate(producer: Callable[[Generated, int], Any]) -> Generated:
    """Unbounded range pulling values from producer(range, counter)."""
    return Generated(producer)
