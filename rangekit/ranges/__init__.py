"""
Rangekit Range System - Composable Lazy Ranges

A Range is a cursor over a sequence (or over another range) that exposes
its front and back elements and advances without copying. Ranges follow
SICP principles:

1. Primitives: cursors over sequences, arithmetic and generated sequences
2. Means of Combination: reverse, concat, zip, stride, cycle, take
3. Means of Abstraction: named range definitions in a registry
4. Closure: combining ranges yields a range

Example:
    from rangekit import ranges as rk

    letters = rk.over(["a", "b", "c"])
    numbered = rk.zip(rk.range(1), rk.cycle(letters))

    for pair in rk.take(numbered, 5):
        print(pair)
"""

from rangekit.ranges.core import (
    UNBOUNDED,
    Capability,
    Range,
    RangeError,
    ExhaustedRangeError,
    RangeTypeError,
    InvocationError,
    UnreliableComparisonWarning,
    is_range,
)

from rangekit.ranges.primitives import (
    ForwardRange,
    BackwardRange,
    BidirectionalRange,
    Iota,
    Generated,
)

from rangekit.ranges.composites import (
    Retro,
    Chain,
    Zip,
    Stride,
    Cycle,
    Take,
)

from rangekit.ranges.algorithms import for_each, find

from rangekit.ranges.builders import (
    over,
    reverse,
    cycle,
    concat,
    zip,
    take,
    stride,
    range,
    generate,
)

from rangekit.ranges.parser import RangeParseError, RangeParser, parse_range, parse_range_text
from rangekit.ranges.registry import (
    RangeRegistry,
    RangeNotFoundError,
    ProducerNotFoundError,
)

__all__ = [
    # Core
    "UNBOUNDED",
    "Capability",
    "Range",
    "is_range",
    # Errors
    "RangeError",
    "ExhaustedRangeError",
    "RangeTypeError",
    "InvocationError",
    "UnreliableComparisonWarning",
    "RangeParseError",
    "RangeNotFoundError",
    "ProducerNotFoundError",
    # Primitives
    "ForwardRange",
    "BackwardRange",
    "BidirectionalRange",
    "Iota",
    "Generated",
    # Composites
    "Retro",
    "Chain",
    "Zip",
    "Stride",
    "Cycle",
    "Take",
    # Algorithms
    "for_each",
    "find",
    # Builders
    "over",
    "reverse",
    "cycle",
    "concat",
    "zip",
    "take",
    "stride",
    "range",
    "generate",
    # Registry
    "RangeRegistry",
    # Parser
    "RangeParser",
    "parse_range",
    "parse_range_text",
]
