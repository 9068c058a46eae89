"""
rangekit - Composable Lazy Ranges

Cursor-style views over sequences that expose their front and back
elements and advance in place without copying, plus combinators
(reverse, concat, zip, stride, cycle, take) and lazy arithmetic and
generated sequences that compose into new ranges.

Example Usage:
    >>> from rangekit import ranges as rk
    >>> list(rk.take(rk.cycle(rk.over([3, 4, 5])), 7))
    [3, 4, 5, 3, 4, 5, 3]
    >>> rk.find(rk.range(0, 20), 7).front()
    7
"""

__version__ = "0.1.0"
__author__ = "rangekit Contributors"

# Configuration
from rangekit.config import RangekitConfig, current_config, get_config, init_config

# Ranges
from rangekit import ranges

__all__ = [
    "RangekitConfig",
    "current_config",
    "get_config",
    "init_config",
    "ranges",
]
