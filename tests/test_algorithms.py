"""
Tests for traversal algorithms (for_each, find).
"""

import warnings

import pytest

from rangekit import ranges as rk
from rangekit.config import get_config
from rangekit.ranges import (
    BackwardRange,
    InvocationError,
    RangeTypeError,
    UnreliableComparisonWarning,
)


class TestForEach:
    """Tests for for_each()."""

    def test_visits_in_order_and_exhausts(self):
        """Every element is passed to the action once, front to back."""
        seen = []
        rng = rk.over([3, 1, 2])
        rk.for_each(rng, seen.append)

        assert seen == [3, 1, 2]
        assert rng.empty()

    def test_reverse(self):
        """for_each over a reversed range visits back to front."""
        seen = []
        rk.for_each(rk.reverse(rk.over(["a", "b", "c"])), seen.append)
        assert seen == ["c", "b", "a"]

    def test_bounded_unbounded(self):
        """An unbounded range terminates once bounded by take()."""
        seen = []
        rk.for_each(rk.take(rk.range(10), 3), seen.append)
        assert seen == [10, 11, 12]

    def test_non_callable_action_fails_before_iteration(self):
        """A bad action is rejected without advancing the range."""
        rng = rk.over([1, 2])
        with pytest.raises(InvocationError):
            rk.for_each(rng, "print")
        assert rng.front() == 1

    def test_requires_forward_range(self):
        """Non-ranges and backward-only ranges are rejected."""
        with pytest.raises(RangeTypeError):
            rk.for_each([1, 2], print)
        with pytest.raises(RangeTypeError):
            rk.for_each(BackwardRange([1, 2]), print)

    def test_action_errors_propagate(self):
        """Exceptions from the action stop the traversal where it was."""
        rng = rk.over([1, 2, 3])

        def action(value):
            if value == 2:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            rk.for_each(rng, action)
        assert rng.front() == 2


class TestFind:
    """Tests for find()."""

    def test_positions_at_match(self):
        """find() stops with the match at the front."""
        rng = rk.range(0, 20)
        found = rk.find(rng, 7)

        assert found is rng
        assert found.front() == 7
        assert not found.empty()

    def test_missing_value_exhausts(self):
        """A value that never appears leaves the range exhausted."""
        rng = rk.find(rk.range(0, 5), 99)
        assert rng.empty()

    def test_match_at_front_does_not_advance(self):
        """An immediate match leaves the cursor untouched."""
        rng = rk.over(["x", "y"])
        rk.find(rng, "x")
        assert rng.begin == 0

    def test_find_in_unbounded(self):
        """find() terminates on unbounded ranges when the value occurs."""
        assert rk.find(rk.range(0, None, 3), 30).front() == 30

    def test_find_on_composites(self):
        """find() works over any forward range."""
        chain = rk.concat(rk.over([1, 2]), rk.over([3, 4]))
        assert rk.find(chain, 3).front() == 3
        assert list(chain) == [3, 4]

    def test_primitive_values_do_not_warn(self):
        """Numbers, strings, None and booleans compare reliably."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rk.find(rk.over([None, True, 1.5, "s", b"b"]), b"b")

    def test_non_primitive_value_warns(self):
        """Matching a tuple issues an advisory warning but still searches."""
        zipped = rk.zip(rk.over([1, 2]), rk.over(["a", "b"]))
        with pytest.warns(UnreliableComparisonWarning):
            found = rk.find(zipped, (2, "b"))
        assert found.front() == (2, "b")

    def test_warning_can_be_disabled(self):
        """The advisory warning follows configuration."""
        get_config().warn_unreliable_comparison = False
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rk.find(rk.over([[1], [2]]), [2])

    def test_requires_forward_range(self):
        """find() rejects non-ranges."""
        with pytest.raises(RangeTypeError):
            rk.find([1, 2, 3], 2)
