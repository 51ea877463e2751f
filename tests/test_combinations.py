"""Tests for combinations, combinations_with_reps and power_set."""

import itertools
import math

import pytest

import pyomore as pm
from tests._helpers import Boom, DropCounter, PullCounter, failing_source

LENGTHS = [0, 1, 2, 3, 5]
SIZES = [0, 1, 2, 3, 4, 6]


class TestCombinations:
    """Test k-combinations without repetition."""

    def test_pairs(self) -> None:
        """Test the pairs of three items."""
        result = pm.Iter([1, 2, 3]).combinations(2).collect()
        assert result.inner() == ((1, 2), (1, 3), (2, 3))

    @pytest.mark.parametrize("k", SIZES)
    @pytest.mark.parametrize("length", LENGTHS)
    def test_matches_itertools(self, k: int, length: int) -> None:
        """Test that C(L, k) combinations are emitted in lexicographic order."""
        result = list(pm.Combinations(range(length), k))
        assert result == list(itertools.combinations(range(length), k))
        assert len(result) == math.comb(length, k)

    def test_indices_strictly_increase(self) -> None:
        """Test that every combination is a strictly increasing index tuple."""
        for combination in pm.Combinations(range(6), 3):
            assert all(a < b for a, b in itertools.pairwise(combination))

    def test_no_duplicates(self) -> None:
        """Test that every index set is emitted exactly once."""
        result = list(pm.Combinations(range(7), 4))
        assert len(set(result)) == len(result) == 35

    def test_k_larger_than_source(self) -> None:
        """Test that k > L is an ordinary empty result."""
        assert pm.Iter([1, 2]).combinations(3).collect().length() == 0

    def test_zero_k(self) -> None:
        """Test that k == 0 yields one empty tuple, even for an empty source."""
        assert list(pm.Combinations([1, 2], 0)) == [()]
        assert list(pm.Combinations([], 0)) == [()]

    def test_negative_k(self) -> None:
        """Test that a negative k is rejected."""
        with pytest.raises(ValueError, match="k must be non-negative"):
            pm.Iter([1]).combinations(-1)

    def test_encounter_order(self) -> None:
        """Test that items are taken in source order, not sorted."""
        assert list(pm.Combinations("cab", 2)) == [("c", "a"), ("c", "b"), ("a", "b")]

    def test_equal_items_are_distinct(self) -> None:
        """Test that positions are combined, not values."""
        assert list(pm.Combinations([1, 1, 1], 2)) == [(1, 1), (1, 1), (1, 1)]

    def test_lazy_until_first_next(self) -> None:
        """Test that the source is drained on the first call only."""
        source = PullCounter(range(3))
        combinations = pm.Combinations(source, 2)
        assert source.pulled == 0
        next(combinations)
        assert source.pulled == 3

    def test_fused(self) -> None:
        """Test that exhaustion is final."""
        combinations = pm.Combinations([1, 2], 2)
        assert list(combinations) == [(1, 2)]
        assert list(combinations) == []

    def test_length_hint(self) -> None:
        """Test the remaining combinations are announced once materialized."""
        combinations = pm.Combinations(range(5), 2)
        assert combinations.__length_hint__() == 0
        next(combinations)
        assert combinations.__length_hint__() == 9

    def test_buffer_released(self, counter: DropCounter) -> None:
        """Test that the buffer is dropped once the last combination is consumed."""
        combinations = pm.Combinations(counter.make(range(4)), 3)
        assert len(list(combinations)) == 4
        assert list(combinations) == []
        assert counter.dropped == 4

    def test_upstream_error(self) -> None:
        """Test that an error while draining the source propagates unchanged."""
        with pytest.raises(Boom):
            next(pm.Combinations(failing_source([1, 2]), 1))


class TestCombinationsWithReps:
    """Test k-combinations with repetition."""

    def test_pairs(self) -> None:
        """Test the pairs of two items."""
        result = pm.Iter([1, 2]).combinations_with_reps(2).collect()
        assert result.inner() == ((1, 1), (1, 2), (2, 2))

    @pytest.mark.parametrize("k", SIZES)
    @pytest.mark.parametrize("length", LENGTHS)
    def test_matches_itertools(self, k: int, length: int) -> None:
        """Test that C(L + k - 1, k) multisets are emitted in lexicographic order."""
        result = list(pm.CombinationsWithReps(range(length), k))
        expected = list(itertools.combinations_with_replacement(range(length), k))
        assert result == expected
        if length:
            assert len(result) == math.comb(length + k - 1, k)

    def test_non_decreasing(self) -> None:
        """Test that every combination has non-decreasing indices."""
        for combination in pm.CombinationsWithReps(range(4), 3):
            assert all(a <= b for a, b in itertools.pairwise(combination))

    def test_zero_k(self) -> None:
        """Test that k == 0 yields one empty tuple, even for an empty source."""
        assert list(pm.CombinationsWithReps("ab", 0)) == [()]
        assert list(pm.CombinationsWithReps([], 0)) == [()]

    def test_empty_source(self) -> None:
        """Test that an empty source yields nothing for k > 0."""
        assert list(pm.CombinationsWithReps([], 2)) == []

    def test_single_item(self) -> None:
        """Test that a single item is repeated k times."""
        assert list(pm.CombinationsWithReps("x", 3)) == [("x", "x", "x")]

    def test_negative_k(self) -> None:
        """Test that a negative k is rejected."""
        with pytest.raises(ValueError, match="k must be non-negative"):
            pm.CombinationsWithReps([1], -3)

    def test_length_hint(self) -> None:
        """Test the remaining combinations are announced once materialized."""
        combinations = pm.CombinationsWithReps("abc", 2)
        next(combinations)
        assert combinations.__length_hint__() == 5

    def test_length_hint_clamped(self) -> None:
        """Test that an overflowing count is clamped instead of raising."""
        combinations = pm.CombinationsWithReps(range(200), 60)
        next(combinations)
        assert 0 < combinations.__length_hint__() <= 2**63

    def test_fused(self) -> None:
        """Test that the adaptor never pulls again once exhausted."""
        source = PullCounter([1, 2])
        combinations = pm.CombinationsWithReps(source, 2)
        assert list(combinations) == [(1, 1), (1, 2), (2, 2)]
        pulled = source.pulled
        assert list(combinations) == []
        assert source.pulled == pulled

    def test_upstream_error(self) -> None:
        """Test that an error while draining the source propagates unchanged."""
        with pytest.raises(Boom, match="upstream failure"):
            next(pm.CombinationsWithReps(failing_source([1, 2]), 2))

    def test_buffer_released(self, counter: DropCounter) -> None:
        """Test that the buffer is dropped once the last combination is consumed."""
        combinations = pm.CombinationsWithReps(counter.make(range(3)), 2)
        assert len(list(combinations)) == 6
        assert list(combinations) == []
        assert counter.dropped == 3


class TestPowerSet:
    """Test the power set adaptor."""

    def test_three_items(self) -> None:
        """Test subsets by increasing size."""
        result = pm.Iter([1, 2, 3]).power_set().collect()
        assert result.inner() == (
            (),
            (1,),
            (2,),
            (3,),
            (1, 2),
            (1, 3),
            (2, 3),
            (1, 2, 3),
        )

    @pytest.mark.parametrize("length", LENGTHS)
    def test_count_and_order(self, length: int) -> None:
        """Test that 2**L subsets are emitted with non-decreasing sizes."""
        subsets = list(pm.PowerSet(range(length)))
        assert len(subsets) == 2**length
        assert len(set(subsets)) == 2**length
        assert all(len(a) <= len(b) for a, b in itertools.pairwise(subsets))

    def test_empty_source(self) -> None:
        """Test that the empty set has one subset."""
        assert list(pm.PowerSet([])) == [()]

    def test_length_hint(self) -> None:
        """Test the remaining subsets are announced once materialized."""
        subsets = pm.PowerSet("abcd")
        next(subsets)
        assert subsets.__length_hint__() == 15

    def test_fused(self) -> None:
        """Test that exhaustion is final."""
        subsets = pm.PowerSet([1])
        assert list(subsets) == [(), (1,)]
        assert list(subsets) == []

    def test_upstream_error(self) -> None:
        """Test that an error while draining the source propagates unchanged."""
        with pytest.raises(Boom, match="upstream failure"):
            next(pm.PowerSet(failing_source("ab")))

    def test_buffer_released(self, counter: DropCounter) -> None:
        """Test that the buffer is dropped once the last subset is consumed."""
        subsets = pm.PowerSet(counter.make(range(3)))
        assert len(list(subsets)) == 8
        assert counter.dropped == 3

    def test_materializes_once(self, debug_logs: pytest.LogCaptureFixture) -> None:
        """Test that one materialization and one end record are logged per power set."""
        assert len(list(pm.PowerSet("abc"))) == 8
        messages = [record.getMessage() for record in debug_logs.records]
        assert len(messages) == 2
        assert messages[0] == "PowerSet materialized 3 items"
        assert messages[1].endswith("emitted its last subset")
