"""Tests for array_windows and circular_array_windows."""

import pytest

import pyomore as pm
from tests._helpers import Boom, DropCounter, PullCounter, failing_source, values


class TestArrayWindows:
    """Test overlapping windows."""

    def test_pairs(self) -> None:
        """Test consecutive pairs."""
        result = pm.Iter([10, 8, 6, 4]).array_windows(2).collect()
        assert result.inner() == ((10, 8), (8, 6), (6, 4))

    @pytest.mark.parametrize("n", [1, 2, 3, 6])
    @pytest.mark.parametrize("length", [0, 1, 2, 5, 8])
    def test_window_count(self, n: int, length: int) -> None:
        """Test that max(0, L - n + 1) windows of consecutive items are emitted."""
        source = list(range(length))
        windows = list(pm.ArrayWindows(source, n))
        assert len(windows) == max(0, length - n + 1)
        for idx, window in enumerate(windows):
            assert window == tuple(source[idx : idx + n])

    def test_shorter_source(self) -> None:
        """Test that a source shorter than the window yields nothing."""
        assert pm.Iter("ab").array_windows(3).collect().length() == 0

    def test_zero_size(self) -> None:
        """Test that a window size of 0 yields nothing and pulls nothing."""
        source = PullCounter([1, 2])
        assert list(pm.ArrayWindows(source, 0)) == []
        assert source.pulled == 0

    def test_negative_size(self) -> None:
        """Test that a negative window size is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            pm.ArrayWindows([1], -1)

    def test_windows_are_independent(self) -> None:
        """Test that every window is a distinct tuple."""
        first, second = pm.ArrayWindows([[1], [2], [3]], 2)
        assert first == ([1], [2])
        assert second == ([2], [3])
        assert first[1] is second[0]

    def test_lazy(self) -> None:
        """Test that each window after the first pulls one item."""
        source = PullCounter(range(100))
        windows = pm.ArrayWindows(source, 3)
        next(windows)
        assert source.pulled == 3
        next(windows)
        assert source.pulled == 4

    def test_fused(self) -> None:
        """Test that the adaptor never pulls again once exhausted."""
        source = PullCounter([1, 2])
        windows = pm.ArrayWindows(source, 2)
        assert list(windows) == [(1, 2)]
        pulled = source.pulled
        assert list(windows) == []
        assert source.pulled == pulled

    def test_length_hint(self) -> None:
        """Test the number of windows announced from a sized source."""
        windows = pm.ArrayWindows(range(6), 4)
        assert windows.__length_hint__() == 3
        next(windows)
        assert windows.__length_hint__() == 2
        assert pm.ArrayWindows(range(2), 4).__length_hint__() == 0

    def test_items_released(self, counter: DropCounter) -> None:
        """Test that items live only as long as the windows holding them."""
        windows = list(pm.ArrayWindows(counter.make(range(5)), 3))
        assert values(windows) == [(0, 1, 2), (1, 2, 3), (2, 3, 4)]
        assert counter.dropped == 0
        del windows
        assert counter.dropped == 5

    def test_short_source_released(self, counter: DropCounter) -> None:
        """Test that a source shorter than the window is destroyed."""
        assert list(pm.ArrayWindows(counter.make(range(2)), 3)) == []
        assert counter.dropped == 2

    def test_upstream_error(self) -> None:
        """Test that an upstream exception propagates unchanged."""
        windows = pm.ArrayWindows(failing_source([1, 2]), 2)
        assert next(windows) == (1, 2)
        with pytest.raises(Boom):
            next(windows)


class TestCircularArrayWindows:
    """Test wrapping windows."""

    def test_wraps(self) -> None:
        """Test that the last window wraps to the first item."""
        result = pm.Seq((1, 2, 3)).iter().circular_array_windows(2).collect()
        assert result.inner() == ((1, 2), (2, 3), (3, 1))

    @pytest.mark.parametrize("n", [1, 2, 4, 7])
    @pytest.mark.parametrize("length", [0, 1, 3, 5])
    def test_window_count(self, n: int, length: int) -> None:
        """Test that L windows of indices (i + j) mod L are emitted."""
        source = list(range(length))
        windows = list(pm.CircularArrayWindows(source, n))
        assert len(windows) == length
        for idx, window in enumerate(windows):
            assert window == tuple(source[(idx + j) % length] for j in range(n))

    def test_window_longer_than_source(self) -> None:
        """Test that items repeat when the window is longer than the source."""
        assert list(pm.CircularArrayWindows([1, 2], 5)) == [
            (1, 2, 1, 2, 1),
            (2, 1, 2, 1, 2),
        ]

    def test_zero_size(self) -> None:
        """Test that a window size of 0 yields nothing and never drains the source."""
        source = PullCounter([1, 2])
        assert list(pm.CircularArrayWindows(source, 0)) == []
        assert source.pulled == 0

    def test_drains_on_first_next(self) -> None:
        """Test that the source is materialized on the first call only."""
        source = PullCounter(range(4))
        windows = pm.CircularArrayWindows(source, 2)
        assert source.pulled == 0
        next(windows)
        assert source.pulled == 4

    def test_length_hint(self) -> None:
        """Test the remaining windows are announced."""
        windows = pm.CircularArrayWindows(range(4), 2)
        assert windows.__length_hint__() == 4
        next(windows)
        assert windows.__length_hint__() == 3

    def test_buffer_released(self, counter: DropCounter) -> None:
        """Test that the buffer is dropped once the adaptor is exhausted."""
        windows = pm.CircularArrayWindows(counter.make(range(3)), 2)
        assert len(list(windows)) == 3
        assert counter.dropped == 3
        assert list(windows) == []

    def test_negative_size(self) -> None:
        """Test that a negative window size is rejected."""
        with pytest.raises(ValueError, match="size must be non-negative"):
            pm.Iter([1]).circular_array_windows(-2)

    def test_fused(self) -> None:
        """Test that the adaptor never pulls again once exhausted."""
        source = PullCounter([1, 2])
        windows = pm.CircularArrayWindows(source, 2)
        assert list(windows) == [(1, 2), (2, 1)]
        pulled = source.pulled
        assert list(windows) == []
        assert list(windows) == []
        assert source.pulled == pulled

    def test_upstream_error(self) -> None:
        """Test that an error while draining the source propagates unchanged."""
        windows = pm.CircularArrayWindows(failing_source([1, 2]), 2)
        with pytest.raises(Boom, match="upstream failure"):
            next(windows)


class TestReversedWindows:
    """Test reverse iteration over windows."""

    def test_pairs(self) -> None:
        """Test consecutive pairs, last one first."""
        result = pm.Seq((10, 8, 6, 4)).rev_array_windows(2).collect()
        assert result.inner() == ((6, 4), (8, 6), (10, 8))

    @pytest.mark.parametrize("n", [1, 2, 3, 6])
    @pytest.mark.parametrize("length", [0, 1, 2, 5])
    def test_matches_forward(self, n: int, length: int) -> None:
        """Test reversed output against reversed forward output."""
        forward = list(pm.ArrayWindows(range(length), n))
        assert list(reversed(pm.ArrayWindows(range(length), n))) == forward[::-1]
        assert list(pm.RevArrayWindows(range(length), n)) == forward[::-1]

    def test_after_partial_forward(self) -> None:
        """Test that only the windows not yet emitted are reversed."""
        windows = pm.ArrayWindows([1, 2, 3, 4], 2)
        assert next(windows) == (1, 2)
        assert list(reversed(windows)) == [(3, 4), (2, 3)]

    def test_iterator_source_is_collected(self) -> None:
        """Test that a source without a length is collected before reversing."""
        result = pm.Iter([1, 2, 3]).array_windows(2).rev().collect()
        assert result.inner() == ((2, 3), (1, 2))

    def test_zero_size(self) -> None:
        """Test that a window size of 0 yields nothing."""
        assert list(pm.RevArrayWindows([1, 2], 0)) == []
        assert list(reversed(pm.ArrayWindows([1, 2], 0))) == []

    def test_length_hint(self) -> None:
        """Test the remaining reversed windows are announced."""
        windows = pm.RevArrayWindows(range(6), 4)
        assert windows.__length_hint__() == 3
        next(windows)
        assert windows.__length_hint__() == 2
        assert pm.RevArrayWindows(range(2), 4).__length_hint__() == 0

    def test_fused(self) -> None:
        """Test that exhaustion is final."""
        windows = pm.RevArrayWindows("ab", 2)
        assert list(windows) == [("a", "b")]
        assert list(windows) == []
