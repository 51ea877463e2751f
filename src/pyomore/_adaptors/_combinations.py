"""Combinatorial adaptors over a materialized source.

Each adaptor drains its source into a tuple on the first call to `next()`, then walks a list of indices into that tuple.

The indices are advanced like an odometer: the rightmost position that can still move is incremented and every position to its right is reset.
"""

from __future__ import annotations

import logging
import math
import sys
from abc import abstractmethod
from collections.abc import Iterable, Iterator

from .._array import materialize
from ._common import check_size, clamp_hint

logger = logging.getLogger(__name__)


def _next_combination(state: list[int], length: int) -> bool:
    """Move **state** to the next strictly increasing index tuple, returning `False` past the last one."""
    k = len(state)
    for pos in reversed(range(k)):
        if state[pos] < length - (k - pos):
            state[pos] += 1
            for nxt in range(pos + 1, k):
                state[nxt] = state[nxt - 1] + 1
            return True
    return False


class _IndexCombinations[T](Iterator[tuple[T, ...]]):
    __slots__ = ("_buffer", "_emitted", "_iter", "_k", "_state")

    def __init__(self, data: Iterable[T], k: int) -> None:
        self._iter = iter(data)
        self._k = check_size("k", k)
        self._buffer: tuple[T, ...] | None = None
        self._state: list[int] | None = None
        self._emitted = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(k={self._k}, state={self._state})"

    @abstractmethod
    def _start(self, length: int) -> list[int] | None:
        """Return the first index state, or `None` if there is no combination at all."""
        ...

    @abstractmethod
    def _advance(self, state: list[int], length: int) -> bool:
        """Move **state** to the next combination in place, returning `False` past the last one."""
        ...

    @abstractmethod
    def _total(self, length: int) -> int: ...

    def __next__(self) -> tuple[T, ...]:
        if self._buffer is None:
            self._buffer = materialize(self._iter, self.__class__.__name__)
            self._state = self._start(len(self._buffer))
        state = self._state
        if state is None:
            self._buffer = ()
            raise StopIteration
        buffer = self._buffer
        combination = tuple(buffer[idx] for idx in state)
        if not self._advance(state, len(buffer)):
            logger.debug("%r emitted its last combination", self)
            self._state = None
        self._emitted += 1
        return combination

    def __length_hint__(self) -> int:
        if self._buffer is None or self._state is None:
            return 0
        return clamp_hint(self._total(len(self._buffer)) - self._emitted)


class Combinations[T](_IndexCombinations[T]):
    """An iterator over the **k** length combinations of the elements of the source.

    Combinations are emitted in lexicographic order of their indices, so in the encounter order of the source.

    A source of length L yields exactly C(L, k) tuples: none if **k** > L, and a single empty tuple if **k** is 0.

    See `Iter.combinations()` for details.

    Args:
        data (Iterable[T]): The source.
        k (int): Length of each combination.
    """

    __slots__ = ()

    def _start(self, length: int) -> list[int] | None:
        if self._k > length:
            return None
        return list(range(self._k))

    def _advance(self, state: list[int], length: int) -> bool:
        return _next_combination(state, length)

    def _total(self, length: int) -> int:
        return math.comb(length, self._k)


class CombinationsWithReps[T](_IndexCombinations[T]):
    """An iterator over the **k** length combinations with repetitions of the elements of the source.

    Each element may be picked several times; the indices of a combination never decrease.

    A source of length L yields exactly C(L + k - 1, k) tuples, and a single empty tuple if **k** is 0.

    See `Iter.combinations_with_reps()` for details.

    Args:
        data (Iterable[T]): The source.
        k (int): Length of each combination.
    """

    __slots__ = ()

    def _start(self, length: int) -> list[int] | None:
        if length == 0 and self._k > 0:
            return None
        return [0] * self._k

    def _advance(self, state: list[int], length: int) -> bool:
        for pos in reversed(range(len(state))):
            if state[pos] < length - 1:
                state[pos] += 1
                for nxt in range(pos + 1, len(state)):
                    state[nxt] = state[pos]
                return True
        return False

    def _total(self, length: int) -> int:
        if self._k == 0:
            return 1
        return math.comb(length + self._k - 1, self._k)


class PowerSet[T](Iterator[tuple[T, ...]]):
    """An iterator over every subset of the elements of the source.

    Subsets come by increasing size, and in combination order within a size, so a source of length L yields 2**L tuples.

    See `Iter.power_set()` for details.

    Args:
        data (Iterable[T]): The source.
    """

    __slots__ = ("_buffer", "_emitted", "_iter", "_state")

    def __init__(self, data: Iterable[T]) -> None:
        self._iter = iter(data)
        self._buffer: tuple[T, ...] | None = None
        self._state: list[int] | None = None
        self._emitted = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state}, emitted={self._emitted})"

    def __next__(self) -> tuple[T, ...]:
        if self._buffer is None:
            self._buffer = materialize(self._iter, self.__class__.__name__)
            self._state = []
        state = self._state
        if state is None:
            self._buffer = ()
            raise StopIteration
        buffer = self._buffer
        subset = tuple(buffer[idx] for idx in state)
        if not _next_combination(state, len(buffer)):
            size = len(state) + 1
            if size <= len(buffer):
                self._state = list(range(size))
            else:
                logger.debug("%r emitted its last subset", self)
                self._state = None
        self._emitted += 1
        return subset

    def __length_hint__(self) -> int:
        if self._buffer is None or self._state is None:
            return 0
        length = len(self._buffer)
        if length >= sys.maxsize.bit_length():
            return sys.maxsize
        return 2**length - self._emitted
