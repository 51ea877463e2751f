from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator, Sequence

from .._array import next_array
from ._common import check_size

logger = logging.getLogger(__name__)


class ArrayChunks[T](Iterator[tuple[T, ...]]):
    """An iterator over **size** elements of the source at a time.

    The chunks do not overlap. If **size** does not divide the length of the source, the last up to **size** - 1 elements are dropped.

    A **size** of 0 yields nothing.

    `reversed()` yields the chunks not yet emitted, last one first, with the same boundaries. Over a `Sequence` this is done by index; any other source is collected first.

    See `Iter.array_chunks()` for details.

    Args:
        data (Iterable[T]): The source.
        size (int): Length of each chunk.
    """

    __slots__ = ("_exhausted", "_iter", "_offset", "_size", "_source")

    def __init__(self, data: Iterable[T], size: int) -> None:
        self._iter = iter(data)
        self._size = check_size("size", size)
        self._exhausted = size == 0
        self._source: Sequence[T] | None = data if isinstance(data, Sequence) else None
        self._offset = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, exhausted={self._exhausted})"

    def __next__(self) -> tuple[T, ...]:
        if self._exhausted:
            raise StopIteration
        chunk = next_array(self._iter, self._size)
        if chunk.is_none():
            logger.debug("%r reached the end of its source", self)
            self._exhausted = True
            self._source = None
            raise StopIteration
        self._offset += self._size
        return chunk.unwrap()

    def __length_hint__(self) -> int:
        if self._exhausted:
            return 0
        return operator.length_hint(self._iter) // self._size

    def __reversed__(self) -> Iterator[tuple[T, ...]]:
        if self._exhausted:
            return iter(())
        if self._source is None:
            return reversed(tuple(self))
        return RevArrayChunks(self._source, self._size, self._offset)


class RevArrayChunks[T](Iterator[tuple[T, ...]]):
    """The chunks of `ArrayChunks` over a `Sequence`, last one first.

    Chunk boundaries are counted from **start**, so the trailing remainder is the part that gets dropped, exactly as in forward iteration.

    Each chunk keeps its items in source order.

    Args:
        data (Sequence[T]): The source.
        size (int): Length of each chunk.
        start (int): Index of the first item to chunk. Defaults to 0.

    Example:
    ```python
    >>> import pyomore as pm
    >>> list(pm.RevArrayChunks(range(7), 3))
    [(3, 4, 5), (0, 1, 2)]
    >>> list(reversed(pm.ArrayChunks("abcde", 2)))
    [('c', 'd'), ('a', 'b')]

    ```
    """

    __slots__ = ("_data", "_end", "_size", "_start")

    def __init__(self, data: Sequence[T], size: int, start: int = 0) -> None:
        self._data = data
        self._size = check_size("size", size)
        self._start = start
        if size == 0:
            self._end = start
        else:
            self._end = start + (len(data) - start) // size * size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, end={self._end})"

    def __next__(self) -> tuple[T, ...]:
        if self._size == 0 or self._end - self._start < self._size:
            if self._data:
                logger.debug("%r reached the start of its source", self)
                self._data = ()
            raise StopIteration
        self._end -= self._size
        return tuple(self._data[self._end : self._end + self._size])

    def __length_hint__(self) -> int:
        if self._size == 0:
            return 0
        return max(0, self._end - self._start) // self._size
