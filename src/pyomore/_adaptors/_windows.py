from __future__ import annotations

import logging
import operator
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Never

from .._array import materialize, next_array
from ._common import check_size

logger = logging.getLogger(__name__)

_MISSING = object()


class ArrayWindows[T](Iterator[tuple[T, ...]]):
    """An iterator over all contiguous windows of **size** elements of the source.

    The last **size** items are kept in a ring buffer, and every window is a fresh tuple copied out of it.

    A source shorter than **size**, or a **size** of 0, yields nothing.

    `reversed()` yields the windows not yet emitted, last one first. Over a `Sequence` this is done by index; any other source is collected first.

    See `Iter.array_windows()` for details.

    Args:
        data (Iterable[T]): The source.
        size (int): Length of each window.
    """

    __slots__ = ("_emitted", "_exhausted", "_iter", "_ring", "_size", "_source")

    def __init__(self, data: Iterable[T], size: int) -> None:
        self._iter = iter(data)
        self._size = check_size("size", size)
        self._ring: deque[T] | None = None
        self._exhausted = size == 0
        self._source: Sequence[T] | None = data if isinstance(data, Sequence) else None
        self._emitted = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, exhausted={self._exhausted})"

    def __next__(self) -> tuple[T, ...]:
        if self._exhausted:
            raise StopIteration
        if self._ring is None:
            first = next_array(self._iter, self._size)
            if first.is_none():
                self._finish()
            window = first.unwrap()
            self._ring = deque(window, maxlen=self._size)
        else:
            item = next(self._iter, _MISSING)
            if item is _MISSING:
                self._finish()
            self._ring.append(item)  # pyright: ignore[reportArgumentType]
            window = tuple(self._ring)
        self._emitted += 1
        return window

    def __length_hint__(self) -> int:
        if self._exhausted:
            return 0
        remaining = operator.length_hint(self._iter)
        if self._ring is None:
            return max(0, remaining - self._size + 1)
        return remaining

    def __reversed__(self) -> Iterator[tuple[T, ...]]:
        if self._exhausted:
            return iter(())
        if self._source is None:
            return reversed(tuple(self))
        return RevArrayWindows(self._source, self._size, self._emitted)

    def _finish(self) -> Never:
        logger.debug("%r reached the end of its source", self)
        self._exhausted = True
        self._ring = None
        self._source = None
        raise StopIteration


class RevArrayWindows[T](Iterator[tuple[T, ...]]):
    """The windows of `ArrayWindows` over a `Sequence`, last one first.

    Only windows starting at index **start** or later are emitted. Each window keeps its items in source order.

    Args:
        data (Sequence[T]): The source.
        size (int): Length of each window.
        start (int): Index of the first window to emit. Defaults to 0.

    Example:
    ```python
    >>> import pyomore as pm
    >>> list(pm.RevArrayWindows([10, 8, 6, 4], 2))
    [(6, 4), (8, 6), (10, 8)]
    >>> windows = pm.ArrayWindows("abcd", 3)
    >>> next(windows)
    ('a', 'b', 'c')
    >>> list(reversed(windows))
    [('b', 'c', 'd')]

    ```
    """

    __slots__ = ("_data", "_pos", "_size", "_start")

    def __init__(self, data: Sequence[T], size: int, start: int = 0) -> None:
        self._data = data
        self._size = check_size("size", size)
        self._start = start
        self._pos = len(data) - size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, pos={self._pos})"

    def __next__(self) -> tuple[T, ...]:
        if self._size == 0 or self._pos < self._start:
            if self._data:
                logger.debug("%r reached the start of its source", self)
                self._data = ()
            raise StopIteration
        pos = self._pos
        self._pos -= 1
        return tuple(self._data[pos : pos + self._size])

    def __length_hint__(self) -> int:
        if self._size == 0:
            return 0
        return max(0, self._pos - self._start + 1)


class CircularArrayWindows[T](Iterator[tuple[T, ...]]):
    """An iterator over all contiguous windows of **size** elements, wrapping back to the first elements past the end.

    The source is drained into a buffer on the first call to `next()`.

    A source of length L yields exactly L windows, window i holding the items at indices (i + j) mod L for j in [0, size).

    See `Iter.circular_array_windows()` for details.

    Args:
        data (Iterable[T]): The source.
        size (int): Length of each window.
    """

    __slots__ = ("_buffer", "_iter", "_pos", "_size")

    def __init__(self, data: Iterable[T], size: int) -> None:
        self._iter = iter(data)
        self._size = check_size("size", size)
        self._buffer: tuple[T, ...] | None = () if size == 0 else None
        self._pos = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, pos={self._pos})"

    def __next__(self) -> tuple[T, ...]:
        if self._buffer is None:
            self._buffer = materialize(self._iter, self.__class__.__name__)
        buffer = self._buffer
        length = len(buffer)
        if self._pos >= length:
            self._buffer = ()
            self._pos = 0
            raise StopIteration
        start = self._pos
        self._pos += 1
        return tuple(buffer[(start + offset) % length] for offset in range(self._size))

    def __length_hint__(self) -> int:
        if self._buffer is None:
            return operator.length_hint(self._iter)
        return len(self._buffer) - self._pos
