"""Fixed-size arrays built one pulled item at a time.

`SlotArray` is the only place where partially built state is tracked by hand.

Every adaptor that needs exactly N items goes through `next_array`, which either hands over a complete array or releases what it pulled.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator
from types import TracebackType
from typing import Self

import more_itertools as mit

from ._results import NONE, Err, Ok, Option, Result, Some

logger = logging.getLogger(__name__)

_MISSING = object()


class ArrayCapacityError(RuntimeError):
    """Raised when a `SlotArray` is pushed past its capacity, or converted before being full."""


class ArrayLengthError(ValueError):
    """The source of `collect_array` did not hold exactly the requested number of items."""


class SlotArray[T]:
    """Fixed-capacity storage, filled front to back.

    Each slot holds either `NONE` (empty) or `Some(item)`.

    The first `len()` slots are always filled and the remaining ones always empty.

    Leaving a `with` block releases whatever the array still owns, exactly once, including when the block raises.

    Args:
        capacity (int): Number of slots.

    Example:
    ```python
    >>> import pyomore as pm
    >>> with pm.SlotArray[str](2) as slots:
    ...     slots.push("a")
    ...     slots.is_full()
    False
    >>> slots
    SlotArray(len=0, capacity=2)
    >>> with pm.SlotArray[str](2) as slots:
    ...     slots.push("a")
    ...     slots.push("b")
    ...     array = slots.into_array()
    >>> array
    ('a', 'b')

    ```
    """

    __slots__ = ("_len", "_slots")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            msg = f"capacity must be non-negative, got {capacity}"
            raise ValueError(msg)
        self._slots: list[Option[T]] = [NONE] * capacity
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={self._len}, capacity={self.capacity})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.release()

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._len == len(self._slots)

    def push(self, item: T) -> None:
        """Store **item** in the first empty slot.

        Raises:
            ArrayCapacityError: If every slot is already filled.
        """
        if self.is_full():
            msg = f"cannot push into a full {self!r}"
            raise ArrayCapacityError(msg)
        self._slots[self._len] = Some(item)
        self._len += 1

    def into_array(self) -> tuple[T, ...]:
        """Move the items out as a tuple of exactly `capacity` elements.

        The array is left empty: the tuple is now the sole owner of the items.

        Raises:
            ArrayCapacityError: If some slots are still empty.
        """
        if not self.is_full():
            msg = f"cannot convert a partially filled {self!r}"
            raise ArrayCapacityError(msg)
        array = tuple(slot.unwrap() for slot in self._slots)
        self._slots = [NONE] * len(array)
        self._len = 0
        return array

    def release(self) -> int:
        """Drop the filled slots, in order, and return how many were dropped.

        The empty slots are never touched, and a second call releases nothing.
        """
        released = self._len
        for idx in range(released):
            self._slots[idx] = NONE
        self._len = 0
        return released


def next_array[T](iterator: Iterator[T], n: int) -> Option[tuple[T, ...]]:
    """Pull exactly **n** items from **iterator** into a tuple.

    At most **n** items are pulled, so the iterator can still be used afterwards to retrieve the remaining items.

    If the iterator runs out first, the items already pulled are released and `NONE` is returned.

    Args:
        iterator (Iterator[T]): The source. It is advanced in place.
        n (int): Length of the array.

    Returns:
        Option[tuple[T, ...]]: `Some` array of length **n**, or `NONE` if there were not enough items.

    Example:
    ```python
    >>> import pyomore as pm
    >>> it = iter("lorem")
    >>> pm.next_array(it, 2)
    Some(value=('l', 'o'))
    >>> pm.next_array(it, 3)
    Some(value=('r', 'e', 'm'))
    >>> pm.next_array(it, 4)
    NONE

    ```
    """
    with SlotArray[T](n) as slots:
        mit.consume(map(slots.push, itertools.islice(iterator, n)))
        if slots.is_full():
            return Some(slots.into_array())
    return NONE


def collect_array[T](
    iterable: Iterable[T], n: int
) -> Result[tuple[T, ...], ArrayLengthError]:
    """Collect an iterable holding exactly **n** items into a tuple.

    At most **n** + 1 items are pulled: one past the array is enough to tell that the source was too long.

    Args:
        iterable (Iterable[T]): The source.
        n (int): Expected number of items.

    Returns:
        Result[tuple[T, ...], ArrayLengthError]: `Ok` array, or `Err` describing the length mismatch.

    Example:
    ```python
    >>> import pyomore as pm
    >>> pm.collect_array("a,b,c".split(","), 3)
    Ok(value=('a', 'b', 'c'))
    >>> pm.collect_array([1, 2], 3)
    Err(error=ArrayLengthError('expected exactly 3 elements, but collected 2'))

    ```
    """
    iterator = iter(iterable)
    with SlotArray[T](n) as slots:
        mit.consume(map(slots.push, itertools.islice(iterator, n)))
        if not slots.is_full():
            msg = f"expected exactly {n} elements, but collected {len(slots)}"
            return Err(ArrayLengthError(msg))
        if next(iterator, _MISSING) is not _MISSING:
            msg = f"expected exactly {n} elements, but collected more"
            return Err(ArrayLengthError(msg))
        return Ok(slots.into_array())


def materialize[T](iterable: Iterable[T], owner: str) -> tuple[T, ...]:
    """Drain **iterable** into an owned, indexable buffer.

    `tuple()` already preallocates from the source's length hint when it has one.
    """
    buffer = tuple(iterable)
    logger.debug("%s materialized %d items", owner, len(buffer))
    return buffer
