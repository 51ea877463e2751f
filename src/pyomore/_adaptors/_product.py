from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from typing import Any, Never

from .._array import materialize
from .._results import NONE, Option, Some
from ._common import clamp_hint

logger = logging.getLogger(__name__)

_MISSING = object()


class CartesianProduct[T, U](Iterator[tuple[T, U]]):
    """An iterator over the cartesian product of two sources.

    The outer source is pulled lazily, one item per full pass over the inner source.

    The inner source is drained into a buffer on the first call to `next()`, so that it can be replayed for every outer item.

    If either side is empty, nothing is yielded; an empty inner side means the outer one is never pulled.

    See `Iter.cartesian_product()` for details.

    Args:
        data (Iterable[T]): The outer source.
        other (Iterable[U]): The inner source.
    """

    __slots__ = ("_current", "_exhausted", "_idx", "_inner", "_other", "_outer")

    def __init__(self, data: Iterable[T], other: Iterable[U]) -> None:
        self._outer = iter(data)
        self._other = iter(other)
        self._inner: tuple[U, ...] | None = None
        self._current: Option[T] = NONE
        self._idx = 0
        self._exhausted = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(current={self._current!r}, idx={self._idx})"

    def __next__(self) -> tuple[T, U]:
        if self._exhausted:
            raise StopIteration
        if self._inner is None:
            self._inner = materialize(self._other, self.__class__.__name__)
            if not self._inner:
                self._finish()
        if self._current.is_none() or self._idx == len(self._inner):
            item = next(self._outer, _MISSING)
            if item is _MISSING:
                self._finish()
            self._current = Some(item)  # pyright: ignore[reportAttributeAccessIssue]
            self._idx = 0
        pair = (self._current.unwrap(), self._inner[self._idx])
        self._idx += 1
        return pair

    def __length_hint__(self) -> int:
        if self._exhausted:
            return 0
        if self._inner is None:
            return clamp_hint(
                operator.length_hint(self._outer) * operator.length_hint(self._other)
            )
        width = len(self._inner)
        pending = width - self._idx if self._current.is_some() else 0
        return clamp_hint(pending + operator.length_hint(self._outer) * width)

    def _finish(self) -> Never:
        logger.debug("%r reached the end of its source", self)
        self._exhausted = True
        self._inner = ()
        self._current = NONE
        raise StopIteration


def flatten_tuple(nested: tuple[Any, ...]) -> tuple[Any, ...]:
    """Flatten a tuple whose first element is itself a tuple, one level deep.

    This is the shape produced by chaining `cartesian_product()` calls.

    Raises:
        TypeError: If the first element is not a tuple.

    Example:
    ```python
    >>> import pyomore as pm
    >>> pm.flatten_tuple(((1, "a"), True))
    (1, 'a', True)
    >>> pm.flatten_tuple(((1, "a"), True, None))
    (1, 'a', True, None)
    >>> pm.flatten_tuple(("ab", 1))
    Traceback (most recent call last):
        ...
    TypeError: expected a tuple as first element, got str

    ```
    """
    head, *rest = nested
    if not isinstance(head, tuple):
        msg = f"expected a tuple as first element, got {type(head).__name__}"
        raise TypeError(msg)
    return (*head, *rest)
