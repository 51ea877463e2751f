from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate, Self

import cytoolz as cz

from ._core import CommonBase, get_config

if TYPE_CHECKING:
    from ._lazy import Iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class CommonMethods[T](CommonBase[Iterable[T]]):
    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def eq(self, other: Self) -> bool:
        """Check if two Iterables are equal based on their data.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Args:
            other (Self): Another instance of `Iter[T]|Seq[T]` to compare against.

        Returns:
            bool: True if the underlying data are equal, False otherwise.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 2, 3]).array_windows(2).eq(pm.Iter([(1, 2), (2, 3)]))
        True
        >>> pm.Seq((1, 2, 3)).eq(pm.Seq((1, 2)))
        False

        ```
        """
        return tuple(self._inner) == tuple(other._inner)

    def ne(self, other: Self) -> bool:
        """Check if two Iterables are not equal based on their data.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Args:
            other (Self): Another instance of `Iter[T]|Seq[T]` to compare against.

        Returns:
            bool: True if the underlying data are not equal, False otherwise.
        """
        return tuple(self._inner) != tuple(other._inner)
