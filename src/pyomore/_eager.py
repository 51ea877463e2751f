from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, overload

from ._adaptors import RevArrayChunks, RevArrayWindows
from ._iter import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._lazy import Iter


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    The underlying data structure is an immutable tuple, and is the return type of `Iter.collect()`.

    If you already have a tuple, simply pass it to the constructor, without runtime checks.

    Args:
        data (tuple[T, ...]): The data to initialize the Seq with.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data  # pyright: ignore[reportIncompatibleVariableOverride]

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Examples:
        ```python
        >>> import pyomore as pm
        >>> pm.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> pm.Seq.from_(range(3))
        Seq(0, 1, 2)

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))

    def iter(self) -> Iter[T]:
        """Get an iterator over the sequence.

        Call this to switch to lazy evaluation, and reach the adaptors.

        Returns:
            Iter[T]: An `Iter` over the elements of the sequence.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Seq((1, 2, 3)).iter().circular_array_windows(2).collect()
        Seq((1, 2), (2, 3), (3, 1))

        ```
        """
        from ._lazy import Iter

        return Iter(self._inner)

    def rev_array_chunks(self, n: int) -> Iter[tuple[T, ...]]:
        """Return the chunks of `Iter.array_chunks()`, last one first.

        The chunk boundaries are the same as in forward iteration, so the trailing **n** - 1 or fewer elements are the ones dropped.

        Chunks are read by index, without copying the sequence.

        Args:
            n (int): Number of elements in each chunk.

        Returns:
            Iter[tuple[T, ...]]: An iterator of tuples of exactly **n** elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Seq(tuple(range(7))).rev_array_chunks(3).collect()
        Seq((3, 4, 5), (0, 1, 2))

        ```
        """
        from ._lazy import Iter

        return Iter(RevArrayChunks(self._inner, n))

    def rev_array_windows(self, n: int) -> Iter[tuple[T, ...]]:
        """Return the windows of `Iter.array_windows()`, last one first.

        Windows are read by index, without copying the sequence.

        Args:
            n (int): Length of each window.

        Returns:
            Iter[tuple[T, ...]]: An iterator of tuples of exactly **n** elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Seq((10, 8, 6, 4)).rev_array_windows(2).collect()
        Seq((6, 4), (8, 6), (10, 8))

        ```
        """
        from ._lazy import Iter

        return Iter(RevArrayWindows(self._inner, n))

    def length(self) -> int:
        """Return the length of the sequence.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter(range(7)).array_chunks(3).collect().length()
        2

        ```
        """
        return len(self._inner)

    def first(self) -> T:
        """Return the first element.

        Raises:
            IndexError: If the sequence is empty.
        """
        return self._inner[0]

    def last(self) -> T:
        """Return the last element.

        Raises:
            IndexError: If the sequence is empty.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter("abcd").combinations(2).collect().last()
        ('c', 'd')

        ```
        """
        return self._inner[-1]
