from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, Iterator, Reversible
from typing import TYPE_CHECKING, Any, Concatenate, Literal, overload

import cytoolz as cz

from ._adaptors import (
    ArrayChunks,
    ArrayWindows,
    CartesianProduct,
    CircularArrayWindows,
    Combinations,
    CombinationsWithReps,
    PowerSet,
    flatten_tuple,
)
from ._array import ArrayLengthError, collect_array, next_array
from ._iter import CommonMethods, convert_data
from ._results import NONE, Option, Result, Some

if TYPE_CHECKING:
    from ._eager import Seq

_MISSING = object()


class Iter[T](CommonMethods[T], Iterator[T]):
    """A superset around Python's built-in `Iterator` Protocol, providing fixed-size array adaptors.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    Every adaptor is lazy: it pulls from its source only what it needs to produce the next output.

    Adaptors that need random access (combinations, circular windows, the inner side of a product) drain their source into a buffer on their first `next()` call, not before.

    Keep in mind that `Iter` instances are single-use; once exhausted, they cannot be reused or reset.

    If you need to reuse the data, consider collecting it into a `Seq` first with `.collect()`.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    def __length_hint__(self) -> int:
        return operator.length_hint(self._inner)

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Note:
            The actual `.__next__()` method is conform to the Python `Iterator` Protocol, and is what will be actually called if you iterate over the `Iter` instance.

            `Iter.next()` is a convenience method that wraps the result in an `Option` to handle exhaustion gracefully.

        Returns:
            Option[T]: The next element in the iterator. `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import pyomore as pm
        >>> it = pm.Iter([1, None])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE

        ```
        """
        item = next(self._inner, _MISSING)
        if item is _MISSING:
            return NONE
        return Some(item)  # pyright: ignore[reportReturnType]

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` to limit the number of items taken.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    def collect(self) -> Seq[T]:
        """Transforms an `Iter` into a `Seq`.

        The source's length hint is used to preallocate the underlying tuple.

        Returns:
            Seq[T]: A materialized collection containing the collected elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter(range(5)).collect()
        Seq(0, 1, 2, 3, 4)
        >>> iterator = pm.Iter([1, 2, 3])
        >>> iterator.collect()
        Seq(1, 2, 3)
        >>> # iterator is now exhausted
        >>> iterator.collect()
        Seq()

        ```
        """
        from ._eager import Seq

        return Seq(tuple(self._inner))

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element of the iterable.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 2, 3, 4]).array_chunks(2).map(sum).collect()
        Seq(3, 7)

        ```
        """
        return Iter(map(func, self._inner))

    def take(self, n: int) -> Iter[T]:
        """Creates an iterator that yields the first **n** elements, or fewer if the underlying iterator ends sooner.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator with the first **n** elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter.from_count().array_chunks(4).take(2).collect()
        Seq((0, 1, 2, 3), (4, 5, 6, 7))

        ```
        """
        return Iter(itertools.islice(self._inner, n))

    def count(self) -> int:
        """Consume the iterator, counting the number of elements.

        Returns:
            int: The number of elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter(range(6)).array_chunks(5).count()
        1
        >>> pm.Iter("abcde").combinations(2).count()
        10

        ```
        """
        return cz.itertoolz.count(self._inner)

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the Iterator by applying a function to each element in the iterable.

        Is a terminal operation, and is useful for functions that have side effects.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 1, 2, -2, 6, 0, 3, 1]).array_chunks(3).for_each(lambda c: print(sum(c)))
        4
        4

        ```
        """
        for v in self._inner:
            func(v, *args, **kwargs)

    def rev(self) -> Iter[T]:
        """Return a new Iterable wrapper with elements in reverse order.

        Iterators that know how to reverse themselves (`array_chunks` and `array_windows` over a `Sequence`, see `Seq.rev_array_chunks()`) are reversed lazily.

        Note:
            Otherwise this method must consume the entire iterable to perform the reversal.

        Returns:
            Iter[T]: A new Iterable wrapper with elements in reverse order.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 2, 3]).rev().collect()
        Seq(3, 2, 1)
        >>> pm.Iter(range(7)).array_chunks(3).rev().collect()
        Seq((3, 4, 5), (0, 1, 2))

        ```
        """
        if isinstance(self._inner, Reversible):
            return Iter(reversed(self._inner))
        return Iter(reversed(tuple(self._inner)))

    # fixed size arrays -----------------------------------------------------------------
    def next_array(self, n: int) -> Option[tuple[T, ...]]:
        """Advances the iterator and returns a tuple containing the next **n** values.

        If there are not enough elements to fill the array then `NONE` is returned, and the elements pulled are dropped.

        At most **n** elements are pulled, so the iterator can still be used afterwards.

        Args:
            n (int): Number of elements to pull.

        Returns:
            Option[tuple[T, ...]]: `Some` tuple of exactly **n** elements, or `NONE`.

        Example:
        ```python
        >>> import pyomore as pm
        >>> it = pm.Iter("lorem")
        >>> it.next_array(2)
        Some(value=('l', 'o'))
        >>> it.next_array(3)
        Some(value=('r', 'e', 'm'))
        >>> it.next_array(4)
        NONE
        >>> quote = "not all those who wander are lost"
        >>> first, second, third = pm.Iter(quote.split()).next_array(3).unwrap()
        >>> first, second, third
        ('not', 'all', 'those')

        ```
        """
        return next_array(self._inner, n)

    def next_chunk(self, n: int) -> Option[tuple[T, ...]]:
        """Identical to `Iter.next_array()`."""
        return next_array(self._inner, n)

    def collect_array(self, n: int) -> Result[tuple[T, ...], ArrayLengthError]:
        """Consume the iterator, collecting exactly **n** elements into a tuple.

        Args:
            n (int): Expected number of elements.

        Returns:
            Result[tuple[T, ...], ArrayLengthError]: `Ok` tuple, or `Err` if the iterator held too few or too many elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter("a,b,c".split(",")).collect_array(3)
        Ok(value=('a', 'b', 'c'))
        >>> pm.Iter([1, 2, 3, 4]).collect_array(3).is_err()
        True

        ```
        """
        return collect_array(self._inner, n)

    @overload
    def array_chunks(self, n: Literal[2]) -> Iter[tuple[T, T]]: ...
    @overload
    def array_chunks(self, n: Literal[3]) -> Iter[tuple[T, T, T]]: ...
    @overload
    def array_chunks(self, n: Literal[4]) -> Iter[tuple[T, T, T, T]]: ...
    @overload
    def array_chunks(self, n: int) -> Iter[tuple[T, ...]]: ...
    def array_chunks(self, n: int) -> Iter[tuple[Any, ...]]:
        """Returns an iterator over **n** elements of the iterator at a time.

        The chunks are tuples and do not overlap.

        If **n** does not divide the length of the iterator, then the last up to **n** - 1 elements will be omitted.

        A chunk size of 0 yields nothing.

        Args:
            n (int): Number of elements in each chunk.

        Returns:
            Iter[tuple[T, ...]]: An iterator of tuples of exactly **n** elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 1, 2, -2, 6, 0, 3, 1]).array_chunks(3).collect()
        Seq((1, 1, 2), (-2, 6, 0))
        >>> pm.Iter("lorem").array_chunks(2).collect()
        Seq(('l', 'o'), ('r', 'e'))

        ```
        """
        return self._iter(ArrayChunks, n)

    @overload
    def array_windows(self, n: Literal[2]) -> Iter[tuple[T, T]]: ...
    @overload
    def array_windows(self, n: Literal[3]) -> Iter[tuple[T, T, T]]: ...
    @overload
    def array_windows(self, n: Literal[4]) -> Iter[tuple[T, T, T, T]]: ...
    @overload
    def array_windows(self, n: int) -> Iter[tuple[T, ...]]: ...
    def array_windows(self, n: int) -> Iter[tuple[Any, ...]]:
        """Returns an iterator over all contiguous windows of length **n**.

        The windows overlap. If the iterator is shorter than **n**, nothing is yielded.

        Each window is a new tuple, and the same elements appear in up to **n** successive windows.

        Args:
            n (int): Length of each window.

        Returns:
            Iter[tuple[T, ...]]: An iterator of tuples of exactly **n** elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([10, 8, 6, 4]).array_windows(2).collect()
        Seq((10, 8), (8, 6), (6, 4))
        >>> fib = pm.Iter([0, 1, 1, 2, 3, 5, 8, 13])
        >>> fib.array_windows(3).map(lambda w: w[0] + w[1] == w[2]).collect()
        Seq(True, True, True, True, True, True)
        >>> pm.Iter("ab").array_windows(3).collect()
        Seq()

        ```
        """
        return self._iter(ArrayWindows, n)

    def circular_array_windows(self, n: int) -> Iter[tuple[T, ...]]:
        """Returns an iterator over all contiguous windows of length **n**, wrapping back to the first elements when the window would otherwise exceed the length of the iterator.

        The whole iterator is consumed on the first `next()` call.

        An iterator of length L yields exactly L windows.

        If the window is longer than the iterator, then it wraps around multiple times.

        Args:
            n (int): Length of each window.

        Returns:
            Iter[tuple[T, ...]]: An iterator of tuples of exactly **n** elements.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter(range(1, 5)).circular_array_windows(2).collect()
        Seq((1, 2), (2, 3), (3, 4), (4, 1))
        >>> pm.Iter([1]).circular_array_windows(3).collect()
        Seq((1, 1, 1),)

        ```
        """
        return self._iter(CircularArrayWindows, n)

    # combinatorics -----------------------------------------------------------------
    @overload
    def combinations(self, k: Literal[2]) -> Iter[tuple[T, T]]: ...
    @overload
    def combinations(self, k: Literal[3]) -> Iter[tuple[T, T, T]]: ...
    @overload
    def combinations(self, k: Literal[4]) -> Iter[tuple[T, T, T, T]]: ...
    @overload
    def combinations(self, k: int) -> Iter[tuple[T, ...]]: ...
    def combinations(self, k: int) -> Iter[tuple[Any, ...]]:
        """Return all combinations of length **k**, in encounter order.

        The whole iterator is consumed on the first `next()` call.

        If **k** is greater than the number of elements, nothing is yielded. A **k** of 0 yields a single empty tuple.

        Args:
            k (int): Length of each combination.

        Returns:
            Iter[tuple[T, ...]]: An iterator of combinations.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter("abcd").combinations(3).collect()
        Seq(('a', 'b', 'c'), ('a', 'b', 'd'), ('a', 'c', 'd'), ('b', 'c', 'd'))
        >>> pm.Iter([1, 2]).combinations(3).collect()
        Seq()
        >>> pm.Iter([1, 2]).combinations(0).collect()
        Seq((),)

        ```
        """
        return self._iter(Combinations, k)

    def combinations_with_reps(self, k: int) -> Iter[tuple[T, ...]]:
        """Return all combinations of length **k** where elements may be repeated.

        The positions picked in a combination never decrease, so each multiset of elements is yielded once.

        Args:
            k (int): Length of each combination.

        Returns:
            Iter[tuple[T, ...]]: An iterator of combinations with repetitions.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 2]).combinations_with_reps(2).collect()
        Seq((1, 1), (1, 2), (2, 2))
        >>> pm.Iter("abc").combinations_with_reps(2).count()
        6

        ```
        """
        return self._iter(CombinationsWithReps, k)

    def power_set(self) -> Iter[tuple[T, ...]]:
        """Return every subset of the elements, by increasing size.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 2, 3]).power_set().collect()
        Seq((), (1,), (2,), (3,), (1, 2), (1, 3), (2, 3), (1, 2, 3))

        ```
        """
        return self._iter(PowerSet)

    def cartesian_product[U](self, other: Iterable[U]) -> Iter[tuple[T, U]]:
        """Return an iterator over the cartesian product of the elements of **self** and **other**.

        All pairs for the first element of **self** come before any pair for the second one.

        **other** is consumed entirely on the first `next()` call, **self** is consumed lazily.

        Args:
            other (Iterable[U]): The inner iterable, replayed for every element of **self**.

        Returns:
            Iter[tuple[T, U]]: An iterator of pairs.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter(range(3)).cartesian_product("xy").collect()
        Seq((0, 'x'), (0, 'y'), (1, 'x'), (1, 'y'), (2, 'x'), (2, 'y'))
        >>> pm.Iter([1, 2]).cartesian_product([]).collect()
        Seq()

        ```
        """
        return self._iter(CartesianProduct, other)

    def flatten_tuples(self: Iter[tuple[Any, ...]]) -> Iter[tuple[Any, ...]]:
        """Flatten tuples of the form `((a, b), c, ...)` into `(a, b, c, ...)`.

        Useful after chaining `cartesian_product()` calls.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pairs = pm.Iter([1, 2]).cartesian_product("ab")
        >>> pairs.cartesian_product([True]).flatten_tuples().collect()
        Seq((1, 'a', True), (1, 'b', True), (2, 'a', True), (2, 'b', True))

        ```
        """
        return Iter(map(flatten_tuple, self._inner))
