from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A value that may be absent.

    Every adaptor that can run short of input reports it with `NONE` rather than by raising.
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Wrap a plain value, mapping `None` to `NONE`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `Some(value)`, or `NONE` if **value** is `None`.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Option.from_(3)
        Some(value=3)
        >>> pm.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import pyomore as pm
            >>> pm.Iter("ab").next_array(2).is_some()
            True
            >>> pm.Iter("ab").next_array(3).is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is a `None` value."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> import pyomore as pm
            >>> pm.Some("car").unwrap()
            'car'
            >>> pm.NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyomore._results._option.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with a provided message if the value is `None`.

        Args:
            msg: The message to include in the exception if the result is `None`.

        Raises:
            OptionUnwrapError: If the result is `None`.

        Example:
            ```python
            >>> import pyomore as pm
            >>> pm.Iter("lorem").next_array(5).expect("five letters")
            ('l', 'o', 'r', 'e', 'm')
            >>> pm.Iter("lorem").next_array(6).expect("six letters")
            Traceback (most recent call last):
                ...
            pyomore._results._option.OptionUnwrapError: six letters (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> import pyomore as pm
            >>> pm.Iter([1]).next_array(2).unwrap_or((0, 0))
            (0, 0)

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Example:
            ```python
            >>> import pyomore as pm
            >>> pm.Iter([1, 2, 3]).next_array(3).map(sum)
            Some(value=6)
            >>> pm.NONE.map(sum)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
