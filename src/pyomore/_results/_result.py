from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Never, TypeIs

from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """The outcome of an operation that can fail without raising.

    Returned by `collect_array`, where a source of the wrong length is an expected outcome.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter("abc").collect_array(3).expect("three letters")
        ('a', 'b', 'c')
        >>> pm.Iter("abcd").collect_array(3).expect("three letters")
        Traceback (most recent call last):
            ...
        pyomore._results._result.ResultUnwrapError: three letters: expected exactly 3 elements, but collected more

        ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Args:
            default: The value to return if the result is Err.
        """
        return self.unwrap() if self.is_ok() else default

    def ok(self) -> Option[T]:
        """
        Converts from `Result[T, E]` to `Option[T]`, discarding the error.

        Example:
        ```python
        >>> import pyomore as pm
        >>> pm.Iter([1, 2]).collect_array(2).ok()
        Some(value=(1, 2))
        >>> pm.Iter([1]).collect_array(2).ok()
        NONE

        ```
        """
        return Some(self.unwrap()) if self.is_ok() else NONE


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
