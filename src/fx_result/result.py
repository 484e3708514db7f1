"""Result type: Ok[T] | Err[E] for explicit error handling.

A Result is exactly one of two immutable variants. ``Ok`` carries a success
value, ``Err`` carries an error value of any type. The variant itself is the
discriminant, so no sentinel is ever stored in the unused slot.

Examples:
    >>> ok(42).map(lambda x: x * 2)
    Ok(value=84)
    >>> err('boom').unwrap_or(0)
    0
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from fx_result.errors import UnwrapError

__all__ = ['Err', 'Ok', 'Result', 'ResultAsync', 'err', 'is_err', 'is_ok', 'ok']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(42).map_err(str)
        Ok(value=42)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap, bind or chain.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Result[Any, Any]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    The error can be any value: an exception, a string, a TaggedError or a
    domain record. It is never inspected by the algebra.

    Examples:
        >>> Err('something went wrong').is_err()
        True
        >>> Err('something went wrong').unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f, which may itself be Ok or Err.
        """
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Raises:
            E: The contained error, when it is an exception.
            UnwrapError: When the contained error is any other value.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the contained error."""
        return f(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]
type ResultAsync[T, E = Exception] = Awaitable[Result[T, E]]


def ok[T](value: T) -> Ok[T]:
    """Build a success Result. The value is stored as-is, None included."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Build a failure Result. The error is stored as-is."""
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Check if a Result is Ok.

    Args:
        result: The Result to check.

    Returns:
        True if the Result is Ok, False if Err.
    """
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Check if a Result is Err.

    Args:
        result: The Result to check.

    Returns:
        True if the Result is Err, False if Ok.
    """
    return isinstance(result, Err)
