"""Free-function transformation operators over Result.

Every operator propagates Err by identity (the same Err object comes back)
unless it is explicitly an error-mapping or recovery operator, and calls its
function at most once, only on the matching variant.

Examples:
    >>> from fx_result import ok, err
    >>> map(ok(2), lambda x: x + 1)
    Ok(value=3)
    >>> and_then(err('nope'), lambda x: ok(x + 1))
    Err(error='nope')
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fx_result.result import Err, Ok, Result

__all__ = [
    'and_then',
    'and_then_async',
    'map',
    'map_async',
    'map_err',
    'or_else',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
]


def map[T, U, E](result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Transform the value of a Result if Ok.

    Args:
        result: The Result to transform.
        f: Function to apply to the value if Ok.

    Returns:
        Ok(f(value)) if Ok, otherwise the original Err.
    """
    return result.map(f)


async def map_async[T, U, E](result: Result[T, E], f: Callable[[T], Awaitable[U]]) -> Result[U, E]:
    """Transform the value of a Result with an async function.

    An Err resolves immediately without calling f.

    Args:
        result: The Result to transform.
        f: Async function to apply to the value if Ok.

    Returns:
        Ok(await f(value)) if Ok, otherwise the original Err.
    """
    if isinstance(result, Err):
        return result
    return Ok(await f(result.value))


def and_then[T, U, E](result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a computation that may fail.

    Args:
        result: The Result to chain from.
        f: Function that takes the value and returns a new Result.

    Returns:
        The Result returned by f if Ok, otherwise the original Err.
    """
    return result.and_then(f)


async def and_then_async[T, U, E](
    result: Result[T, E],
    f: Callable[[T], Awaitable[Result[U, E]]],
) -> Result[U, E]:
    """Chain a computation that may fail and may suspend.

    Args:
        result: The Result to chain from.
        f: Async function that takes the value and returns a new Result.

    Returns:
        The Result f resolves to if Ok, otherwise the original Err.
    """
    if isinstance(result, Err):
        return result
    return await f(result.value)


def map_err[T, E, F](result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Transform the error of a Result if Err.

    Args:
        result: The Result to transform.
        f: Function to apply to the error if Err.

    Returns:
        Err(f(error)) if Err, otherwise the original Ok.
    """
    return result.map_err(f)


def or_else[T, U, E, F](result: Result[T, E], f: Callable[[E], Result[U, F]]) -> Result[T | U, F]:
    """Recover from an Err with a function returning a replacement Result.

    Args:
        result: The Result to handle.
        f: Function that takes the error and returns a new Result.

    Returns:
        The original Ok if Ok, otherwise the Result returned by f.
    """
    return result.or_else(f)


def unwrap[T, E](result: Result[T, E]) -> T:
    """Return the Ok value or raise the Err payload.

    This is the one operator that turns a Result back into raise-based
    control flow. Keep it at trust boundaries.

    Args:
        result: The Result to unwrap.

    Returns:
        The contained value.

    Raises:
        E: The contained error, when it is an exception.
        UnwrapError: When the contained error is not an exception.
    """
    return result.unwrap()


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    """Return the Ok value or a default. Never raises."""
    return result.unwrap_or(default)


def unwrap_or_else[T, E](result: Result[T, E], f: Callable[[E], T]) -> T:
    """Return the Ok value or compute one from the error.

    Args:
        result: The Result to unwrap.
        f: A callable that takes the error and returns a fallback value.

    Returns:
        The contained value if Ok, otherwise f(error).
    """
    return result.unwrap_or_else(f)
