"""Combinators over several Results and the exception-capturing boundary.

- ``all`` / ``all_async``: every Result must be Ok; first Err by position wins.
- ``any``: first Ok wins; if every entry fails, the *last* Err is returned.
- ``zip`` / ``zip3``: pair up values, first Err from the left wins.
- ``try_catch`` / ``try_catch_async``: run raise-based code, capture into Err.

The asymmetry between ``all`` (first error) and ``any`` (last error) is
deliberate and observable; do not unify it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

import anyio

from fx_result._config import get_config
from fx_result._logging import get_logger
from fx_result.result import Err, Ok, Result

__all__ = [
    'all',
    'all_async',
    'any',
    'try_catch',
    'try_catch_async',
    'zip',
    'zip3',
]

logger = get_logger(__name__)


def _callable_name(f: Any) -> str:
    return getattr(f, '__qualname__', None) or repr(f)


def all[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:  # noqa: A001
    """Collect an iterable of Results into a Result of list.

    Iterates in order and stops at the first Err; later entries are not
    looked at, so a lazy iterable is not consumed past that point.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok (Ok([]) for no input),
        otherwise the first Err encountered.

    Examples:
        >>> all([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> all([Ok(1), Err('a'), Err('b')])
        Err(error='a')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


async def all_async[T, E](awaitables: Iterable[Awaitable[Result[T, E]]]) -> Result[list[T], E]:
    """Settle every Result-producing awaitable, then fold them like ``all``.

    All inputs run side by side in one anyio task group. A failing input
    does not stop the others: the fold waits for the whole batch, so the
    Err returned is the leftmost one in input order, not the earliest to
    finish.

    An input that raises instead of resolving is a contract breach and is
    re-raised once the group has cancelled the rest. A lone failure comes
    out as the raw exception; several at once stay bundled in an
    ExceptionGroup. Put ``wrap`` around producers that may raise.

    Raises:
        TypeError: If an awaitable resolves to something other than Ok/Err.
    """
    pending = list(awaitables)
    settled: list[Any] = [None] * len(pending)

    async def settle(slot: int, aw: Awaitable[Result[T, E]]) -> None:
        settled[slot] = await aw

    try:
        async with anyio.create_task_group() as tg:
            for slot, aw in enumerate(pending):
                tg.start_soon(settle, slot, aw)
    except BaseExceptionGroup as group:
        if len(group.exceptions) == 1:
            raise group.exceptions[0] from None
        raise

    for slot, outcome in enumerate(settled):
        if not isinstance(outcome, (Ok, Err)):
            msg = f'all_async input {slot} resolved to {type(outcome).__name__}, expected Ok or Err'
            raise TypeError(msg)
    return all(settled)


def any[T, E](results: Iterable[Result[T, E]]) -> Result[T, E]:  # noqa: A001
    """Return the first Ok, or the last Err if every entry failed.

    Args:
        results: A non-empty iterable of Result values.

    Returns:
        The first Ok in order, otherwise the Err of the last entry.

    Raises:
        ValueError: If results is empty. This is a caller bug, not a failure.

    Examples:
        >>> any([Err('a'), Ok(5), Err('b')])
        Ok(value=5)
        >>> any([Err('a'), Err('b'), Err('c')])
        Err(error='c')
    """
    last: Err[E] | None = None
    for result in results:
        if isinstance(result, Ok):
            return result
        last = result
    if last is None:
        msg = 'any() requires at least one Result'
        raise ValueError(msg)
    return last


def zip[A, B, E](a: Result[A, E], b: Result[B, E]) -> Result[tuple[A, B], E]:  # noqa: A001
    """Combine two Results into a Result of a pair.

    Returns:
        Ok((a, b)) if both are Ok, otherwise the first Err from the left.
    """
    if isinstance(a, Err):
        return a
    if isinstance(b, Err):
        return b
    return Ok((a.value, b.value))


def zip3[A, B, C, E](
    a: Result[A, E],
    b: Result[B, E],
    c: Result[C, E],
) -> Result[tuple[A, B, C], E]:
    """Combine three Results into a Result of a triple.

    Returns:
        Ok((a, b, c)) if all are Ok, otherwise the first Err from the left.
    """
    if isinstance(a, Err):
        return a
    if isinstance(b, Err):
        return b
    if isinstance(c, Err):
        return c
    return Ok((a.value, b.value, c.value))


def try_catch[T](thunk: Callable[[], T]) -> Result[T, Exception]:
    """Call a zero-argument function and capture what it raises.

    The raised exception is stored in Err as-is. Only the exception types in
    the active config's ``capture`` tuple are intercepted (Exception by
    default); anything else propagates.

    Args:
        thunk: The function to call.

    Returns:
        Ok(return value), or Err(raised exception).

    Example:
        ```python
        try_catch(lambda: json.loads('{"valid": "json"}'))
        # Ok(value={'valid': 'json'})
        try_catch(lambda: 1 / 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    try:
        return Ok(thunk())
    except get_config().capture as e:
        logger.debug('exception_captured', callable=_callable_name(thunk), error_type=type(e).__name__)
        return Err(e)


async def try_catch_async[T](thunk: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """Async variant of try_catch.

    A raise while creating the awaitable and a raise while awaiting it are
    captured the same way.

    Args:
        thunk: A function returning an awaitable, typically an async function.

    Returns:
        Ok(awaited value), or Err(raised exception).
    """
    try:
        return Ok(await thunk())
    except get_config().capture as e:
        logger.debug('exception_captured', callable=_callable_name(thunk), error_type=type(e).__name__)
        return Err(e)
