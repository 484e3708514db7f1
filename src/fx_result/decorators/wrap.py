"""wrap: make any Result-returning callable exception-proof."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fx_result._logging import get_logger
from fx_result.errors import UnhandledError
from fx_result.result import Err, Result

__all__ = ['wrap']

logger = get_logger(__name__)


def _unhandled(wrapped: Callable[..., Any], exc: BaseException) -> Err[UnhandledError]:
    logger.debug(
        'unhandled_error_captured',
        callable=getattr(wrapped, '__qualname__', repr(wrapped)),
        error_type=type(exc).__name__,
    )
    return Err(UnhandledError(exc))


async def _settle[T, E](
    wrapped: Callable[..., Any],
    pending: Awaitable[Result[T, E]],
) -> Result[T, E | UnhandledError]:
    try:
        return await pending
    except Exception as e:
        return _unhandled(wrapped, e)


@overload
def wrap[**P, T, E](
    func: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, Awaitable[Result[T, E | UnhandledError]]]: ...


@overload
def wrap[**P, T, E](
    func: Callable[P, Result[T, E]],
) -> Callable[P, Result[T, E | UnhandledError]]: ...


def wrap(func: Callable[..., Any]) -> Any:
    """Wrap a Result-returning callable so that it never raises.

    The wrapper keeps the signature and metadata of ``func``. On each call:

    1. ``func`` is called inside a guarded region.
    2. A synchronous return value is handed back unchanged.
    3. An awaitable return value is handed back as a coroutine that resolves
       to the inner Result, or to Err(UnhandledError) if awaiting it raises.
    4. A synchronous raise becomes Err(UnhandledError) immediately.

    The declared Err of ``func`` passes through untouched, so callers can
    tell a reported failure apart from a misbehaving callable.

    Every ``Exception`` is captured regardless of ``init(capture=...)``;
    only non-Exception signals such as cancellation propagate.

    Can be used as a decorator:
        @wrap
        def parse(raw: str) -> Result[int, str]: ...

        @wrap
        async def fetch(url: str) -> Result[bytes, str]: ...

    Args:
        func: A sync or async callable returning a Result.

    Returns:
        The exception-proof callable.

    Example:
        ```python
        @wrap
        def explode() -> Result[int, str]:
            raise KeyError('missing')

        result = explode()
        # Err(error=UnhandledError(KeyError('missing')))
        result.error.original_error
        # KeyError('missing')
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        try:
            outcome = wrapped(*args, **kwargs)
        except Exception as e:
            return _unhandled(wrapped, e)
        if inspect.isawaitable(outcome):
            return _settle(wrapped, outcome)
        return outcome

    return wrapper(func)
