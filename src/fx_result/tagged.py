"""Tagged errors and tag-scoped recovery.

A TaggedError pairs an error value with a string discriminant so that
handlers can recover from one kind of failure while letting every other
failure through. Tags are compared with ``==``; ``enum.StrEnum`` members
work wherever a plain string does, which suits closed tag domains.

Example:
    ```python
    class Tag(StrEnum):
        VALIDATION = 'VALIDATION_ERROR'
        NETWORK = 'NETWORK_ERROR'

    result = err_tagged(Tag.NETWORK, 'connection reset')
    result = catch_by_tag(result, Tag.VALIDATION, lambda e: ok(None))
    # still Err(TaggedError(tag='NETWORK_ERROR', ...))
    result = catch_by_tags(result, {Tag.NETWORK}, lambda e: ok('offline'))
    # Ok(value='offline')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Collection
from typing import Any, TypeIs

import msgspec

from fx_result.result import Err, Result

__all__ = [
    'TaggedError',
    'catch_by_tag',
    'catch_by_tag_async',
    'catch_by_tags',
    'catch_by_tags_async',
    'err_tagged',
    'has_tag',
    'tag_error',
]


class TaggedError[E](msgspec.Struct, frozen=True, gc=False):
    """An error value annotated with a discriminant tag.

    Attributes:
        tag: The discriminant, set once at construction.
        error: The wrapped error value.
    """

    tag: str
    error: E


def tag_error[E](tag: str, error: E) -> TaggedError[E]:
    """Attach a tag to an error value."""
    return TaggedError(tag, error)


def err_tagged[E](tag: str, error: E) -> Err[TaggedError[E]]:
    """Build an Err carrying a TaggedError.

    Examples:
        >>> err_tagged('NETWORK_ERROR', 'Connection failed')
        Err(error=TaggedError(tag='NETWORK_ERROR', error='Connection failed'))
    """
    return Err(TaggedError(tag, error))


def has_tag(error: Any, tag: str) -> TypeIs[TaggedError[Any]]:
    """Check whether an error is a TaggedError with exactly this tag."""
    return isinstance(error, TaggedError) and error.tag == tag


def _tags(tags: Collection[str]) -> Collection[str]:
    # a bare string would otherwise match on substrings
    if isinstance(tags, str):
        return (tags,)
    return tags


def _matches(result: Result[Any, Any], tags: Collection[str]) -> bool:
    return isinstance(result, Err) and isinstance(result.error, TaggedError) and result.error.tag in tags


def catch_by_tag[T, U, E, F](
    result: Result[T, E],
    tag: str,
    handler: Callable[[Any], Result[U, F]],
) -> Result[T | U, E | F]:
    """Recover from an Err whose tag equals ``tag``.

    Args:
        result: The Result to inspect.
        tag: The tag to match exactly.
        handler: Called with the inner ``error`` of the matching TaggedError.

    Returns:
        handler's Result for a matching Err; the original Result otherwise,
        including Ok, untagged Err and Err with another tag.
    """
    if _matches(result, (tag,)):
        return handler(result.error.error)  # type: ignore[union-attr]
    return result


async def catch_by_tag_async[T, U, E, F](
    result: Result[T, E],
    tag: str,
    handler: Callable[[Any], Awaitable[Result[U, F]]],
) -> Result[T | U, E | F]:
    """Async variant of catch_by_tag; handler may suspend."""
    if _matches(result, (tag,)):
        return await handler(result.error.error)  # type: ignore[union-attr]
    return result


def catch_by_tags[T, U, E, F](
    result: Result[T, E],
    tags: Collection[str],
    handler: Callable[[Any], Result[U, F]],
) -> Result[T | U, E | F]:
    """Recover from an Err whose tag is a member of ``tags``.

    Membership decides the match; the order of ``tags`` is irrelevant.

    Args:
        result: The Result to inspect.
        tags: Tags that should be handled.
        handler: Called with the inner ``error`` of the matching TaggedError.

    Returns:
        handler's Result for a matching Err, otherwise the original Result.
    """
    if _matches(result, _tags(tags)):
        return handler(result.error.error)  # type: ignore[union-attr]
    return result


async def catch_by_tags_async[T, U, E, F](
    result: Result[T, E],
    tags: Collection[str],
    handler: Callable[[Any], Awaitable[Result[U, F]]],
) -> Result[T | U, E | F]:
    """Async variant of catch_by_tags; handler may suspend."""
    if _matches(result, _tags(tags)):
        return await handler(result.error.error)  # type: ignore[union-attr]
    return result
