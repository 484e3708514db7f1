"""Exception types raised or produced at the algebra's exception boundaries."""

from __future__ import annotations

from typing import Any

__all__ = ['UnhandledError', 'UnwrapError']


class UnhandledError(Exception):
    """A wrapped callable raised instead of returning a Result.

    Produced only by ``wrap``. The raised value is kept as-is in
    ``original_error`` so callers can tell "this callable misbehaved" apart
    from "this callable reported a declared failure".

    Attributes:
        original_error: The value that was raised, uninspected.
    """

    def __init__(self, original_error: Any) -> None:
        self.original_error = original_error
        super().__init__('Unhandled error')
        if isinstance(original_error, BaseException):
            self.__cause__ = original_error

    def __repr__(self) -> str:
        return f'UnhandledError({self.original_error!r})'


class UnwrapError(Exception):
    """Raised by ``unwrap`` when the Err payload is not an exception.

    Attributes:
        error: The Err payload, untouched.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Called unwrap on Err: {error!r}')
