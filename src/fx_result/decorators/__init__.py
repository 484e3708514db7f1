"""Decorators: wrap, safe and safe_async."""

from fx_result.decorators.safe import safe, safe_async
from fx_result.decorators.wrap import wrap

__all__ = [
    'safe',
    'safe_async',
    'wrap',
]
