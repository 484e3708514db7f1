"""fx-result: explicit, composable error handling for Python 3.13+.

The package module doubles as the ``fx`` namespace:

    import fx_result as fx

    parsed = fx.try_catch(lambda: int(raw))
    doubled = fx.map(parsed, lambda n: n * 2)
    value = fx.unwrap_or(doubled, 0)

Flat imports (preferred):
    from fx_result import Ok, Err, Result, ok, err, map, and_then, wrap

Submodule imports (for organization):
    from fx_result.result import Ok, Err
    from fx_result.tagged import catch_by_tag, err_tagged
    from fx_result.combinators import all, any, zip
    from fx_result.decorators import wrap, safe
"""

# Configuration and logging
from fx_result._config import FxConfig, get_config, init, reset_config
from fx_result._logging import configure_logging, get_logger

# Combinators
from fx_result.combinators import (
    all,
    all_async,
    any,
    try_catch,
    try_catch_async,
    zip,
    zip3,
)

# Decorators
from fx_result.decorators import safe, safe_async, wrap

# Errors
from fx_result.errors import UnhandledError, UnwrapError

# Result types
from fx_result.result import Err, Ok, Result, ResultAsync, err, is_err, is_ok, ok

# Tagged errors
from fx_result.tagged import (
    TaggedError,
    catch_by_tag,
    catch_by_tag_async,
    catch_by_tags,
    catch_by_tags_async,
    err_tagged,
    has_tag,
    tag_error,
)

# Transformations
from fx_result.transform import (
    and_then,
    and_then_async,
    map,
    map_async,
    map_err,
    or_else,
    unwrap,
    unwrap_or,
    unwrap_or_else,
)

__all__ = [
    # Result types
    'Err',
    # Configuration
    'FxConfig',
    'Ok',
    'Result',
    'ResultAsync',
    # Tagged errors
    'TaggedError',
    # Errors
    'UnhandledError',
    'UnwrapError',
    # Combinators
    'all',
    'all_async',
    # Transformations
    'and_then',
    'and_then_async',
    'any',
    'catch_by_tag',
    'catch_by_tag_async',
    'catch_by_tags',
    'catch_by_tags_async',
    'configure_logging',
    'err',
    'err_tagged',
    'get_config',
    'get_logger',
    'has_tag',
    'init',
    'is_err',
    'is_ok',
    'map',
    'map_async',
    'map_err',
    'ok',
    'or_else',
    'reset_config',
    # Decorators
    'safe',
    'safe_async',
    'tag_error',
    'try_catch',
    'try_catch_async',
    'unwrap',
    'unwrap_or',
    'unwrap_or_else',
    'wrap',
    'zip',
    'zip3',
]
