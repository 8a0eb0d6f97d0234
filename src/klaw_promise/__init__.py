"""klaw-promise: settled promises from conditions and nullable values.

Flat imports (preferred):
    from klaw_promise import from_condition, from_nullable
    from klaw_promise import Promise, Resolved, Rejected, RejectedError

Example:
    ```python
    async def load(cache: dict[str, int]) -> int:
        return await from_nullable(cache.get('answer'), 'cache miss').catch(lambda _: 0)
    ```
"""

from klaw_promise._config import PromiseConfig, get_config, init, reset
from klaw_promise._logging import configure_logging, get_logger
from klaw_promise.errors import Rejected, RejectedError
from klaw_promise.option import UNSET, Nothing, NothingType, Option, Some, is_absent, to_option
from klaw_promise.promise import Promise
from klaw_promise.resolvers import from_condition, from_nullable
from klaw_promise.settlement import Resolved, Settlement

__all__ = [
    'UNSET',
    'Nothing',
    'NothingType',
    'Option',
    'Promise',
    'PromiseConfig',
    'Rejected',
    'RejectedError',
    'Resolved',
    'Settlement',
    'Some',
    'configure_logging',
    'from_condition',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    'is_absent',
    'reset',
    'to_option',
]
