from __future__ import annotations

"""
Sequential Path Reducer.

Folds a list of paths through a caller-supplied step function, one path at
a time. Step i+1 never starts before step i has fully completed, so
reducers with ordering-sensitive side effects (sequential resource usage,
rate-limited I/O) behave predictably.
"""

import inspect
import logging
from collections.abc import Sequence
from typing import Any, Awaitable, Callable, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# reducer(accumulator, path) or reducer(accumulator, path, index);
# may return the next accumulator or an awaitable resolving to it.
Reducer = Callable[..., Any]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def process_paths_with_reducer(
        paths: Sequence,
        reducer: Reducer,
        initial: T,
) -> Awaitable[T]:
    """
    Reduce paths sequentially with a plain or coroutine step function.

    The input contract is checked immediately, at call time; the returned
    awaitable performs the steps.

    Args:
        paths: Ordered sequence (list/tuple) of path strings.
        reducer: Step function. Receives (accumulator, path) and, when it
                 accepts a third positional argument, the path index.
        initial: Starting accumulator.

    Returns:
        Awaitable[T]: Resolves to the final accumulator.

    Raises:
        TypeError: If paths is not an ordered sequence or reducer is not callable.
    """
    if not isinstance(paths, Sequence) or isinstance(paths, (str, bytes)):
        raise TypeError(
            f"paths must be an ordered sequence, received {type(paths).__name__}."
        )
    if not callable(reducer):
        raise TypeError(f"reducer must be callable, received {type(reducer).__name__}.")

    return _reduce_sequentially(list(paths), reducer, initial, _accepts_index(reducer))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

async def _reduce_sequentially(
        paths: List[Any],
        reducer: Reducer,
        initial: T,
        pass_index: bool,
) -> T:
    accumulator = initial
    for index, path in enumerate(paths):
        step = reducer(accumulator, path, index) if pass_index else reducer(accumulator, path)
        if inspect.isawaitable(step):
            step = await step
        accumulator = step
    logger.debug(f"Reduced {len(paths)} path(s) sequentially")
    return accumulator


def _accepts_index(reducer: Reducer) -> bool:
    """Check whether the step function takes a third positional argument."""
    try:
        params = list(inspect.signature(reducer).parameters.values())
    except (TypeError, ValueError):
        return False

    positional = 0
    for p in params:
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 3
