"""Invoke helper — call sync or async callables uniformly.

Handlers and lifespan hooks can be ``def`` or ``async def``. Anything
that calls user code goes through here so the awaitable check lives in
exactly one place::

    from waypoint._internal.invoke import invoke

    result = await invoke(handler)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
