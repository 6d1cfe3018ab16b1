"""Invoke helpers — call sync or async entry points uniformly.

A class's ``execute`` method can be ``def`` or ``async def``. Any code
that awaits an entry point must handle both cases. This module provides
a single helper so the sync/async check lives in exactly one place.

Usage::

    from frock._internal.invoke import invoke

    result = await invoke(instance.execute)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
