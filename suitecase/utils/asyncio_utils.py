# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Asyncio utilities for invoking user callables from the event loop.

Hooks and test bodies may be plain functions or coroutine functions. This
module provides a single entry point that awaits either kind without
blocking the event loop, so that a timeout race can still fire while a
synchronous callable is busy.
"""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any


async def call_maybe_async(fn: Callable[..., Any], *args: Any) -> Any:
    """Call `fn` and await its result if needed.

    Coroutine functions are awaited directly. Plain callables run in a
    worker thread via `asyncio.to_thread`; if such a callable returns an
    awaitable (e.g. a lambda wrapping a coroutine), it is awaited on the
    event loop afterwards.

    Args:
        fn: Sync or async callable
        *args: Positional arguments for `fn`

    Returns:
        The (awaited) return value of `fn`

    Example:
        >>> asyncio.run(call_maybe_async(lambda x: x + 1, 1))
        2
    """
    if inspect.iscoroutinefunction(fn):
        return await fn(*args)

    result = await asyncio.to_thread(fn, *args)
    if inspect.isawaitable(result):
        return await result
    return result
