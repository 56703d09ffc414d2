"""Internal helpers for pullseq.

Not part of the public API."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable


async def resolve[T](value: T | Awaitable[T]) -> T:
    """
    Await value if it is awaitable, return it unchanged otherwise.

    Lets map/for_each/reduce accept both plain and async callbacks.
    """
    if inspect.isawaitable(value):
        return await value
    return value


__all__ = ("resolve",)
