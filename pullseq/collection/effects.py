"""Per-element side effects."""

from __future__ import annotations

from .._helpers import resolve
from .._types import Callback
from ..core import Seq


async def for_each[T](seq: Seq[T], callback: Callback[T]) -> None:
    """Drain seq, calling (and awaiting, if needed) callback once per element, in order."""
    async with seq:
        async for value in seq:
            await resolve(callback(value))


__all__ = ("for_each",)
