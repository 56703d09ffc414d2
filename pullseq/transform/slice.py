"""
Slicing operators
=================

drop/take: skip a prefix or cut the sequence after a count.
Counts are not validated; callers pass non-negative integers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from ..core import Seq


def drop[T](seq: Seq[T], count: int) -> Seq[T]:
    """
    Skip the first `count` elements, pass everything after unchanged.

    Skipped elements are still pulled from the parent.
    """
    source = seq.detach()

    async def run() -> AsyncIterator[T]:
        async with source:
            skipped = 0
            async for value in source:
                if skipped < count:
                    skipped += 1
                    continue
                yield value

    return Seq(run())


def take[T](seq: Seq[T], count: int) -> Seq[T]:
    """
    Yield at most `count` elements, then stop.

    The parent is never pulled past the `count`-th element, and it is
    closed as soon as the limit is reached.
    """
    source = seq.detach()

    async def run() -> AsyncIterator[T]:
        async with source:
            if count <= 0:
                return
            taken = 0
            async for value in source:
                taken += 1
                if taken >= count:
                    await source.aclose()
                    yield value
                    return
                yield value

    return Seq(run())


__all__ = ("drop", "take")
