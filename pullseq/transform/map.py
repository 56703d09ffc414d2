"""
Mapping operators
=================

map_seq: one element in, one element out (mapper may be async).
flat_map: one element in, a whole sub-sequence out, drained in order.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from .._helpers import resolve
from .._types import Mapper, SourceLike
from ..core import Seq
from ..sources.iterable import from_iterable


def map_seq[T, R](seq: Seq[T], mapper: Mapper[T, R]) -> Seq[R]:
    """
    Transform each element.

    Example:
        async def load(user_id: int) -> User: ...

        users = map_seq(from_iterable(ids), load)
    """
    source = seq.detach()

    async def run() -> AsyncIterator[R]:
        async with source:
            async for value in source:
                yield await resolve(mapper(value))

    return Seq(run())


def flat_map[T, R](seq: Seq[T], mapper: Callable[[T], SourceLike[R]]) -> Seq[R]:
    """
    Concatenate the sub-sequences produced by mapper, in parent order.

    Mapper may return any source from_iterable() accepts, including a Seq.
    Each sub-sequence is drained completely before the parent is pulled again.
    """
    source = seq.detach()

    async def run() -> AsyncIterator[R]:
        async with source:
            async for value in source:
                async with from_iterable(mapper(value)) as inner:
                    async for item in inner:
                        yield item

    return Seq(run())


__all__ = ("flat_map", "map_seq")
