"""Filter operator

Elements failing the predicate are pulled and discarded."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._types import Predicate
from ..core import Seq


def filter_seq[T](seq: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Pass through only elements for which predicate(element) holds."""
    source = seq.detach()

    async def run() -> AsyncIterator[T]:
        async with source:
            async for value in source:
                if predicate(value):
                    yield value

    return Seq(run())


__all__ = ("filter_seq",)
