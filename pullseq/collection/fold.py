"""
Fold terminals
==============

reduce: accumulate with (acc, value, index), reducer may be async.
to_list: reduce into a list.
"""

from __future__ import annotations

from .._helpers import resolve
from .._types import Reducer
from ..core import Seq


async def reduce[T, A](seq: Seq[T], reducer: Reducer[A, T], *, initial: A) -> A:
    """
    Drain seq, threading an accumulator through reducer.

    Example:
        await reduce(from_iterable([10, 20, 30]), lambda acc, v, i: acc + v * i, initial=0)  # 80
    """
    acc = initial
    index = 0
    async with seq:
        async for value in seq:
            acc = await resolve(reducer(acc, value, index))
            index += 1
    return acc


def _append[T](acc: list[T], value: T, index: int) -> list[T]:
    _ = index
    acc.append(value)
    return acc


async def to_list[T](seq: Seq[T]) -> list[T]:
    """Collect every element, in order."""
    return await reduce(seq, _append, initial=[])


__all__ = ("reduce", "to_list")
