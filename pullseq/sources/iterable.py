"""
Generic source normalization
============================

from_iterable() turns any of the supported source shapes into a Seq.

The shape is picked by a capability probe, not by type, in this order:
- SEQ: already a Seq (ownership is moved, not shared)
- SYNC: exposes __iter__ (lists, generators, sync iterators)
- ASYNC: exposes __aiter__ (async generators, async iterables)
- PRODUCER: exposes only __anext__ (hand-written pull objects)
"""

from __future__ import annotations

import enum
import typing
from collections.abc import AsyncIterable, Iterable, Iterator

from .._errors import UnsupportedSourceError
from .._types import SourceLike
from ..core import Producer, Seq


class SourceKind(enum.Enum):
    SEQ = "seq"
    SYNC = "sync"
    ASYNC = "async"
    PRODUCER = "producer"


def probe(source: object) -> SourceKind:
    """Classify source by the iteration capabilities it exposes."""
    if isinstance(source, Seq):
        return SourceKind.SEQ
    if hasattr(source, "__iter__"):
        return SourceKind.SYNC
    if hasattr(source, "__aiter__"):
        return SourceKind.ASYNC
    if hasattr(source, "__anext__"):
        return SourceKind.PRODUCER
    raise UnsupportedSourceError(source)


class _SyncProducer[T]:
    """Drives a sync iterator through the async pull protocol."""

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator = iterator

    async def __anext__(self) -> T:
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration from None

    async def aclose(self) -> None:
        # Generators run their finally blocks on close()
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()

    def __repr__(self) -> str:
        return f"_SyncProducer({self._iterator!r})"


def from_iterable[T](source: SourceLike[T]) -> Seq[T]:
    """
    Normalize a sync/async iterable or iterator into a Seq.

    Example:
        from_iterable([1, 2, 3])
        from_iterable(x for x in range(3))
        from_iterable(async_gen())
        from_iterable(other_seq)  # other_seq becomes moved
    """
    match probe(source):
        case SourceKind.SEQ:
            return typing.cast(Seq[T], source).detach()
        case SourceKind.SYNC:
            return Seq(_SyncProducer(iter(typing.cast(Iterable[T], source))))
        case SourceKind.ASYNC:
            return Seq(aiter(typing.cast(AsyncIterable[T], source)))
        case SourceKind.PRODUCER:
            return Seq(typing.cast(Producer[T], source))


__all__ = ("SourceKind", "from_iterable", "probe")
