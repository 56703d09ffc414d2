"""
Sink adapter
============

to_sink() exposes a Seq as the pull side of a chunk destination.

The destination decides when the next element is needed and calls the
registered handler; each call pulls exactly once. Nothing is produced
ahead of demand.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from .core import Seq
from .step import Item


class ChunkSink[T](typing.Protocol):
    """Destination driven by its own demand."""

    def on_pull(self, handler: Callable[[], Awaitable[None]], /) -> None: ...

    def enqueue(self, value: T, /) -> None: ...

    def close(self) -> None: ...


def to_sink[T, S: ChunkSink[typing.Any]](seq: Seq[T], sink: S) -> S:
    """
    Feed sink from seq on demand. Returns sink.

    Ownership of seq moves to the sink's pull handler.
    """
    source = seq.detach()

    async def pull() -> None:
        match await source.pull():
            case Item(value):
                sink.enqueue(value)
            case _:
                sink.close()

    sink.on_pull(pull)
    return sink


__all__ = ("ChunkSink", "to_sink")
