"""
Chunked stream source
=====================

Reads a chunk transport through a reader handle that is acquired on the
first pull and released exactly once, however iteration ends:
exhaustion, aclose() / `async with` exit, or a failing read.

A consumer that stops pulling without closing the Seq leaves the release
to the event loop's async generator finalizer.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import AsyncIterator, Awaitable
from dataclasses import dataclass

from .._helpers import resolve
from ..core import Seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReadResult[T]:
    """One read from a ChunkReader. `value` is meaningless when done."""

    done: bool
    value: T | None = None


class ChunkReader[T](typing.Protocol):
    def read(self) -> Awaitable[ReadResult[T]]: ...

    def release_lock(self) -> None | Awaitable[None]: ...


class ChunkStream[T](typing.Protocol):
    def get_reader(self) -> ChunkReader[T]: ...


def from_stream[T](stream: ChunkStream[T]) -> Seq[T]:
    """
    Pull chunks from stream until the transport reports done.

    Example:
        async with from_stream(body) as chunks:
            header = await chunks.take(1).to_list()
    """

    async def run() -> AsyncIterator[T]:
        reader = stream.get_reader()
        logger.debug("Acquired reader %r", reader)
        try:
            while True:
                chunk = await reader.read()
                if chunk.done:
                    return
                yield typing.cast(T, chunk.value)
        finally:
            await resolve(reader.release_lock())
            logger.debug("Released reader %r", reader)

    return Seq(run())


__all__ = ("ChunkReader", "ChunkStream", "ReadResult", "from_stream")
