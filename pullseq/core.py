"""
Seq - the pull-based sequence
=============================

`Seq[T]` owns exactly one producer (anything with `__anext__`) and exposes
one operation, `pull()`, returning a `Step[T]`.

Ownership:
- Operators take the parent over via `detach()`; the parent becomes moved
  and any further use raises SequenceMovedError.
- Closing a moved sequence closes whoever owns its producer now, so
  `async with from_stream(s) as seq: ...` releases the reader even when
  `seq` was wrapped by operators inside the block.

Termination is monotonic: after the first DONE every pull returns DONE
without touching the producer.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import AsyncIterator, Awaitable, Callable

from kungfu import Result

from ._errors import ConcurrentPullError, NotFoundError, SequenceFailedError, SequenceMovedError
from ._types import Callback, Mapper, Predicate, Reducer, SourceLike
from .step import DONE, Item, Step

if typing.TYPE_CHECKING:
    from .sink import ChunkSink

logger = logging.getLogger(__name__)


class Producer[T](typing.Protocol):
    """Anything that can be advanced asynchronously. `aclose()` is optional."""

    def __anext__(self) -> Awaitable[T]: ...


class Seq[T]:
    """
    Lazy, single-pass, pull-based sequence.

    Example:
        from pullseq import from_iterable

        evens = await (
            from_iterable(range(100))
            .drop(10)
            .filter(lambda n: n % 2 == 0)
            .map(lambda n: n * n)
            .take(3)
            .to_list()
        )  # [100, 144, 196]
    """

    __slots__ = ("_producer", "_successor", "_finished", "_closed", "_failure", "_pulling")

    def __init__(self, producer: Producer[T], /) -> None:
        self._producer: Producer[T] | None = producer
        self._successor: Seq[T] | None = None
        self._finished = False
        self._closed = False
        self._failure: Exception | None = None
        self._pulling = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def moved(self) -> bool:
        """True once the producer was handed over to another Seq."""
        return self._successor is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def detach(self) -> Seq[T]:
        """
        Move the producer into a fresh Seq and return it.

        This sequence becomes unusable; pulling from it raises SequenceMovedError.
        """
        self._ensure_owner()
        moved: Seq[T] = Seq(typing.cast(Producer[T], self._producer))
        moved._finished = self._finished
        moved._closed = self._closed
        moved._failure = self._failure
        self._producer = None
        self._successor = moved
        return moved

    def _ensure_owner(self) -> None:
        if self._successor is not None:
            raise SequenceMovedError()

    # ------------------------------------------------------------------
    # Pull protocol
    # ------------------------------------------------------------------

    async def pull(self) -> Step[T]:
        """Advance the producer by one element."""
        self._ensure_owner()
        if self._failure is not None:
            raise SequenceFailedError() from self._failure
        if self._finished or self._closed:
            return DONE
        if self._pulling:
            raise ConcurrentPullError()

        self._pulling = True
        try:
            value = await anext(typing.cast(AsyncIterator[T], self._producer))
        except StopAsyncIteration:
            self._finished = True
            return DONE
        except Exception as exc:
            self._failure = exc
            raise
        finally:
            self._pulling = False
        return Item(value)

    async def aclose(self) -> None:
        """
        Stop early and release whatever the producer holds.

        Idempotent. Later pulls return DONE.
        """
        if self._successor is not None:
            await self._successor.aclose()
            return
        if self._closed:
            return
        self._closed = True
        close = getattr(self._producer, "aclose", None)
        if close is not None:
            logger.debug("Closing producer %r", self._producer)
            await close()

    # Python protocols

    def __aiter__(self) -> Seq[T]:
        self._ensure_owner()
        return self

    async def __anext__(self) -> T:
        match await self.pull():
            case Item(value):
                return value
            case _:
                raise StopAsyncIteration

    async def __aenter__(self) -> Seq[T]:
        self._ensure_owner()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        if self._successor is not None:
            state = "moved"
        elif self._failure is not None:
            state = "failed"
        elif self._finished or self._closed:
            state = "done"
        else:
            state = "open"
        return f"Seq({self._producer!r}, {state})"

    # ------------------------------------------------------------------
    # Lazy operators
    # ------------------------------------------------------------------

    def drop(self, count: int) -> Seq[T]:
        from .transform.slice import drop
        return drop(self, count)

    def take(self, count: int) -> Seq[T]:
        from .transform.slice import take
        return take(self, count)

    def filter(self, predicate: Predicate[T]) -> Seq[T]:
        from .transform.filter import filter_seq
        return filter_seq(self, predicate)

    def map[R](self, mapper: Mapper[T, R]) -> Seq[R]:
        from .transform.map import map_seq
        return map_seq(self, mapper)

    def flat_map[R](self, mapper: Callable[[T], SourceLike[R]]) -> Seq[R]:
        from .transform.map import flat_map
        return flat_map(self, mapper)

    # ------------------------------------------------------------------
    # Eager operators
    # ------------------------------------------------------------------

    async def every(self, predicate: Predicate[T]) -> bool:
        from .collection.search import every
        return await every(self, predicate)

    async def some(self, predicate: Predicate[T]) -> bool:
        from .collection.search import some
        return await some(self, predicate)

    async def find(self, predicate: Predicate[T]) -> Result[T, NotFoundError]:
        from .collection.search import find
        return await find(self, predicate)

    async def for_each(self, callback: Callback[T]) -> None:
        from .collection.effects import for_each
        await for_each(self, callback)

    async def reduce[A](self, reducer: Reducer[A, T], *, initial: A) -> A:
        from .collection.fold import reduce
        return await reduce(self, reducer, initial=initial)

    async def to_list(self) -> list[T]:
        from .collection.fold import to_list
        return await to_list(self)

    # ------------------------------------------------------------------
    # Sink
    # ------------------------------------------------------------------

    def to_sink[S: ChunkSink[typing.Any]](self, sink: S) -> S:
        from .sink import to_sink
        return to_sink(self, sink)


__all__ = ("Producer", "Seq")
