"""
Discrete event source
=====================

from_events() collects events delivered by an emitter into a Seq.

Events may arrive before anyone pulls, so deliveries go into a FIFO buffer
and a pull either takes the oldest buffered event or waits for the next
delivery. The sequence ends when its abort trigger fires:
- a sibling event on the same emitter (`abort="close"`)
- an external AbortSignalLike (`abort=controller.signal`)
- aclose() on the Seq itself

On abort every listener registered here is removed from the emitter, so
nothing is buffered afterwards.

NOTE: One consumer only. Seq.pull() rejects a second concurrent pull with
      ConcurrentPullError.
"""

from __future__ import annotations

import asyncio
import collections
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import EventBufferOverflowError
from ..core import Seq
from ..signal import AbortController, AbortSignalLike

logger = logging.getLogger(__name__)


class EventSource[E](typing.Protocol):
    """Emitter with synchronous delivery."""

    def add_listener(self, event: str, handler: Callable[[E], None], /) -> None: ...

    def remove_listener(self, event: str, handler: Callable[[E], None], /) -> None: ...


@dataclass(frozen=True, slots=True)
class EventsPolicy:
    """
    Event buffer configuration.

    max_buffered=None keeps the buffer unbounded. With a bound, a delivery
    that finds the buffer full ends the sequence with EventBufferOverflowError.
    """

    max_buffered: int | None = None

    def __post_init__(self) -> None:
        if self.max_buffered is not None and self.max_buffered < 1:
            raise ValueError("EventsPolicy.max_buffered must be >= 1")


class _EventProducer[E]:
    """Buffer of delivered events plus a single-slot wake."""

    __slots__ = ("_controller", "_limit", "_buffer", "_wake", "_overflow")

    def __init__(self, controller: AbortController, limit: int | None) -> None:
        self._controller = controller
        self._limit = limit
        self._buffer: collections.deque[E] = collections.deque()
        self._wake = asyncio.Event()
        self._overflow: EventBufferOverflowError | None = None
        controller.signal.add_listener(self._wake.set)

    def push(self, event: E) -> None:
        if self._limit is not None and len(self._buffer) >= self._limit:
            logger.warning("Event buffer full (%d), aborting sequence", self._limit)
            self._overflow = EventBufferOverflowError(self._limit)
            self._controller.abort(self._overflow)
            return
        self._buffer.append(event)
        self._wake.set()

    async def __anext__(self) -> E:
        while True:
            if self._overflow is not None:
                raise self._overflow
            if self._controller.signal.aborted:
                raise StopAsyncIteration
            if self._buffer:
                return self._buffer.popleft()
            self._wake.clear()
            await self._wake.wait()

    async def aclose(self) -> None:
        self._controller.abort()

    def __repr__(self) -> str:
        return f"_EventProducer(buffered={len(self._buffer)}, aborted={self._controller.signal.aborted})"


def from_events[E](
    source: EventSource[E],
    event: str,
    *,
    abort: str | AbortSignalLike | None = None,
    policy: EventsPolicy | None = None,
) -> Seq[E]:
    """
    Sequence of `event` deliveries from source, in arrival order.

    Subscribes immediately: events delivered before the first pull are kept.

    Example:
        messages = from_events(ws, "message", abort="close")
        async for message in messages.take(10):
            ...
    """
    policy = policy or EventsPolicy()
    controller = AbortController()
    producer: _EventProducer[E] = _EventProducer(controller, policy.max_buffered)

    push = producer.push
    subscriptions: list[tuple[str, Callable[[typing.Any], None]]] = [(event, push)]
    source.add_listener(event, push)

    if isinstance(abort, str):
        def on_abort_event(_: object) -> None:
            controller.abort()

        subscriptions.append((abort, on_abort_event))
        source.add_listener(abort, on_abort_event)

    external = abort if abort is not None and not isinstance(abort, str) else None
    on_external_abort = controller.abort

    def teardown() -> None:
        for name, handler in subscriptions:
            source.remove_listener(name, handler)
        if external is not None:
            external.remove_listener(on_external_abort)
        logger.debug("Event sequence for %r aborted, %d listeners removed", event, len(subscriptions))

    controller.signal.add_listener(teardown)

    if external is not None:
        if external.aborted:
            controller.abort()
        else:
            external.add_listener(on_external_abort)

    return Seq(producer)


__all__ = ("EventSource", "EventsPolicy", "from_events")
