from __future__ import annotations

import asyncio

import pytest
from fakes import FakeEmitter, FakeReader, FakeSignal, FakeStream

from pullseq import (
    DONE,
    AbortController,
    EventBufferOverflowError,
    EventsPolicy,
    Item,
    SequenceFailedError,
    SourceKind,
    UnsupportedSourceError,
    from_events,
    from_iterable,
    from_stream,
    probe,
)


async def letters():
    for letter in "xyz":
        yield letter


class AsyncBox:
    """Async iterable that is not itself an iterator."""

    def __init__(self, items: list[int]) -> None:
        self.items = items

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for item in self.items:
            yield item


class Countdown:
    """Bare producer: only __anext__."""

    def __init__(self, start: int) -> None:
        self.current = start

    async def __anext__(self) -> int:
        if self.current == 0:
            raise StopAsyncIteration
        self.current -= 1
        return self.current + 1


# ============================================================================
# Generic normalization
# ============================================================================


def test_probe_picks_capability_in_order():
    assert probe([1, 2]) is SourceKind.SYNC
    assert probe(iter([1, 2])) is SourceKind.SYNC
    assert probe(letters()) is SourceKind.ASYNC
    assert probe(AsyncBox([1])) is SourceKind.ASYNC
    assert probe(Countdown(1)) is SourceKind.PRODUCER
    assert probe(from_iterable([])) is SourceKind.SEQ


def test_probe_rejects_non_sources():
    with pytest.raises(UnsupportedSourceError):
        probe(42)
    with pytest.raises(TypeError):
        from_iterable(object())


@pytest.mark.asyncio
async def test_from_iterable_accepts_every_shape():
    assert await from_iterable([1, 2, 3]).to_list() == [1, 2, 3]
    assert await from_iterable(iter((4, 5))).to_list() == [4, 5]
    assert await from_iterable(n * n for n in range(3)).to_list() == [0, 1, 4]
    assert await from_iterable(letters()).to_list() == ["x", "y", "z"]
    assert await from_iterable(AsyncBox([7, 8])).to_list() == [7, 8]
    assert await from_iterable(Countdown(3)).to_list() == [3, 2, 1]


@pytest.mark.asyncio
async def test_from_iterable_moves_existing_seq():
    original = from_iterable([1, 2])
    adopted = from_iterable(original)

    assert original.moved
    assert await adopted.to_list() == [1, 2]


# ============================================================================
# Chunked stream
# ============================================================================


@pytest.mark.asyncio
async def test_stream_releases_reader_after_exhaustion():
    stream = FakeStream(FakeReader([b"a", b"b", b"c"]))

    assert await from_stream(stream).to_list() == [b"a", b"b", b"c"]
    assert stream.acquired == 1
    assert stream.reader.releases == 1


@pytest.mark.asyncio
async def test_stream_releases_reader_on_early_stop():
    stream = FakeStream(FakeReader([b"a", b"b", b"c"]))
    seq = from_stream(stream)

    assert await seq.pull() == Item(b"a")
    await seq.aclose()
    await seq.aclose()

    assert stream.reader.releases == 1
    assert stream.reader.reads == 1


@pytest.mark.asyncio
async def test_stream_take_stops_reading_and_releases():
    stream = FakeStream(FakeReader([b"a", b"b", b"c"]))

    assert await from_stream(stream).take(2).to_list() == [b"a", b"b"]
    assert stream.reader.reads == 2
    assert stream.reader.releases == 1


@pytest.mark.asyncio
async def test_stream_releases_reader_on_read_failure():
    stream = FakeStream(FakeReader([b"a", b"b"], fail_at=1))

    with pytest.raises(OSError, match="connection reset"):
        await from_stream(stream).to_list()
    assert stream.reader.releases == 1


@pytest.mark.asyncio
async def test_stream_acquires_reader_lazily():
    stream = FakeStream(FakeReader([b"a"]))
    seq = from_stream(stream)

    assert stream.acquired == 0
    await seq.aclose()
    assert stream.acquired == 0
    assert stream.reader.releases == 0


@pytest.mark.asyncio
async def test_stream_scoped_with_operators():
    stream = FakeStream(FakeReader([b"a", b"b", b"c"]))

    async with from_stream(stream) as chunks:
        upper = chunks.map(bytes.upper)
        assert await upper.pull() == Item(b"A")

    assert stream.reader.releases == 1


# ============================================================================
# Discrete events
# ============================================================================


@pytest.mark.asyncio
async def test_events_buffered_before_pull_keep_order():
    emitter = FakeEmitter()
    seq = from_events(emitter, "message")

    emitter.emit("message", "e1")
    emitter.emit("message", "e2")

    assert await seq.pull() == Item("e1")
    assert await seq.pull() == Item("e2")


@pytest.mark.asyncio
async def test_events_pull_waits_for_delivery():
    emitter = FakeEmitter()
    seq = from_events(emitter, "message")

    pending = asyncio.create_task(seq.pull())
    await asyncio.sleep(0)
    assert not pending.done()

    emitter.emit("message", "late")
    assert await pending == Item("late")


@pytest.mark.asyncio
async def test_events_abort_event_terminates_and_unsubscribes():
    emitter = FakeEmitter()
    seq = from_events(emitter, "message", abort="close")

    emitter.emit("message", "e1")
    assert await seq.pull() == Item("e1")

    emitter.emit("close")
    assert await seq.pull() is DONE
    assert emitter.count("message") == 0
    assert emitter.count("close") == 0

    emitter.emit("message", "ignored")
    assert await seq.pull() is DONE


@pytest.mark.asyncio
async def test_events_abort_signal_wakes_waiting_pull():
    emitter = FakeEmitter()
    controller = AbortController()
    seq = from_events(emitter, "message", abort=controller.signal)

    pending = asyncio.create_task(seq.pull())
    await asyncio.sleep(0)

    controller.abort()
    assert await pending is DONE
    assert emitter.count("message") == 0


@pytest.mark.asyncio
async def test_events_already_aborted_signal():
    emitter = FakeEmitter()
    controller = AbortController()
    controller.abort("shutdown")

    seq = from_events(emitter, "message", abort=controller.signal)

    assert controller.signal.reason == "shutdown"
    assert await seq.pull() is DONE
    assert emitter.count("message") == 0


@pytest.mark.asyncio
async def test_events_aclose_tears_down_listeners():
    emitter = FakeEmitter()
    seq = from_events(emitter, "message", abort="close")

    await seq.aclose()

    assert emitter.count("message") == 0
    assert emitter.count("close") == 0
    assert await seq.pull() is DONE


@pytest.mark.asyncio
async def test_events_bounded_buffer_overflow():
    emitter = FakeEmitter()
    seq = from_events(emitter, "message", policy=EventsPolicy(max_buffered=2))

    for n in range(3):
        emitter.emit("message", n)

    with pytest.raises(EventBufferOverflowError) as info:
        await seq.pull()
    assert info.value.limit == 2
    assert emitter.count("message") == 0
    with pytest.raises(SequenceFailedError):
        await seq.pull()


def test_events_policy_validates_bound():
    with pytest.raises(ValueError):
        EventsPolicy(max_buffered=0)


@pytest.mark.asyncio
async def test_events_compose_with_operators():
    emitter = FakeEmitter()
    seq = from_events(emitter, "tick", abort="stop")

    for n in range(6):
        emitter.emit("tick", n)
    emitter.emit("stop")

    # Abort wins over whatever is still buffered
    assert await seq.filter(lambda n: n % 2 == 0).to_list() == []

    emitter = FakeEmitter()
    seq = from_events(emitter, "tick")
    for n in range(6):
        emitter.emit("tick", n)

    assert await seq.filter(lambda n: n % 2 == 0).take(2).to_list() == [0, 2]
    assert emitter.count("tick") == 0


@pytest.mark.asyncio
async def test_events_release_shared_signal_on_every_exit():
    shutdown = FakeSignal()

    for _ in range(50):
        emitter = FakeEmitter()
        seq = from_events(emitter, "message", abort=shutdown)
        emitter.emit("message", "hi")
        assert await seq.take(1).to_list() == ["hi"]
    assert shutdown.listeners == []

    closed = from_events(FakeEmitter(), "message", abort=shutdown)
    assert len(shutdown.listeners) == 1
    await closed.aclose()
    assert shutdown.listeners == []

    overflowing = FakeEmitter()
    seq = from_events(overflowing, "message", abort=shutdown, policy=EventsPolicy(max_buffered=1))
    overflowing.emit("message", 1)
    overflowing.emit("message", 2)
    assert shutdown.listeners == []
    with pytest.raises(EventBufferOverflowError):
        await seq.pull()


@pytest.mark.asyncio
async def test_events_shared_signal_abort_ends_sequence():
    shutdown = FakeSignal()
    emitter = FakeEmitter()
    seq = from_events(emitter, "message", abort=shutdown)

    pending = asyncio.create_task(seq.pull())
    await asyncio.sleep(0)
    shutdown.fire()

    assert await pending is DONE
    assert shutdown.listeners == []
    assert emitter.count("message") == 0
