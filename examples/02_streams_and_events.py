from __future__ import annotations

import asyncio

from _infra import FakeBus, FakeSocket, FakeSocketReader, banner, run

from pullseq import AbortController, from_events, from_stream


async def main() -> None:
    banner("02: chunked stream, reader released on early stop")

    socket = FakeSocket(FakeSocketReader([b"HDR", b"row-1", b"row-2", b"row-3"], delay_seconds=0.01))
    async with from_stream(socket) as chunks:
        rows = await chunks.drop(1).map(bytes.decode).take(2).to_list()
    print(f"rows: {rows}, released={socket.reader.released}")

    banner("02: events buffered before the first pull, ended by a sibling event")

    bus = FakeBus()
    messages = from_events(bus, "message", abort="close")
    bus.emit("message", "hello")
    bus.emit("message", "world")
    bus.emit("close")
    # Abort wins over whatever is still buffered
    print(f"after close: {await messages.to_list()}")

    bus = FakeBus()
    messages = from_events(bus, "message", abort="close")
    bus.emit("message", "hello")
    bus.emit("message", "world")
    print(f"first two: {await messages.take(2).to_list()}")

    banner("02: events ended by an abort signal")

    controller = AbortController()
    ticks = from_events(bus, "tick", abort=controller.signal)

    async def producer() -> None:
        for n in range(5):
            await asyncio.sleep(0.01)
            bus.emit("tick", n)
        controller.abort()

    task = asyncio.create_task(producer())
    await ticks.for_each(lambda n: print(f"  tick {n}"))
    await task


if __name__ == "__main__":
    run(main)
