from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from pullseq import ReadResult  # noqa: E402


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    amount: float
    paid: bool = True


@dataclass(slots=True)
class FakeSocketReader:
    """Hands out pre-recorded chunks, one per read."""

    chunks: list[bytes]
    delay_seconds: float = 0.0
    released: bool = False

    async def read(self) -> ReadResult[bytes]:
        await asyncio.sleep(self.delay_seconds)
        if not self.chunks:
            return ReadResult(done=True)
        return ReadResult(done=False, value=self.chunks.pop(0))

    def release_lock(self) -> None:
        self.released = True
        print("  [reader released]")


@dataclass(slots=True)
class FakeSocket:
    reader: FakeSocketReader

    def get_reader(self) -> FakeSocketReader:
        return self.reader


def _no_listeners() -> dict[str, list[Callable[[Any], None]]]:
    return {}


@dataclass(slots=True)
class FakeBus:
    """Synchronous in-process event emitter."""

    listeners: dict[str, list[Callable[[Any], None]]] = field(default_factory=_no_listeners)

    def add_listener(self, event: str, handler: Callable[[Any], None]) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self.listeners.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for handler in list(self.listeners.get(event, [])):
            handler(payload)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
