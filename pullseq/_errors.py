from __future__ import annotations

import typing


class SequenceMovedError(Exception):
    """Sequence was handed over to an operator and can no longer be pulled."""

    def __init__(self) -> None:
        super().__init__("Sequence was moved into another sequence and cannot be used")


class SequenceFailedError(Exception):
    """Pull on a sequence whose producer already raised."""

    def __init__(self) -> None:
        super().__init__("Sequence producer failed earlier; sequence is unusable")


class ConcurrentPullError(Exception):
    """Second pull issued while another pull is still waiting."""

    def __init__(self) -> None:
        super().__init__("Only one outstanding pull is supported")


class EventBufferOverflowError(Exception):
    """More events were delivered than the buffer may hold."""

    limit: int

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Event buffer overflowed (max_buffered={limit})")


class UnsupportedSourceError(TypeError):
    """Object exposes neither iteration protocol nor __anext__."""

    source: typing.Any

    def __init__(self, source: typing.Any) -> None:
        self.source = source
        super().__init__(f"Cannot build a sequence from {type(source).__name__!r}")


class NotFoundError(Exception):
    """find() exhausted the sequence without a match."""

    def __init__(self) -> None:
        super().__init__("No element matched the predicate")


__all__ = (
    "ConcurrentPullError",
    "EventBufferOverflowError",
    "NotFoundError",
    "SequenceFailedError",
    "SequenceMovedError",
    "UnsupportedSourceError",
)
