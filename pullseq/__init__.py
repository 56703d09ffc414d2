"""
pullseq - lazy pull-based sequences for asyncio.

One sequence type over many sources, with composable operators:

    from pullseq import from_iterable

    total = await (
        from_iterable(records)
        .drop(1)
        .filter(lambda r: r.valid)
        .map(enrich)          # may be async
        .take(100)
        .reduce(lambda acc, r, i: acc + r.amount, initial=0)
    )

Architecture:
- Seq (core) owns one producer and exposes pull() -> Step
- sources normalize iterables, chunked streams and event emitters into Seq
- transform holds lazy operators, collection holds terminals
- sink exposes a Seq to a demand-driven destination
"""

# Result model
from .step import DONE, Done, Item, Step

# Core
from .core import Producer, Seq

# Types
from ._types import Callback, Mapper, Predicate, Reducer, SourceLike

# Sources
from .sources import (
    ChunkReader,
    ChunkStream,
    EventSource,
    EventsPolicy,
    ReadResult,
    SourceKind,
    from_events,
    from_iterable,
    from_stream,
    probe,
)

# Abort primitive
from .signal import AbortController, AbortSignal, AbortSignalLike

# Lazy operators
from .transform import drop, filter_seq, flat_map, map_seq, take

# Eager operators
from .collection import every, find, for_each, reduce, some, to_list

# Sink
from .sink import ChunkSink, to_sink

# Errors
from ._errors import (
    ConcurrentPullError,
    EventBufferOverflowError,
    NotFoundError,
    SequenceFailedError,
    SequenceMovedError,
    UnsupportedSourceError,
)

__all__ = (
    # Result model
    "DONE",
    "Done",
    "Item",
    "Step",
    # Core
    "Producer",
    "Seq",
    # Types
    "Callback",
    "Mapper",
    "Predicate",
    "Reducer",
    "SourceLike",
    # Sources
    "ChunkReader",
    "ChunkStream",
    "EventSource",
    "EventsPolicy",
    "ReadResult",
    "SourceKind",
    "from_events",
    "from_iterable",
    "from_stream",
    "probe",
    # Abort primitive
    "AbortController",
    "AbortSignal",
    "AbortSignalLike",
    # Lazy operators
    "drop",
    "filter_seq",
    "flat_map",
    "map_seq",
    "take",
    # Eager operators
    "every",
    "find",
    "for_each",
    "reduce",
    "some",
    "to_list",
    # Sink
    "ChunkSink",
    "to_sink",
    # Errors
    "ConcurrentPullError",
    "EventBufferOverflowError",
    "NotFoundError",
    "SequenceFailedError",
    "SequenceMovedError",
    "UnsupportedSourceError",
)
