from .events import EventSource, EventsPolicy, from_events
from .iterable import SourceKind, from_iterable, probe
from .stream import ChunkReader, ChunkStream, ReadResult, from_stream

__all__ = (
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
)
