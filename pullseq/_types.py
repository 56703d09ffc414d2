"""
Core type definitions for pullseq.

Aliases shared by sources, operators and terminals.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, Awaitable, Callable, Iterable

if typing.TYPE_CHECKING:
    from .core import Producer, Seq

# ============================================================================
# Callbacks
# ============================================================================

# Predicate = function that tests an element
type Predicate[T] = Callable[[T], bool]

# Mapper = element transform, may return an awaitable
type Mapper[T, R] = Callable[[T], R | Awaitable[R]]

# Reducer = (accumulator, element, index) -> new accumulator, may be awaitable
type Reducer[A, T] = Callable[[A, T, int], A | Awaitable[A]]

# Callback = per-element side effect, may be awaitable
type Callback[T] = Callable[[T], None | Awaitable[None]]

# ============================================================================
# Sources
# ============================================================================

# SourceLike = anything from_iterable() accepts
# NOTE: Iterators and async iterators are covered by the iterable members.
type SourceLike[T] = Iterable[T] | AsyncIterable[T] | Seq[T] | Producer[T]


__all__ = (
    "Callback",
    "Mapper",
    "Predicate",
    "Reducer",
    "SourceLike",
)
