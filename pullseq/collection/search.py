"""
Search terminals
================

every/some/find drain the sequence until the answer is known, then close
it. Nothing past the deciding element is pulled.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import NotFoundError
from .._types import Predicate
from ..core import Seq


async def every[T](seq: Seq[T], predicate: Predicate[T]) -> bool:
    """True if predicate holds for all elements (vacuously true when empty)."""
    async with seq:
        async for value in seq:
            if not predicate(value):
                return False
    return True


async def some[T](seq: Seq[T], predicate: Predicate[T]) -> bool:
    """True as soon as one element satisfies predicate."""
    async with seq:
        async for value in seq:
            if predicate(value):
                return True
    return False


async def find[T](seq: Seq[T], predicate: Predicate[T]) -> Result[T, NotFoundError]:
    """
    First element satisfying predicate.

    Example:
        match await find(users, lambda u: u.is_admin):
            case Ok(admin):
                ...
            case Error(NotFoundError()):
                ...
    """
    async with seq:
        async for value in seq:
            if predicate(value):
                return Ok(value)
    return Error(NotFoundError())


__all__ = ("every", "find", "some")
