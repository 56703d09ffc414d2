"""
Step - result of a single pull
==============================

Every `Seq.pull()` returns one of two shapes:
- Item(value): the producer yielded a value
- DONE: the producer is exhausted

Shapes are pattern-matchable:

    match await seq.pull():
        case Item(value):
            ...
        case Done():
            ...
"""

from __future__ import annotations

import typing


class Item[T]:
    """A yielded element."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @property
    def done(self) -> typing.Literal[False]:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Item) and other._value == self._value

    def __hash__(self) -> int:
        return hash((Item, self._value))

    def __repr__(self) -> str:
        return f"Item({self._value!r})"


class Done:
    """Termination marker. Use the `DONE` singleton."""

    __slots__ = ()
    _instance: typing.ClassVar[Done | None] = None

    def __new__(cls) -> Done:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def done(self) -> typing.Literal[True]:
        return True

    def __repr__(self) -> str:
        return "DONE"


DONE: typing.Final = Done()

type Step[T] = Item[T] | Done


__all__ = ("DONE", "Done", "Item", "Step")
