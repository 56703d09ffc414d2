"""
Abort signal
============

Minimal one-shot cancellation primitive.

AbortController owns the right to abort; AbortSignal is the read side
handed to whoever must react. Aborting is monotonic: listeners run once,
synchronously, in registration order.
"""

from __future__ import annotations

import typing
from collections.abc import Callable


class AbortSignalLike(typing.Protocol):
    """What from_events() needs from an external cancellation signal."""

    @property
    def aborted(self) -> bool: ...

    def add_listener(self, callback: Callable[[], None], /) -> None: ...

    def remove_listener(self, callback: Callable[[], None], /) -> None: ...


class AbortSignal:
    __slots__ = ("_aborted", "_reason", "_listeners")

    def __init__(self) -> None:
        self._aborted = False
        self._reason: object = None
        self._listeners: list[Callable[[], None]] = []

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def reason(self) -> object:
        return self._reason

    def add_listener(self, callback: Callable[[], None], /) -> None:
        """Run callback on abort. Ignored if the signal already fired."""
        if not self._aborted:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None], /) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _fire(self, reason: object) -> None:
        if self._aborted:
            return
        self._aborted = True
        self._reason = reason
        listeners, self._listeners = self._listeners, []
        for callback in listeners:
            callback()

    def __repr__(self) -> str:
        return f"AbortSignal(aborted={self._aborted})"


class AbortController:
    """
    Issue aborts to an AbortSignal.

    Example:
        controller = AbortController()
        seq = from_events(bus, "message", abort=controller.signal)
        ...
        controller.abort()  # seq ends after the current pull
    """

    __slots__ = ("_signal",)

    def __init__(self) -> None:
        self._signal = AbortSignal()

    @property
    def signal(self) -> AbortSignal:
        return self._signal

    def abort(self, reason: object = None) -> None:
        self._signal._fire(reason)


__all__ = ("AbortController", "AbortSignal", "AbortSignalLike")
