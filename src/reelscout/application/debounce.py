"""Restartable delay-and-collapse timer for changing input values."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback later (``asyncio`` loops qualify)."""

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> TimerHandle: ...


class Debouncer(Generic[T]):
    """Settle on the last pushed value once input has been quiet for ``delay``.

    Every ``push()`` cancels the pending timer and arms a new one, so a
    burst of keystrokes produces exactly one ``on_settle`` call carrying
    the final value. Nothing is queued.

    Example::

        debouncer = Debouncer(0.8, lambda term: print("search", term))
        debouncer.push("m")
        debouncer.push("ma")  # only "ma" settles, 0.8 s after this call
    """

    def __init__(
        self,
        delay: float,
        on_settle: Callable[[T], Any],
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay
        self._on_settle = on_settle
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        self.cancel()
        scheduler = self._scheduler or asyncio.get_running_loop()
        self._handle = scheduler.call_later(self._delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: T) -> None:
        self._handle = None
        self._on_settle(value)
