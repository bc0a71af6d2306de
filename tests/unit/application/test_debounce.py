"""Tests for Debouncer."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

from reelscout.application.debounce import Debouncer

# ---------------------------------------------------------------------------
# Virtual clock scheduler
# ---------------------------------------------------------------------------


class _FakeHandle:
    def __init__(self, when: float, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Deterministic stand-in for an event loop's ``call_later``."""

    def __init__(self) -> None:
        self.now = 0.0
        self._handles: list[_FakeHandle] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> _FakeHandle:
        handle = _FakeHandle(self.now + delay, callback, args)
        self._handles.append(handle)
        return handle

    def advance_to(self, t: float) -> None:
        due = sorted(
            (h for h in self._handles if not h.cancelled and h.when <= t),
            key=lambda h: h.when,
        )
        for handle in due:
            self.now = handle.when
            self._handles.remove(handle)
            handle.callback(*handle.args)
        self.now = t


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


# ---------------------------------------------------------------------------
# Behaviour
# ---------------------------------------------------------------------------


class TestDebouncer:
    def test_burst_settles_once_on_last_value(self, scheduler: FakeScheduler) -> None:
        settled: list[tuple[float, str]] = []
        debouncer: Debouncer[str] = Debouncer(
            0.8, lambda v: settled.append((scheduler.now, v)), scheduler=scheduler
        )

        for t, value in [(0.0, "m"), (0.1, "ma"), (0.2, "mat")]:
            scheduler.advance_to(t)
            debouncer.push(value)

        scheduler.advance_to(5.0)

        assert settled == [(pytest.approx(1.0), "mat")]

    def test_nothing_settles_before_delay(self, scheduler: FakeScheduler) -> None:
        settled: list[str] = []
        debouncer: Debouncer[str] = Debouncer(0.8, settled.append, scheduler=scheduler)

        debouncer.push("a")
        scheduler.advance_to(0.79)

        assert settled == []
        assert debouncer.pending is True

    def test_separate_pauses_settle_separately(self, scheduler: FakeScheduler) -> None:
        settled: list[str] = []
        debouncer: Debouncer[str] = Debouncer(0.8, settled.append, scheduler=scheduler)

        debouncer.push("dune")
        scheduler.advance_to(1.0)
        debouncer.push("alien")
        scheduler.advance_to(2.0)

        assert settled == ["dune", "alien"]
        assert debouncer.pending is False

    def test_cancel_drops_pending_value(self, scheduler: FakeScheduler) -> None:
        settled: list[str] = []
        debouncer: Debouncer[str] = Debouncer(0.8, settled.append, scheduler=scheduler)

        debouncer.push("a")
        debouncer.cancel()
        scheduler.advance_to(2.0)

        assert settled == []
        assert debouncer.pending is False

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            Debouncer(-1.0, lambda _: None)

    async def test_default_scheduler_is_running_loop(self) -> None:
        settled: list[str] = []
        done = asyncio.Event()

        def on_settle(value: str) -> None:
            settled.append(value)
            done.set()

        debouncer: Debouncer[str] = Debouncer(0.02, on_settle)
        debouncer.push("x")
        debouncer.push("xy")

        await asyncio.wait_for(done.wait(), timeout=1.0)

        assert settled == ["xy"]
