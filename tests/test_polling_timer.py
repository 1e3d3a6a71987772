"""Tests for the fixed-period poll timer."""

from __future__ import annotations

import asyncio

import pytest

from finanalyzer.services import PollTimer

INTERVAL = 0.01


def test_rejects_non_positive_interval():
    async def noop() -> None:
        return None

    with pytest.raises(ValueError):
        PollTimer(0, noop)


def test_start_requires_running_loop():
    async def noop() -> None:
        return None

    timer = PollTimer(INTERVAL, noop)
    with pytest.raises(RuntimeError):
        timer.start()


@pytest.mark.asyncio
async def test_ticks_repeat_until_cancelled():
    ticks: list[int] = []

    async def tick() -> None:
        ticks.append(len(ticks))

    timer = PollTimer(INTERVAL, tick)
    timer.start()
    await asyncio.sleep(INTERVAL * 5)
    timer.cancel()
    seen = len(ticks)
    await asyncio.sleep(INTERVAL * 4)

    assert seen >= 2
    assert len(ticks) == seen
    assert not timer.active


@pytest.mark.asyncio
async def test_cancel_is_idempotent():
    async def noop() -> None:
        return None

    timer = PollTimer(INTERVAL, noop)
    timer.cancel()
    timer.start()
    timer.cancel()
    timer.cancel()

    assert not timer.active


@pytest.mark.asyncio
async def test_cancel_stops_in_flight_ticks():
    started = asyncio.Event()
    finished: list[bool] = []

    async def slow_tick() -> None:
        started.set()
        await asyncio.sleep(1)
        finished.append(True)

    timer = PollTimer(INTERVAL, slow_tick)
    timer.start()
    await asyncio.wait_for(started.wait(), timeout=1)
    timer.cancel()
    await asyncio.sleep(INTERVAL * 2)

    assert finished == []
    assert timer.pending_ticks == 0


@pytest.mark.asyncio
async def test_failing_tick_does_not_stop_timer():
    calls: list[int] = []

    async def flaky() -> None:
        calls.append(1)
        raise KeyError("boom")

    timer = PollTimer(INTERVAL, flaky)
    timer.start()
    await asyncio.sleep(INTERVAL * 5)
    timer.cancel()

    assert len(calls) >= 2


@pytest.mark.asyncio
async def test_tick_can_cancel_its_own_timer():
    calls: list[int] = []
    timer: PollTimer

    async def tick() -> None:
        calls.append(1)
        timer.cancel()
        await asyncio.sleep(0)
        calls.append(2)

    timer = PollTimer(INTERVAL, tick)
    timer.start()
    await asyncio.sleep(INTERVAL * 4)

    assert calls == [1, 2]
    assert not timer.active
