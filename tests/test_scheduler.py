"""
Tests for the request scheduler.

Feature: request-scheduler
"""

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from contrib_tracker.scheduler import LOW_WATER_MARK, RequestScheduler
from contrib_tracker.testing import FakeClock


@pytest.mark.asyncio
async def test_calls_run_in_fifo_order_without_overlap() -> None:
    """Calls start in enqueue order and never overlap, whatever their duration."""
    scheduler = RequestScheduler(min_delay=0)
    started: list[str] = []
    in_flight = 0
    max_in_flight = 0

    def make_call(name: str, delay: float):
        async def call() -> str:
            nonlocal in_flight, max_in_flight
            started.append(name)
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            await asyncio.sleep(delay)
            in_flight -= 1
            return name

        return call

    futures = [
        scheduler.enqueue(make_call("A", 0.03)),
        scheduler.enqueue(make_call("B", 0.01)),
        scheduler.enqueue(make_call("C", 0.02)),
    ]
    results = await asyncio.gather(*futures)

    assert results == ["A", "B", "C"]
    assert started == ["A", "B", "C"]
    assert max_in_flight == 1


@pytest.mark.asyncio
async def test_enqueue_does_not_invoke_call_synchronously() -> None:
    scheduler = RequestScheduler(min_delay=0)
    invoked = False

    async def call() -> int:
        nonlocal invoked
        invoked = True
        return 1

    future = scheduler.enqueue(call)
    assert not invoked
    assert scheduler.is_draining
    assert await future == 1
    assert invoked


@pytest.mark.asyncio
async def test_failure_propagates_and_queue_keeps_draining() -> None:
    scheduler = RequestScheduler(min_delay=0)

    async def boom() -> None:
        raise ValueError("boom")

    async def ok() -> str:
        return "ok"

    failing = scheduler.enqueue(boom)
    succeeding = scheduler.enqueue(ok)

    with pytest.raises(ValueError, match="boom"):
        await failing
    assert await succeeding == "ok"
    assert not scheduler.is_draining
    assert scheduler.pending == 0


@pytest.mark.asyncio
async def test_queue_pauses_until_reset_at_low_water_mark() -> None:
    """With 3 requests left and reset 2s away, nothing dispatches before 2s."""
    clock = FakeClock()
    scheduler = RequestScheduler(clock=clock, sleep=clock.sleep)
    start = clock.now
    scheduler.update_rate_limit(remaining=3, reset=start + 2, limit=5000)
    dispatched_at: list[float] = []

    async def call() -> str:
        dispatched_at.append(clock.now)
        return "done"

    assert await scheduler.enqueue(call) == "done"
    assert dispatched_at[0] >= start + 2
    assert clock.sleeps[0] == pytest.approx(2)


@pytest.mark.asyncio
async def test_no_pause_when_reset_already_passed() -> None:
    clock = FakeClock()
    scheduler = RequestScheduler(clock=clock, sleep=clock.sleep)
    scheduler.update_rate_limit(remaining=0, reset=clock.now - 10, limit=5000)

    async def call() -> int:
        return 1

    assert await scheduler.enqueue(call) == 1
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_minimum_spacing_between_dispatches() -> None:
    clock = FakeClock()
    scheduler = RequestScheduler(min_delay=0.1, clock=clock, sleep=clock.sleep)
    dispatched_at: list[float] = []

    async def call() -> None:
        dispatched_at.append(clock.now)

    await asyncio.gather(scheduler.enqueue(call), scheduler.enqueue(call), scheduler.enqueue(call))

    assert clock.sleeps == [pytest.approx(0.1), pytest.approx(0.1)]
    gaps = [b - a for a, b in zip(dispatched_at, dispatched_at[1:])]
    assert gaps == [pytest.approx(0.1, abs=1e-6), pytest.approx(0.1, abs=1e-6)]


@pytest.mark.asyncio
async def test_scheduler_returns_to_idle_and_restarts() -> None:
    scheduler = RequestScheduler(min_delay=0)

    async def call(value: int = 1) -> int:
        return value

    assert await scheduler.enqueue(call) == 1
    await asyncio.sleep(0)
    assert not scheduler.is_draining

    assert await scheduler.enqueue(lambda: call(2)) == 2


def test_can_make_request_without_snapshot() -> None:
    assert RequestScheduler().can_make_request()


@given(remaining=st.integers(min_value=0, max_value=10_000))
@settings(max_examples=100)
def test_rate_limit_gate(remaining: int) -> None:
    """can_make_request is False exactly when remaining <= 5."""
    scheduler = RequestScheduler()
    scheduler.update_rate_limit(remaining=remaining, reset=0, limit=5000)
    assert scheduler.can_make_request() == (remaining > LOW_WATER_MARK)
    assert scheduler.remaining_requests == remaining


def test_update_from_headers() -> None:
    scheduler = RequestScheduler()
    scheduler.update_from_headers(
        {
            "x-ratelimit-remaining": "42",
            "x-ratelimit-reset": "1700000000",
            "x-ratelimit-limit": "5000",
        }
    )
    info = scheduler.rate_limit
    assert info is not None
    assert (info.remaining, info.reset, info.limit) == (42, 1_700_000_000, 5000)


def test_update_from_headers_ignores_missing_and_malformed_values() -> None:
    scheduler = RequestScheduler()
    scheduler.update_from_headers({"content-type": "application/json"})
    assert scheduler.rate_limit is None

    scheduler.update_from_headers({"x-ratelimit-remaining": "lots"})
    assert scheduler.rate_limit is None
