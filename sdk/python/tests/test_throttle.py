"""Tests for the request throttle."""

import asyncio

import pytest

from zendesk_sdk.models import ThrottleSpec
from zendesk_sdk.throttle import RequestThrottle, interval_seconds


@pytest.mark.parametrize(
    "setting, expected",
    [
        (True, 1.0),
        (None, 1.0),
        (250, 0.25),
        ("500", 0.5),
        ({"interval": 200}, 0.2),
        ({"window": 10, "limit": 4}, 2.5),
        ({"window": 1, "limit": 3}, 0.334),
        (ThrottleSpec(window=2, limit=1), 2.0),
    ],
)
def test_interval_seconds(setting, expected):
    assert interval_seconds(setting) == pytest.approx(expected)


class TestRequestThrottle:
    @pytest.mark.asyncio
    async def test_calls_run_in_submission_order(self):
        throttle = RequestThrottle(5)
        order = []

        async def call(n):
            order.append(n)
            return n * 10

        futures = [throttle.submit(call, n) for n in range(4)]
        results = await asyncio.gather(*futures)

        assert results == [0, 10, 20, 30]
        assert order == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_sync_callables(self):
        throttle = RequestThrottle(5)
        assert await throttle.submit(lambda a, b=0: a + b, 2, b=3) == 5

    @pytest.mark.asyncio
    async def test_exceptions_reach_the_caller(self):
        throttle = RequestThrottle(5)

        async def fail():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            await throttle.submit(fail)

    @pytest.mark.asyncio
    async def test_pending_entries(self):
        throttle = RequestThrottle(20)

        async def noop():
            return None

        futures = [throttle.submit(noop) for _ in range(3)]
        pending = throttle.pending()

        assert [entry.position for entry in pending] == [1, 2, 3]
        assert [entry.time_until_call for entry in pending] == pytest.approx([0.02, 0.04, 0.06])
        assert throttle.running

        await asyncio.gather(*futures)
        await asyncio.sleep(0)

        assert throttle.pending() == []
        assert not throttle.running

    @pytest.mark.asyncio
    async def test_timer_restarts_after_draining(self):
        throttle = RequestThrottle(5)

        assert await throttle.submit(lambda: "first") == "first"
        await asyncio.sleep(0)
        assert not throttle.running

        assert await throttle.submit(lambda: "second") == "second"

    @pytest.mark.asyncio
    async def test_calls_are_paced(self):
        throttle = RequestThrottle(20)
        loop = asyncio.get_running_loop()
        started = loop.time()

        await asyncio.gather(*(throttle.submit(lambda: None) for _ in range(3)))

        assert loop.time() - started >= 0.055

    @pytest.mark.asyncio
    async def test_wrap(self):
        throttle = RequestThrottle(5)

        async def double(value):
            return value * 2

        throttled = throttle.wrap(double)

        assert throttled.__name__ == "double"
        assert await throttled(21) == 42
