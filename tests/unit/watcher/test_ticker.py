"""Unit tests for Ticker."""

from __future__ import annotations

import asyncio

import pytest

from config_watcher.watcher.ticker import Ticker


class TestTicker:
    @pytest.mark.parametrize("interval", [0, -0.5])
    def test_rejects_non_positive_interval(self, interval: float) -> None:
        async def run() -> None:
            Ticker(interval)

        with pytest.raises(ValueError, match="positive"):
            asyncio.run(run())

    def test_ticks_after_interval(self) -> None:
        async def run() -> tuple[bool, float]:
            loop = asyncio.get_running_loop()
            ticker = Ticker(0.02)
            start = loop.time()
            fired = await ticker.wait(asyncio.Event())
            return fired, loop.time() - start

        fired, elapsed = asyncio.run(run())
        assert fired is True
        assert elapsed >= 0.015

    def test_stop_already_set_wins(self) -> None:
        async def run() -> bool:
            stop = asyncio.Event()
            stop.set()
            return await Ticker(0.01).wait(stop)

        assert asyncio.run(run()) is False

    def test_stop_interrupts_wait_promptly(self) -> None:
        async def run() -> tuple[bool, float]:
            loop = asyncio.get_running_loop()
            stop = asyncio.Event()
            ticker = Ticker(10.0)
            loop.call_later(0.01, stop.set)
            start = loop.time()
            fired = await ticker.wait(stop)
            return fired, loop.time() - start

        fired, elapsed = asyncio.run(run())
        assert fired is False
        assert elapsed < 1.0

    def test_fixed_rate_schedule(self) -> None:
        async def run() -> float:
            loop = asyncio.get_running_loop()
            stop = asyncio.Event()
            ticker = Ticker(0.02)
            start = loop.time()
            for _ in range(5):
                assert await ticker.wait(stop)
            return loop.time() - start

        elapsed = asyncio.run(run())
        assert 0.09 <= elapsed < 0.5

    def test_missed_ticks_are_dropped(self) -> None:
        async def run() -> tuple[float, float]:
            loop = asyncio.get_running_loop()
            stop = asyncio.Event()
            ticker = Ticker(0.01)
            await asyncio.sleep(0.05)  # fall five ticks behind
            start = loop.time()
            await ticker.wait(stop)
            catch_up = loop.time() - start
            start = loop.time()
            await ticker.wait(stop)
            return catch_up, loop.time() - start

        catch_up, next_tick = asyncio.run(run())
        assert catch_up < 0.01
        assert next_tick >= 0.005
