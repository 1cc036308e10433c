"""Tests for deferred execution helpers."""

import asyncio

import pytest

from sitesearch.search.timers import Debouncer, TaskScheduler


class TestTaskScheduler:
    @pytest.mark.asyncio
    async def test_runs_in_delay_order(self):
        calls = []
        scheduler = TaskScheduler()
        scheduler.schedule(0.02, calls.append, "second")
        scheduler.schedule(0.01, calls.append, "first")
        assert scheduler.pending == 2

        await asyncio.sleep(0.1)

        assert calls == ["first", "second"]
        assert scheduler.pending == 0

    @pytest.mark.asyncio
    async def test_cancel_all(self):
        calls = []
        scheduler = TaskScheduler()
        scheduler.schedule(0.01, calls.append, "never")
        scheduler.cancel_all()

        await asyncio.sleep(0.05)

        assert calls == []
        assert scheduler.pending == 0


class TestDebouncer:
    @pytest.mark.asyncio
    async def test_coalesces_triggers(self):
        calls = []
        debouncer = Debouncer(0.03, calls.append)
        for value in ["a", "ab", "abc"]:
            debouncer.trigger(value)
            await asyncio.sleep(0.005)
        assert debouncer.pending is True

        await asyncio.sleep(0.1)

        assert calls == ["abc"]
        assert debouncer.pending is False

    @pytest.mark.asyncio
    async def test_separate_windows_run_separately(self):
        calls = []
        debouncer = Debouncer(0.01, calls.append)
        debouncer.trigger("first")
        await asyncio.sleep(0.05)
        debouncer.trigger("second")
        await asyncio.sleep(0.05)

        assert calls == ["first", "second"]

    @pytest.mark.asyncio
    async def test_cancel(self):
        calls = []
        debouncer = Debouncer(0.01, calls.append)
        debouncer.trigger("x")
        debouncer.cancel()
        await asyncio.sleep(0.05)

        assert calls == []
