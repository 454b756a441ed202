"""Tests for reminder polling."""

import asyncio

import pytest
from conftest import BASE_TIME, make_task

from focus_matrix_mcp.core import ReminderLoop, due_reminders
from focus_matrix_mcp.enums import TaskStatus


class TestDueReminders:
    def test_window_bounds(self):
        tasks = [
            make_task("now", reminder=BASE_TIME),
            make_task("recent", reminder=BASE_TIME - 59_999),
            make_task("stale", reminder=BASE_TIME - 60_000),
            make_task("future", reminder=BASE_TIME + 1),
            make_task("none"),
        ]
        assert [t.id for t in due_reminders(tasks, BASE_TIME)] == ["now", "recent"]

    def test_done_tasks_are_skipped(self):
        tasks = [
            make_task("done", status=TaskStatus.DONE, completed_at=BASE_TIME, reminder=BASE_TIME),
            make_task("active", status=TaskStatus.IN_PROGRESS, reminder=BASE_TIME),
        ]
        assert [t.id for t in due_reminders(tasks, BASE_TIME)] == ["active"]


class TestReminderLoop:
    def test_tick_delivers_once(self, clock):
        tasks = [make_task("a", reminder=BASE_TIME)]
        seen = []
        loop = ReminderLoop(lambda: tasks, clock, notify=seen.append)

        assert [t.id for t in loop.tick()] == ["a"]
        clock.advance(30_000)
        assert loop.tick() == []
        assert [t.id for t in seen] == ["a"]

    def test_failing_notifier_does_not_stop_others(self, clock):
        tasks = [make_task("bad", reminder=BASE_TIME), make_task("good", reminder=BASE_TIME)]

        def notify(task):
            if task.id == "bad":
                raise RuntimeError("boom")

        loop = ReminderLoop(lambda: tasks, clock, notify=notify)
        assert [t.id for t in loop.tick()] == ["good"]

    @pytest.mark.asyncio
    async def test_start_and_stop(self, clock):
        seen = []
        tasks = [make_task("a", reminder=BASE_TIME)]
        loop = ReminderLoop(lambda: tasks, clock, notify=seen.append, interval=0.01)

        loop.start()
        assert loop.running
        for _ in range(50):
            if seen:
                break
            await asyncio.sleep(0.01)
        await loop.stop()

        assert not loop.running
        assert [t.id for t in seen] == ["a"]

    @pytest.mark.asyncio
    async def test_stop_without_start(self, clock):
        loop = ReminderLoop(lambda: [], clock)
        await loop.stop()
        assert not loop.running

    def test_delivered_keys_expire_with_window(self, clock):
        tasks = [make_task("a", reminder=BASE_TIME)]
        loop = ReminderLoop(lambda: tasks, clock, notify=lambda task: None)

        loop.tick()
        assert loop._delivered == {("a", BASE_TIME)}
        clock.advance(60_000)
        assert loop.tick() == []
        assert loop._delivered == set()

    @pytest.mark.asyncio
    async def test_failing_task_source_keeps_loop_running(self, clock):
        calls = []

        def get_tasks():
            calls.append(1)
            raise RuntimeError("store unavailable")

        loop = ReminderLoop(get_tasks, clock, interval=0.01)
        loop.start()
        for _ in range(50):
            if len(calls) >= 2:
                break
            await asyncio.sleep(0.01)

        assert len(calls) >= 2
        assert loop.running
        await loop.stop()
        assert not loop.running
