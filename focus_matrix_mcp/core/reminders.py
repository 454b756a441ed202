"""Periodic reminder polling."""

import asyncio
import logging
from collections.abc import Callable

from focus_matrix_mcp.enums import TaskStatus
from focus_matrix_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_MS = 60_000


def due_reminders(tasks: list[TaskModel], now: int, window_ms: int = DEFAULT_WINDOW_MS) -> list[TaskModel]:
    """Tasks not yet done whose reminder fell within the last ``window_ms``."""
    return [
        t
        for t in tasks
        if t.reminder is not None and t.status != TaskStatus.DONE and now - window_ms < t.reminder <= now
    ]


def log_notifier(task: TaskModel) -> None:
    logger.info("Reminder: time to focus on '%s'", task.content)


class ReminderLoop:
    """
    Polls a task source on a fixed interval and notifies about due reminders.

    Each (task, reminder) pair is delivered at most once, even though
    consecutive ticks can see the same reminder inside the window.
    """

    def __init__(
        self,
        get_tasks: Callable[[], list[TaskModel]],
        clock: Callable[[], int],
        notify: Callable[[TaskModel], None] = log_notifier,
        interval: float = 30.0,
        window_ms: int = DEFAULT_WINDOW_MS,
    ):
        self._get_tasks = get_tasks
        self._clock = clock
        self._notify = notify
        self.interval = interval
        self.window_ms = window_ms
        self._delivered: set[tuple[str, int]] = set()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> list[TaskModel]:
        """Scan once and deliver anything newly due. Returns the delivered tasks."""
        now = self._clock()
        self._delivered = {key for key in self._delivered if now - self.window_ms < key[1] <= now}
        delivered = []
        for task in due_reminders(self._get_tasks(), now, self.window_ms):
            key = (task.id, task.reminder)
            if key in self._delivered:
                continue
            self._delivered.add(key)
            try:
                self._notify(task)
            except Exception:
                logger.exception("Reminder delivery failed for task %s", task.id)
                continue
            delivered.append(task)
        return delivered

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.tick()
            except Exception:
                logger.exception("Reminder scan failed")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Reminder loop started (every %.0fs)", self.interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.debug("Reminder loop stopped")
