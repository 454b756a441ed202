"""Pytest configuration and fixtures for focus-matrix-mcp tests."""

import pytest

from focus_matrix_mcp.core.focus import NeverCheckInPolicy
from focus_matrix_mcp.core.state import FocusSession
from focus_matrix_mcp.enums import Quadrant, TaskStatus
from focus_matrix_mcp.models.task import TaskModel
from focus_matrix_mcp.session import set_session
from focus_matrix_mcp.utils.storage import JsonStore

BASE_TIME = 1_700_000_000_000


class FakeClock:
    """Deterministic millisecond clock."""

    def __init__(self, now: int = BASE_TIME):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1000) -> int:
        self.now += ms
        return self.now


class ScriptedPolicy:
    """Check-in policy that answers from a fixed script."""

    def __init__(self, *answers: bool):
        self.answers = list(answers)

    def should_prompt(self) -> bool:
        return self.answers.pop(0) if self.answers else False


def make_task(
    task_id: str,
    quadrant: Quadrant = Quadrant.DO_FIRST,
    order: int | None = 1,
    status: TaskStatus = TaskStatus.BACKLOG,
    created_at: int = BASE_TIME,
    **extra,
) -> TaskModel:
    return TaskModel(
        id=task_id,
        content=extra.pop("content", f"Task {task_id}"),
        quadrant=quadrant,
        status=status,
        created_at=created_at,
        order=order,
        **extra,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    """JsonStore writing into a temporary directory."""
    return JsonStore(tmp_path / "data")


@pytest.fixture
def session(store, clock):
    """A fresh session installed as the one the MCP tools use."""
    s = FocusSession(store, policy=NeverCheckInPolicy(), clock=clock)
    set_session(s)
    yield s
    set_session(None)


@pytest.fixture
def sample_tasks():
    """Backlog spread across quadrants plus one done task."""
    return [
        make_task("s1", Quadrant.SCHEDULE, order=1, created_at=BASE_TIME + 1),
        make_task("d2", Quadrant.DO_FIRST, order=2, created_at=BASE_TIME + 2),
        make_task("d1", Quadrant.DO_FIRST, order=1, created_at=BASE_TIME + 3),
        make_task("e1", Quadrant.ELIMINATE, order=1, created_at=BASE_TIME + 4),
        make_task(
            "x1",
            Quadrant.DELEGATE,
            order=1,
            status=TaskStatus.DONE,
            created_at=BASE_TIME + 5,
            completed_at=BASE_TIME + 100,
        ),
    ]
