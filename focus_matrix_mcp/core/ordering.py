"""Ordering engine: derives the backlog, in-progress and done views."""

import logging

from focus_matrix_mcp.core.quadrants import quadrant_rank
from focus_matrix_mcp.enums import TaskStatus
from focus_matrix_mcp.models.task import TaskModel
from focus_matrix_mcp.models.views import BoardViews

logger = logging.getLogger(__name__)


def _backlog_key(task: TaskModel) -> tuple[int, int]:
    # Missing order sorts as 0; the sort is stable so ties keep insertion order
    return quadrant_rank(task.quadrant), task.order or 0


def derive_views(tasks: list[TaskModel]) -> BoardViews:
    """
    Project the flat task collection into the three board views.

    Backlog is ranked by quadrant then ``order``; in-progress by creation
    time; done by completion time, most recent first.

    Args:
        tasks: Full task collection

    Returns:
        BoardViews with freshly sorted lists
    """
    backlog = sorted((t for t in tasks if t.status == TaskStatus.BACKLOG), key=_backlog_key)
    in_progress = sorted((t for t in tasks if t.status == TaskStatus.IN_PROGRESS), key=lambda t: t.created_at)
    done = sorted(
        (t for t in tasks if t.status == TaskStatus.DONE),
        key=lambda t: t.completed_at or 0,
        reverse=True,
    )
    return BoardViews(backlog=backlog, in_progress=in_progress, done=done)


def top_priority_task(tasks: list[TaskModel]) -> TaskModel | None:
    """Return the first task of the backlog view, or None when it is empty."""
    return derive_views(tasks).top_priority


def migrate_missing_order(tasks: list[TaskModel]) -> tuple[list[TaskModel], bool]:
    """
    Assign ``order`` to legacy tasks that lack it.

    When any task is missing ``order`` the collection is sorted by creation
    time and each missing value becomes the task's position in that
    sequence. Existing values are kept.

    Returns:
        Tuple of (tasks, changed). ``tasks`` is the input list when nothing
        needed migrating.
    """
    if all(t.order is not None for t in tasks):
        return tasks, False

    by_created = sorted(tasks, key=lambda t: t.created_at)
    migrated = [t if t.order is not None else t.model_copy(update={"order": i}) for i, t in enumerate(by_created)]
    logger.info("Assigned order to %d legacy task(s)", sum(1 for t in tasks if t.order is None))
    return migrated, True
