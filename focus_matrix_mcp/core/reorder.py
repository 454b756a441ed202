"""Manual reorder, drag-swap and append-on-create ordering."""

import logging

from focus_matrix_mcp.enums import Direction, Quadrant, TaskStatus
from focus_matrix_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)


def next_order(tasks: list[TaskModel], quadrant: Quadrant) -> int:
    """Order value that places a new task at the bottom of a quadrant's backlog."""
    existing = [t.order or 0 for t in tasks if t.quadrant == quadrant and t.status == TaskStatus.BACKLOG]
    return (max(existing) if existing else 0) + 1


def reorder(tasks: list[TaskModel], task_id: str, direction: Direction) -> list[TaskModel]:
    """
    Move a task one step up or down within its (quadrant, status) group.

    The task trades ``order`` values with its neighbour; every other task is
    left untouched. Unknown ids and moves past either end of the group are
    no-ops.

    Args:
        tasks: Full task collection
        task_id: Task to move
        direction: Direction.UP or Direction.DOWN

    Returns:
        New task collection (the input list itself on a no-op)
    """
    task = next((t for t in tasks if t.id == task_id), None)
    if task is None:
        logger.debug("Reorder ignored, task %s not found", task_id)
        return tasks

    group = sorted(
        (t for t in tasks if t.quadrant == task.quadrant and t.status == task.status),
        key=lambda t: t.order or 0,
    )
    index = next(i for i, t in enumerate(group) if t.id == task_id)
    target_index = index - 1 if direction == Direction.UP else index + 1
    if target_index < 0 or target_index >= len(group):
        return tasks

    target = group[target_index]
    swapped = {task.id: target.order, target.id: task.order}
    return [t.model_copy(update={"order": swapped[t.id]}) if t.id in swapped else t for t in tasks]


def drag_swap(tasks: list[TaskModel], source_id: str, target_id: str) -> list[TaskModel]:
    """
    Exchange both ``order`` and ``quadrant`` between two tasks.

    Unlike reorder() this crosses quadrant boundaries, so a drag gesture can
    reclassify and reposition a task at once. Missing ids, or a task dropped
    on itself, are no-ops.
    """
    by_id = {t.id: t for t in tasks}
    source = by_id.get(source_id)
    target = by_id.get(target_id)
    if source is None or target is None or source_id == target_id:
        logger.debug("Drag-swap ignored (%s -> %s)", source_id, target_id)
        return tasks

    updates = {
        source.id: {"order": target.order, "quadrant": target.quadrant},
        target.id: {"order": source.order, "quadrant": source.quadrant},
    }
    return [t.model_copy(update=updates[t.id]) if t.id in updates else t for t in tasks]
