"""Formatting utilities for task output."""

from datetime import datetime, timezone

from focus_matrix_mcp.core.quadrants import quadrant_label
from focus_matrix_mcp.enums import TaskStatus
from focus_matrix_mcp.models.task import TaskModel
from focus_matrix_mcp.models.views import BoardViews


def _format_ms(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def _format_task_concise(task: TaskModel) -> str:
    """
    Format a single task in concise format for token efficiency.

    Output: "a1b2c3d4: Description (Do First, #2)"
    """
    desc = task.content[:50] if task.content else "No content"
    meta = [quadrant_label(task.quadrant)]
    if task.order is not None:
        meta.append(f"#{task.order}")
    if task.reminder:
        meta.append("reminder")
    return f"{task.id[:8]}: {desc} ({', '.join(meta)})"


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | Backlog
    a1b2c3d4: Task one (Do First, #1)
    e5f6a7b8: Task two (Schedule, #1)
    """
    if not tasks:
        return f"0 tasks | {title}" if title else "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"
    return "\n".join([header] + [_format_task_concise(t) for t in tasks])


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    status_icon = {TaskStatus.BACKLOG: "○", TaskStatus.IN_PROGRESS: "▶", TaskStatus.DONE: "✓"}
    lines = [f"### {status_icon.get(task.status, '')} [{task.id[:8]}] {task.content}"]

    details = [
        f"**Quadrant**: {quadrant_label(task.quadrant)}",
        f"**Status**: {task.status.value}",
    ]
    if task.order is not None:
        details.append(f"**Order**: {task.order}")
    details.append(f"**Created**: {_format_ms(task.created_at)}")
    if task.completed_at:
        details.append(f"**Completed**: {_format_ms(task.completed_at)}")
    if task.reminder:
        details.append(f"**Reminder**: {_format_ms(task.reminder)}")
    lines.append(" | ".join(details))

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]
    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")
    return "\n".join(lines)


def _format_board_markdown(views: BoardViews, backlog_limit: int | None, done_limit: int) -> str:
    """
    Render the three board views.

    The backlog is cut to ``backlog_limit`` (None shows everything) and the
    done list to ``done_limit``; hidden tasks are counted, not listed.
    """
    lines = ["# Focus Board", "", "## In Progress"]
    if views.in_progress:
        lines.extend(_format_task_markdown(t) for t in views.in_progress)
    else:
        lines.append("Nothing in progress. Start the top backlog task.")

    lines.extend(["", "## Backlog"])
    if not views.backlog:
        lines.append("Backlog is empty.")
    else:
        shown = views.backlog if backlog_limit is None else views.backlog[:backlog_limit]
        for i, task in enumerate(shown):
            marker = " **(top priority)**" if i == 0 else ""
            lines.append(f"{i + 1}. [{task.id[:8]}] {task.content} ({quadrant_label(task.quadrant)}){marker}")
        hidden = len(views.backlog) - len(shown)
        if hidden:
            lines.append(f"*{hidden} more hidden*")

    lines.extend(["", "## Done"])
    if not views.done:
        lines.append("No completed tasks yet.")
    else:
        for task in views.done[:done_limit]:
            lines.append(f"- [{task.id[:8]}] {task.content}")
        hidden = len(views.done) - done_limit
        if hidden > 0:
            lines.append(f"*{hidden} more completed*")

    return "\n".join(lines)
