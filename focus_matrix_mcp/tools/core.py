"""Core MCP tool definitions for the focus board."""

import json

from mcp.types import ToolAnnotations

from focus_matrix_mcp.config import get_settings
from focus_matrix_mcp.core.errors import FocusError, ImportParseError
from focus_matrix_mcp.core.quadrants import QUADRANTS, quadrant_label
from focus_matrix_mcp.core.reminders import due_reminders
from focus_matrix_mcp.enums import CheckInContext, ResponseFormat, StartOutcome
from focus_matrix_mcp.models.inputs import (
    AddTaskInput,
    BoardInput,
    ClearAllInput,
    CompleteTaskInput,
    ConfirmStartInput,
    DeleteTaskInput,
    DragSwapInput,
    GetTaskInput,
    ImportInput,
    LogEmotionInput,
    ReorderTaskInput,
    StartTaskInput,
    SummaryInput,
)
from focus_matrix_mcp.models.state import (
    AttemptStart,
    CancelStart,
    ClearAll,
    CompleteTask,
    ConfirmStart,
    CreateTask,
    DeleteTask,
    DragSwap,
    LogEmotion,
    ReorderTask,
    ReplaceAll,
)
from focus_matrix_mcp.models.views import BoardSummary
from focus_matrix_mcp.server import mcp
from focus_matrix_mcp.session import get_session
from focus_matrix_mcp.utils.csv_io import export_csv, import_csv
from focus_matrix_mcp.utils.formatters import (
    _format_board_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
)

CHECK_IN_QUESTIONS = {
    CheckInContext.STARTUP: "How are you feeling looking at your tasks right now?",
    CheckInContext.COMPLETION: "You finished a task. How do you feel?",
}


def _error(e: FocusError, tip: str) -> str:
    return f"Error: {e}\nTip: {tip}"


def _check_in_prompt(context: CheckInContext) -> str:
    feelings = "OVERWHELMED, ANXIOUS, NEUTRAL, CALM, CONTROL"
    return f"Check-in: {CHECK_IN_QUESTIONS[context]} Answer with focus_log_emotion ({feelings})."


@mcp.tool(
    name="focus_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_add(params: AddTaskInput) -> str:
    """
    Add a task to the bottom of a quadrant's backlog.

    USE THIS WHEN:
    - Capturing a new task and classifying it by urgency and importance

    QUADRANTS:
    - DO_FIRST: urgent & important
    - SCHEDULE: important, not urgent
    - DELEGATE: urgent, not important
    - ELIMINATE: neither

    Args:
        params: AddTaskInput containing content, quadrant and optional reminder

    Returns:
        Confirmation message with the created task ID

    Examples:
        - params with content="File taxes", quadrant="DO_FIRST"
        - params with content="Plan trip", quadrant="SCHEDULE", reminder=1767225600000
    """
    session = get_session()
    result = session.dispatch(CreateTask(content=params.content, quadrant=params.quadrant, reminder=params.reminder))
    task = result.task
    return f"Task created successfully.\nID: {task.id}\nQuadrant: {quadrant_label(task.quadrant)} (position {task.order})"


@mcp.tool(
    name="focus_board",
    annotations=ToolAnnotations(
        title="Show Focus Board",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_board(params: BoardInput) -> str:
    """
    Show the in-progress task, the prioritized backlog and recent completions.

    The backlog is ordered by quadrant (Do First, Schedule, Delegate,
    Eliminate) then by manual position; its first entry is the top priority
    task. Completed tasks are listed most recent first.

    Args:
        params: BoardInput with show_full_backlog and response_format

    Returns:
        Board views (markdown, concise or JSON)
    """
    settings = get_settings()
    session = get_session()
    views = session.views()

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "in_progress": [t.model_dump(mode="json") for t in views.in_progress],
                "backlog": [t.model_dump(mode="json") for t in views.backlog],
                "done": [t.model_dump(mode="json") for t in views.done],
                "pending_start": session.state.pending_start,
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        parts = [
            _format_tasks_concise(views.in_progress, "In Progress"),
            _format_tasks_concise(views.backlog, "Backlog"),
            _format_tasks_concise(views.done[: settings.done_visible_limit], "Done"),
        ]
        return "\n".join(parts)

    backlog_limit = None if params.show_full_backlog else settings.backlog_visible_limit
    return _format_board_markdown(views, backlog_limit, settings.done_visible_limit)


@mcp.tool(
    name="focus_get",
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_get(params: GetTaskInput) -> str:
    """
    Retrieve full details for a single task by ID.

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Detailed task information (markdown, concise or JSON)
    """
    task = get_session().get_task(params.task_id)
    if task is None:
        return f"Error: Task '{params.task_id}' not found.\nTip: Use focus_board to find valid task IDs."

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(mode="json"), indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)
    return _format_task_markdown(task)


@mcp.tool(
    name="focus_start",
    annotations=ToolAnnotations(
        title="Start Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_start(params: StartTaskInput) -> str:
    """
    Move a backlog task into the single in-progress slot.

    Only one task can be in progress. Starting anything other than the top
    priority backlog task needs an explicit confirmation through
    focus_confirm_start (or focus_cancel_start to back out).

    Args:
        params: StartTaskInput containing the task_id to start

    Returns:
        Started, blocked, or a confirmation request
    """
    session = get_session()
    try:
        result = session.dispatch(AttemptStart(task_id=params.task_id))
    except FocusError as e:
        return _error(e, "Only backlog tasks can be started. Use focus_board to see them.")

    if result.outcome == StartOutcome.BLOCKED:
        return (
            "Blocked: another task is already in progress.\n"
            "Please complete your current task before starting a new one."
        )
    if result.outcome == StartOutcome.PENDING_CONFIRMATION:
        top = session.views().top_priority
        return (
            f"Confirmation needed: '{result.task.content}' is not your top priority.\n"
            f"Top priority is '{top.content}' ({quadrant_label(top.quadrant)}).\n"
            f"Call focus_confirm_start with task_id='{params.task_id}' to start it anyway, "
            f"or focus_cancel_start to keep your priorities."
        )
    return f"Task {params.task_id} started. Focus on: {result.task.content}"


@mcp.tool(
    name="focus_confirm_start",
    annotations=ToolAnnotations(
        title="Confirm Start",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_confirm_start(params: ConfirmStartInput) -> str:
    """
    Start a task that skipped the top priority, after focus_start asked for confirmation.

    Args:
        params: ConfirmStartInput containing the task_id awaiting confirmation

    Returns:
        Confirmation message
    """
    try:
        result = get_session().dispatch(ConfirmStart(task_id=params.task_id))
    except FocusError as e:
        return _error(e, "Call focus_start first; confirmation only applies to the task it flagged.")

    if result.outcome == StartOutcome.BLOCKED:
        return "Blocked: another task is already in progress."
    return f"Task {params.task_id} started. Focus on: {result.task.content}"


@mcp.tool(
    name="focus_cancel_start",
    annotations=ToolAnnotations(
        title="Cancel Start",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_cancel_start() -> str:
    """Decline a pending start confirmation. Tasks are left unchanged."""
    get_session().dispatch(CancelStart())
    return "Start cancelled. Your priorities are unchanged."


@mcp.tool(
    name="focus_complete",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_complete(params: CompleteTaskInput) -> str:
    """
    Mark the in-progress task as done.

    May open an emotional check-in; answer it with focus_log_emotion.

    Args:
        params: CompleteTaskInput containing the in-progress task_id

    Returns:
        Confirmation message, with a check-in question when one opened
    """
    try:
        result = get_session().dispatch(CompleteTask(task_id=params.task_id))
    except FocusError as e:
        return _error(e, "Only the task currently in progress can be completed.")

    message = f"Task {params.task_id} marked as complete."
    if result.state.check_in == CheckInContext.COMPLETION:
        message += "\n" + _check_in_prompt(CheckInContext.COMPLETION)
    return message


@mcp.tool(
    name="focus_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_delete(params: DeleteTaskInput) -> str:
    """
    Permanently delete a task in any status.

    Requires confirm=true. Deleting an unknown ID is a no-op.

    Args:
        params: DeleteTaskInput containing task_id and confirm

    Returns:
        Confirmation message
    """
    if not params.confirm:
        return f"Are you sure you want to delete task {params.task_id}? Call again with confirm=true."

    result = get_session().dispatch(DeleteTask(task_id=params.task_id))
    if not result.tasks_changed:
        return f"Task {params.task_id} not found; nothing deleted."
    return f"Task {params.task_id} deleted."


@mcp.tool(
    name="focus_reorder",
    annotations=ToolAnnotations(
        title="Reorder Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_reorder(params: ReorderTaskInput) -> str:
    """
    Move a task one position up or down within its quadrant.

    Moving the first task up or the last task down does nothing.

    Args:
        params: ReorderTaskInput containing task_id and direction

    Returns:
        Confirmation message
    """
    result = get_session().dispatch(ReorderTask(task_id=params.task_id, direction=params.direction))
    if not result.tasks_changed:
        return f"Task {params.task_id} not moved."
    return f"Task {params.task_id} moved {params.direction.value}."


@mcp.tool(
    name="focus_drag_swap",
    annotations=ToolAnnotations(
        title="Drag-Swap Tasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_drag_swap(params: DragSwapInput) -> str:
    """
    Swap the position and quadrant of two tasks, as a drag-and-drop gesture would.

    Unlike focus_reorder this can move a task into another quadrant.

    Args:
        params: DragSwapInput containing source_id and target_id

    Returns:
        Confirmation message
    """
    result = get_session().dispatch(DragSwap(source_id=params.source_id, target_id=params.target_id))
    if not result.tasks_changed:
        return "Nothing swapped."
    return f"Swapped tasks {params.source_id} and {params.target_id}."


@mcp.tool(
    name="focus_check_in",
    annotations=ToolAnnotations(
        title="Pending Check-In",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_check_in() -> str:
    """Return the open emotional check-in question, if any."""
    context = get_session().state.check_in
    if context is None:
        return "No check-in pending."
    return _check_in_prompt(context)


@mcp.tool(
    name="focus_log_emotion",
    annotations=ToolAnnotations(
        title="Log Emotion",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def focus_log_emotion(params: LogEmotionInput) -> str:
    """
    Record how the user feels; closes any open check-in.

    Args:
        params: LogEmotionInput containing feeling and optional context

    Returns:
        Confirmation message
    """
    result = get_session().dispatch(LogEmotion(feeling=params.feeling, context=params.context))
    entry = result.emotion
    return f"Logged {entry.feeling.value} ({entry.context.value})."


@mcp.tool(
    name="focus_reminders",
    annotations=ToolAnnotations(
        title="Due Reminders",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_reminders() -> str:
    """List unfinished tasks whose reminder is due now."""
    settings = get_settings()
    session = get_session()
    due = due_reminders(session.tasks, session.clock(), int(settings.reminder_window_seconds * 1000))
    if not due:
        return "No reminders due."
    return "\n".join(f"Time to focus on: {t.content} [{t.id[:8]}]" for t in due)


@mcp.tool(
    name="focus_summary",
    annotations=ToolAnnotations(
        title="Focus Summary",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_summary(params: SummaryInput) -> str:
    """
    Get counts of backlog tasks per quadrant, completions and check-ins.

    Args:
        params: SummaryInput with response_format

    Returns:
        Summary statistics
    """
    session = get_session()
    views = session.views()

    by_quadrant = {q.value: 0 for q in QUADRANTS}
    for task in views.backlog:
        by_quadrant[task.quadrant.value] += 1
    by_feeling: dict[str, int] = {}
    for entry in session.state.emotions:
        by_feeling[entry.feeling.value] = by_feeling.get(entry.feeling.value, 0) + 1

    summary = BoardSummary(
        backlog_total=len(views.backlog),
        in_progress_total=len(views.in_progress),
        done_total=len(views.done),
        backlog_by_quadrant=by_quadrant,
        check_ins_by_feeling=by_feeling,
    )

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(summary.model_dump(), indent=2)

    lines = [
        "# Focus Summary",
        "",
        f"**Backlog**: {summary.backlog_total}",
        f"**In progress**: {summary.in_progress_total}",
        f"**Completed**: {summary.done_total}",
        "",
        "## Backlog by Quadrant",
    ]
    for quadrant, meta in QUADRANTS.items():
        lines.append(f"- {meta.label}: {by_quadrant[quadrant.value]}")
    lines.extend(["", "## Check-ins"])
    if not by_feeling:
        lines.append("No check-ins yet.")
    for feeling, count in sorted(by_feeling.items(), key=lambda x: x[1], reverse=True):
        lines.append(f"- {feeling}: {count}")
    return "\n".join(lines)


@mcp.tool(
    name="focus_export",
    annotations=ToolAnnotations(
        title="Export Data",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_export() -> str:
    """Export every task and check-in as CSV (one record per row, Type column TASK/EMOTION)."""
    state = get_session().state
    return export_csv(state.tasks, state.emotions)


@mcp.tool(
    name="focus_import",
    annotations=ToolAnnotations(
        title="Import Data",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_import(params: ImportInput) -> str:
    """
    Replace all tasks and check-ins with the contents of a CSV export.

    Requires confirm=true. A malformed document is rejected as a whole and
    nothing is changed.

    Args:
        params: ImportInput containing csv_text and confirm

    Returns:
        Confirmation message with record counts
    """
    try:
        tasks, emotions = import_csv(params.csv_text)
    except ImportParseError as e:
        return _error(e, "No data was imported. Use a file produced by focus_export.")

    if not params.confirm:
        return (
            f"Import would replace all current data with {len(tasks)} task(s) and "
            f"{len(emotions)} check-in(s). Call again with confirm=true."
        )

    get_session().dispatch(ReplaceAll(tasks=tasks, emotions=emotions))
    return f"Imported {len(tasks)} task(s) and {len(emotions)} check-in(s)."


@mcp.tool(
    name="focus_clear_all",
    annotations=ToolAnnotations(
        title="Clear All Data",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def focus_clear_all(params: ClearAllInput) -> str:
    """Delete every task and check-in. Requires confirm=true."""
    if not params.confirm:
        return "This deletes all tasks and check-ins permanently. Call again with confirm=true."
    get_session().dispatch(ClearAll())
    return "All data cleared."
