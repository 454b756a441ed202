"""CSV export/import of tasks and emotional log entries."""

import csv
import io
import logging
from enum import Enum
from typing import Any

from pydantic import ValidationError

from focus_matrix_mcp.core.errors import ImportParseError
from focus_matrix_mcp.enums import TaskStatus
from focus_matrix_mcp.models.task import EmotionalState, TaskModel

logger = logging.getLogger(__name__)

HEADER = [
    "Type",
    "ID",
    "Content",
    "Quadrant",
    "Status",
    "CreatedAt",
    "CompletedAt",
    "Order",
    "Reminder",
    "Timestamp",
    "Feeling",
    "Context",
]

TASK_ROW = "TASK"
EMOTION_ROW = "EMOTION"


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _int_or_none(value: str) -> int | None:
    return int(value) if value != "" else None


def export_csv(tasks: list[TaskModel], emotions: list[EmotionalState]) -> str:
    """
    Serialize both collections into one CSV document.

    Each row carries a ``Type`` discriminator (TASK or EMOTION); columns that
    do not apply to the row type are left empty. Fields containing the
    delimiter, a quote or a newline are quoted, with quotes doubled.
    """
    buf = io.StringIO(newline="")
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(HEADER)

    for t in tasks:
        row = (TASK_ROW, t.id, t.content, t.quadrant, t.status, t.created_at, t.completed_at, t.order, t.reminder)
        writer.writerow([_cell(v) for v in row] + ["", "", ""])

    for e in emotions:
        writer.writerow([EMOTION_ROW] + [""] * 8 + [_cell(e.timestamp), _cell(e.feeling), _cell(e.context)])

    return buf.getvalue()


def _parse_task_row(fields: dict[str, str]) -> TaskModel:
    task = TaskModel(
        id=fields["ID"],
        content=fields["Content"],
        quadrant=fields["Quadrant"],
        status=fields["Status"],
        created_at=int(fields["CreatedAt"]),
        completed_at=_int_or_none(fields["CompletedAt"]),
        order=_int_or_none(fields["Order"]),
        reminder=_int_or_none(fields["Reminder"]),
    )
    if task.status == TaskStatus.DONE and task.completed_at is None:
        raise ValueError("DONE task has no CompletedAt")
    if task.status != TaskStatus.DONE and task.completed_at is not None:
        raise ValueError(f"{task.status.value} task must not have CompletedAt")
    return task


def _parse_emotion_row(fields: dict[str, str]) -> EmotionalState:
    return EmotionalState(
        timestamp=int(fields["Timestamp"]),
        feeling=fields["Feeling"],
        context=fields["Context"],
    )


def import_csv(text: str) -> tuple[list[TaskModel], list[EmotionalState]]:
    """
    Parse a document produced by export_csv().

    The whole document is validated before anything is returned, so callers
    can never apply a partial import.

    Args:
        text: CSV text including the header row

    Returns:
        Tuple of (tasks, emotions)

    Raises:
        ImportParseError: bad header, wrong field count, unknown row type,
            invalid field values, more than one task in progress, or no
            records at all
    """
    reader = csv.reader(io.StringIO(text, newline=""))
    try:
        rows = list(reader)
    except csv.Error as e:
        raise ImportParseError(f"Malformed CSV: {e}") from e

    if not rows or [h.strip() for h in rows[0]] != HEADER:
        raise ImportParseError("Missing or unrecognized header row")

    tasks: list[TaskModel] = []
    emotions: list[EmotionalState] = []

    for line_no, row in enumerate(rows[1:], start=2):
        if not row:
            continue
        if len(row) != len(HEADER):
            raise ImportParseError(f"Row {line_no}: expected {len(HEADER)} fields, got {len(row)}")
        fields = dict(zip(HEADER, row))
        try:
            if fields["Type"] == TASK_ROW:
                tasks.append(_parse_task_row(fields))
            elif fields["Type"] == EMOTION_ROW:
                emotions.append(_parse_emotion_row(fields))
            else:
                raise ImportParseError(f"Row {line_no}: unknown record type '{fields['Type']}'")
        except (ValueError, ValidationError) as e:
            raise ImportParseError(f"Row {line_no}: {e}") from e

    if not tasks and not emotions:
        raise ImportParseError("No valid records found")

    in_progress = [t.id for t in tasks if t.status == TaskStatus.IN_PROGRESS]
    if len(in_progress) > 1:
        raise ImportParseError(f"More than one task in progress: {', '.join(in_progress)}")

    logger.debug("Parsed %d task(s) and %d emotion(s) from CSV", len(tasks), len(emotions))
    return tasks, emotions
