"""Focus board core: ordering, state machine, reorder engine and dispatcher."""

from focus_matrix_mcp.core.errors import (
    FocusError,
    FocusOccupiedError,
    ImportParseError,
    InvalidTransitionError,
    NoPendingStartError,
    TaskNotFoundError,
)
from focus_matrix_mcp.core.focus import (
    CheckInPolicy,
    EveryNthCheckInPolicy,
    NeverCheckInPolicy,
    RandomCheckInPolicy,
    active_task,
    attempt_start,
    complete_task,
    delete_task,
    start_task,
)
from focus_matrix_mcp.core.ordering import derive_views, migrate_missing_order, top_priority_task
from focus_matrix_mcp.core.quadrants import QUADRANTS, quadrant_label, quadrant_rank
from focus_matrix_mcp.core.reminders import ReminderLoop, due_reminders
from focus_matrix_mcp.core.reorder import drag_swap, next_order, reorder
from focus_matrix_mcp.core.state import FocusSession, apply_event, now_ms

__all__ = [
    # Errors
    "FocusError",
    "FocusOccupiedError",
    "ImportParseError",
    "InvalidTransitionError",
    "NoPendingStartError",
    "TaskNotFoundError",
    # Registry
    "QUADRANTS",
    "quadrant_label",
    "quadrant_rank",
    # Ordering
    "derive_views",
    "migrate_missing_order",
    "top_priority_task",
    # State machine
    "active_task",
    "attempt_start",
    "start_task",
    "complete_task",
    "delete_task",
    "CheckInPolicy",
    "RandomCheckInPolicy",
    "EveryNthCheckInPolicy",
    "NeverCheckInPolicy",
    # Reorder
    "next_order",
    "reorder",
    "drag_swap",
    # Dispatcher
    "apply_event",
    "FocusSession",
    "now_ms",
    # Reminders
    "due_reminders",
    "ReminderLoop",
]
