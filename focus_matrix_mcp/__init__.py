"""
MCP Server for a single-focus Eisenhower task board.

Tasks are ranked by quadrant (Do First, Schedule, Delegate, Eliminate) and
manual order; only one task may be in progress at a time, and starting
anything but the top priority asks for confirmation. A small emotional
check-in journal runs alongside.
"""

# Re-export enums
from focus_matrix_mcp.enums import (
    CheckInContext,
    Direction,
    Feeling,
    Quadrant,
    ResponseFormat,
    StartOutcome,
    TaskStatus,
)

# Re-export models
from focus_matrix_mcp.models import (
    AddTaskInput,
    AppState,
    BoardInput,
    BoardViews,
    ClearAllInput,
    CompleteTaskInput,
    ConfirmStartInput,
    DeleteTaskInput,
    DragSwapInput,
    EmotionalState,
    GetTaskInput,
    ImportInput,
    LogEmotionInput,
    QuadrantMeta,
    ReorderTaskInput,
    StartTaskInput,
    SummaryInput,
    TaskModel,
)

# Re-export MCP server instance
from focus_matrix_mcp.server import mcp
from focus_matrix_mcp.session import get_session, set_session

# Re-export tools
from focus_matrix_mcp.tools import (
    focus_add,
    focus_board,
    focus_cancel_start,
    focus_check_in,
    focus_clear_all,
    focus_complete,
    focus_confirm_start,
    focus_delete,
    focus_drag_swap,
    focus_export,
    focus_get,
    focus_import,
    focus_log_emotion,
    focus_reminders,
    focus_reorder,
    focus_start,
    focus_summary,
)

# Re-export utilities
from focus_matrix_mcp.utils import JsonStore, export_csv, import_csv

__all__ = [
    # Enums
    "CheckInContext",
    "Direction",
    "Feeling",
    "Quadrant",
    "ResponseFormat",
    "StartOutcome",
    "TaskStatus",
    # Entity models
    "TaskModel",
    "EmotionalState",
    "QuadrantMeta",
    "BoardViews",
    "AppState",
    # Input models
    "AddTaskInput",
    "BoardInput",
    "GetTaskInput",
    "StartTaskInput",
    "ConfirmStartInput",
    "CompleteTaskInput",
    "DeleteTaskInput",
    "ReorderTaskInput",
    "DragSwapInput",
    "LogEmotionInput",
    "SummaryInput",
    "ImportInput",
    "ClearAllInput",
    # Utilities
    "JsonStore",
    "export_csv",
    "import_csv",
    # Session
    "get_session",
    "set_session",
    # Tools
    "focus_add",
    "focus_board",
    "focus_get",
    "focus_start",
    "focus_confirm_start",
    "focus_cancel_start",
    "focus_complete",
    "focus_delete",
    "focus_reorder",
    "focus_drag_swap",
    "focus_check_in",
    "focus_log_emotion",
    "focus_reminders",
    "focus_summary",
    "focus_export",
    "focus_import",
    "focus_clear_all",
    # MCP server instance
    "mcp",
]
