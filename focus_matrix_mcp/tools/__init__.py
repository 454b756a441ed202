"""MCP tool definitions for Focus Matrix."""

# Import all tools to register them with the MCP server
from focus_matrix_mcp.tools.core import (
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

__all__ = [
    # Task tools
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
    # Journal tools
    "focus_check_in",
    "focus_log_emotion",
    "focus_reminders",
    "focus_summary",
    # Data tools
    "focus_export",
    "focus_import",
    "focus_clear_all",
]
