"""Utility functions for Focus Matrix MCP."""

from focus_matrix_mcp.utils.csv_io import export_csv, import_csv
from focus_matrix_mcp.utils.formatters import (
    _format_board_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from focus_matrix_mcp.utils.storage import JsonStore

__all__ = [
    "JsonStore",
    "export_csv",
    "import_csv",
    "_format_board_markdown",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
]
