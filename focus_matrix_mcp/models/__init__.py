"""Pydantic models for Focus Matrix MCP."""

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
    AppState,
    AttemptStart,
    CancelStart,
    ClearAll,
    CompleteTask,
    ConfirmStart,
    CreateTask,
    DeleteTask,
    DragSwap,
    Event,
    EventResult,
    LogEmotion,
    ReorderTask,
    ReplaceAll,
)
from focus_matrix_mcp.models.task import EmotionalState, QuadrantMeta, TaskModel
from focus_matrix_mcp.models.views import BoardSummary, BoardViews

__all__ = [
    # Entities
    "TaskModel",
    "EmotionalState",
    "QuadrantMeta",
    # Views
    "BoardViews",
    "BoardSummary",
    # State & events
    "AppState",
    "Event",
    "EventResult",
    "CreateTask",
    "AttemptStart",
    "ConfirmStart",
    "CancelStart",
    "CompleteTask",
    "DeleteTask",
    "ReorderTask",
    "DragSwap",
    "LogEmotion",
    "ReplaceAll",
    "ClearAll",
    # Tool input models
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
]
