"""Core entity models for Focus Matrix MCP."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from focus_matrix_mcp.enums import CheckInContext, Feeling, Quadrant, TaskStatus


class TaskModel(BaseModel):
    """A single task on the focus board.

    Timestamps are epoch milliseconds. ``order`` is only meaningful within a
    (quadrant, status) group and is None only for legacy records that have not
    been migrated yet.
    """

    id: str
    content: str
    quadrant: Quadrant
    status: TaskStatus = TaskStatus.BACKLOG
    created_at: int
    completed_at: int | None = None
    order: int | None = None
    reminder: int | None = None


class EmotionalState(BaseModel):
    """Append-only emotional journal entry."""

    timestamp: int
    feeling: Feeling
    context: CheckInContext


class QuadrantMeta(BaseModel):
    """Display metadata and sort rank for a quadrant."""

    model_config = ConfigDict(frozen=True)

    id: Quadrant
    label: str
    description: str
    rank: int = Field(..., ge=1, le=4, description="Backlog sort rank, lower sorts first")
