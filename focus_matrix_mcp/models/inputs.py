"""Input models for Focus Matrix MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from focus_matrix_mcp.enums import CheckInContext, Direction, Feeling, Quadrant, ResponseFormat

# ============================================================================
# Task Tool Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., description="Task description (required)", min_length=1, max_length=1000)
    quadrant: Quadrant = Field(
        ...,
        description="Eisenhower quadrant: DO_FIRST, SCHEDULE, DELEGATE or ELIMINATE",
    )
    reminder: int | None = Field(
        default=None,
        description="Optional one-shot reminder time in epoch milliseconds",
        ge=0,
    )

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content cannot be empty")
        return v.strip()


class BoardInput(BaseModel):
    """Input model for showing the focus board."""

    model_config = ConfigDict(str_strip_whitespace=True)

    show_full_backlog: bool = Field(default=False, description="Show every backlog task instead of the first few")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to retrieve", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class StartTaskInput(BaseModel):
    """Input model for starting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to start", min_length=1)


class ConfirmStartInput(BaseModel):
    """Input model for confirming a start that skips the top priority task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID awaiting confirmation", min_length=1)


class CompleteTaskInput(BaseModel):
    """Input model for completing a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="ID of the in-progress task", min_length=1)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to delete", min_length=1)
    confirm: bool = Field(default=False, description="Must be true; deletion cannot be undone")


class ReorderTaskInput(BaseModel):
    """Input model for moving a task within its quadrant."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="Task ID to move", min_length=1)
    direction: Direction = Field(..., description="'up' or 'down'")


class DragSwapInput(BaseModel):
    """Input model for swapping position and quadrant of two tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    source_id: str = Field(..., description="Task being dragged", min_length=1)
    target_id: str = Field(..., description="Task it is dropped on", min_length=1)


# ============================================================================
# Journal & Data Tool Input Models
# ============================================================================


class LogEmotionInput(BaseModel):
    """Input model for answering an emotional check-in."""

    model_config = ConfigDict(str_strip_whitespace=True)

    feeling: Feeling = Field(..., description="OVERWHELMED, ANXIOUS, NEUTRAL, CALM or CONTROL")
    context: CheckInContext | None = Field(
        default=None,
        description="STARTUP or COMPLETION; defaults to the open check-in prompt",
    )


class SummaryInput(BaseModel):
    """Input model for board statistics."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class ImportInput(BaseModel):
    """Input model for importing a CSV export."""

    csv_text: str = Field(..., description="CSV document produced by focus_export", min_length=1)
    confirm: bool = Field(default=False, description="Must be true; replaces all current data")


class ClearAllInput(BaseModel):
    """Input model for wiping every task and check-in."""

    confirm: bool = Field(default=False, description="Must be true; this cannot be undone")
