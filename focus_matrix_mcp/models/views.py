"""Derived view and summary models."""

from pydantic import BaseModel, Field

from focus_matrix_mcp.models.task import TaskModel


class BoardViews(BaseModel):
    """The three derived views of the task collection."""

    backlog: list[TaskModel] = Field(default_factory=list)
    in_progress: list[TaskModel] = Field(default_factory=list)
    done: list[TaskModel] = Field(default_factory=list)

    @property
    def top_priority(self) -> TaskModel | None:
        """The task the backlog ranks first, if any."""
        return self.backlog[0] if self.backlog else None


class BoardSummary(BaseModel):
    """Simple counts over tasks and check-ins."""

    backlog_total: int
    in_progress_total: int
    done_total: int
    backlog_by_quadrant: dict[str, int]
    check_ins_by_feeling: dict[str, int]
