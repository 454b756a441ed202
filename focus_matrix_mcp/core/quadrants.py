"""Static quadrant registry."""

from focus_matrix_mcp.enums import Quadrant
from focus_matrix_mcp.models.task import QuadrantMeta

QUADRANTS: dict[Quadrant, QuadrantMeta] = {
    Quadrant.DO_FIRST: QuadrantMeta(
        id=Quadrant.DO_FIRST, label="Do First", description="Urgent & Important", rank=1
    ),
    Quadrant.SCHEDULE: QuadrantMeta(
        id=Quadrant.SCHEDULE, label="Schedule", description="Not Urgent & Important", rank=2
    ),
    Quadrant.DELEGATE: QuadrantMeta(
        id=Quadrant.DELEGATE, label="Delegate", description="Urgent & Not Important", rank=3
    ),
    Quadrant.ELIMINATE: QuadrantMeta(
        id=Quadrant.ELIMINATE, label="Eliminate", description="Not Urgent & Not Important", rank=4
    ),
}


def quadrant_rank(quadrant: Quadrant) -> int:
    """Backlog sort rank (lower sorts first)."""
    return QUADRANTS[quadrant].rank


def quadrant_label(quadrant: Quadrant) -> str:
    return QUADRANTS[quadrant].label
