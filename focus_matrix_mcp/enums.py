"""Enums for Focus Matrix MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # Minimal output for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class Quadrant(str, Enum):
    """Eisenhower quadrants."""

    DO_FIRST = "DO_FIRST"  # Urgent & Important
    SCHEDULE = "SCHEDULE"  # Not Urgent & Important
    DELEGATE = "DELEGATE"  # Urgent & Not Important
    ELIMINATE = "ELIMINATE"  # Not Urgent & Not Important


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    BACKLOG = "BACKLOG"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Feeling(str, Enum):
    """Emotional check-in answers."""

    OVERWHELMED = "OVERWHELMED"
    ANXIOUS = "ANXIOUS"
    NEUTRAL = "NEUTRAL"
    CALM = "CALM"
    CONTROL = "CONTROL"


class CheckInContext(str, Enum):
    """Moment at which an emotional check-in was asked."""

    STARTUP = "STARTUP"
    COMPLETION = "COMPLETION"


class Direction(str, Enum):
    """Directional reorder within a quadrant group."""

    UP = "up"
    DOWN = "down"


class StartOutcome(str, Enum):
    """Result of a request to start a task."""

    STARTED = "started"
    BLOCKED = "blocked"
    PENDING_CONFIRMATION = "pending_confirmation"
