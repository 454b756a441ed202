"""Runtime configuration for Focus Matrix MCP."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FocusSettings(BaseSettings):
    """Settings read from ``FOCUS_MATRIX_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(env_prefix="FOCUS_MATRIX_", env_file=".env", extra="ignore")

    data_dir: Path = Field(default=Path("~/.focus_matrix"), description="Directory holding tasks.json and emotions.json")
    check_in_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Post-completion check-in fires when a random draw exceeds this value",
    )
    reminder_interval_seconds: float = Field(default=30.0, gt=0, description="Reminder polling interval")
    reminder_window_seconds: float = Field(default=60.0, gt=0, description="How far back a reminder still counts as due")
    backlog_visible_limit: int = Field(default=5, ge=1, description="Backlog tasks shown before collapsing")
    done_visible_limit: int = Field(default=5, ge=1, description="Completed tasks shown before collapsing")
    log_level: str = Field(default="INFO", description="Logging level for the server")


@lru_cache
def get_settings() -> FocusSettings:
    return FocusSettings()
