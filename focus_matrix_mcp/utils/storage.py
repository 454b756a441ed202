"""Durable JSON store for tasks and emotional log entries."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from focus_matrix_mcp.models.task import EmotionalState, TaskModel

logger = logging.getLogger(__name__)

TASKS_FILE = "tasks.json"
EMOTIONS_FILE = "emotions.json"


class JsonStore:
    """
    Key-value style store backed by two JSON files in ``data_dir``.

    Tasks are replaced wholesale on save, emotions are appended. No method
    raises on I/O or decode errors: failures are logged, loads fall back to
    empty collections and saves return False.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    @property
    def tasks_path(self) -> Path:
        return self.data_dir / TASKS_FILE

    @property
    def emotions_path(self) -> Path:
        return self.data_dir / EMOTIONS_FILE

    # -------------------- low level --------------------

    def _read(self, path: Path) -> list[dict[str, Any]]:
        if not path.exists():
            return []
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON list in {path.name}")
        return data

    def _write(self, path: Path, records: list[dict[str, Any]]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    # -------------------- tasks --------------------

    def load_tasks(self) -> list[TaskModel]:
        try:
            return [TaskModel.model_validate(r) for r in self._read(self.tasks_path)]
        except (OSError, ValueError, ValidationError) as e:
            logger.error("Failed to load tasks from %s: %s", self.tasks_path, e)
            return []

    def save_tasks(self, tasks: list[TaskModel]) -> bool:
        try:
            self._write(self.tasks_path, [t.model_dump(mode="json") for t in tasks])
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save tasks to %s: %s", self.tasks_path, e)
            return False

    # -------------------- emotions --------------------

    def load_emotions(self) -> list[EmotionalState]:
        try:
            return [EmotionalState.model_validate(r) for r in self._read(self.emotions_path)]
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Failed to load emotions from %s: %s", self.emotions_path, e)
            return []

    def save_emotion(self, entry: EmotionalState) -> bool:
        try:
            records = self._read(self.emotions_path)
            records.append(entry.model_dump(mode="json"))
            self._write(self.emotions_path, records)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save emotion to %s: %s", self.emotions_path, e)
            return False

    def replace_emotions(self, emotions: list[EmotionalState]) -> bool:
        try:
            self._write(self.emotions_path, [e.model_dump(mode="json") for e in emotions])
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to replace emotions in %s: %s", self.emotions_path, e)
            return False

    def clear(self) -> bool:
        """Remove both files (full data reset)."""
        try:
            self.tasks_path.unlink(missing_ok=True)
            self.emotions_path.unlink(missing_ok=True)
            return True
        except OSError as e:
            logger.error("Failed to clear data in %s: %s", self.data_dir, e)
            return False
