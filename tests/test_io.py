"""Tests for the JSON store and CSV export/import."""

import json
import logging

import pytest
from conftest import BASE_TIME, make_task

from focus_matrix_mcp.core import ImportParseError
from focus_matrix_mcp.enums import CheckInContext, Feeling, Quadrant, TaskStatus
from focus_matrix_mcp.models import EmotionalState
from focus_matrix_mcp.utils import JsonStore, export_csv, import_csv
from focus_matrix_mcp.utils.csv_io import HEADER

# ============================================================================
# JsonStore
# ============================================================================


class TestJsonStore:
    def test_missing_files_load_empty(self, store):
        assert store.load_tasks() == []
        assert store.load_emotions() == []

    def test_save_replaces_tasks(self, store):
        assert store.save_tasks([make_task("a"), make_task("b")]) is True
        assert store.save_tasks([make_task("c")]) is True
        assert [t.id for t in store.load_tasks()] == ["c"]

    def test_tasks_written_as_json(self, store):
        store.save_tasks([make_task("a", Quadrant.SCHEDULE)])
        data = json.loads(store.tasks_path.read_text())
        assert data[0]["quadrant"] == "SCHEDULE"
        assert data[0]["status"] == "BACKLOG"

    def test_loads_legacy_tasks_without_order(self, store):
        store.data_dir.mkdir(parents=True)
        store.tasks_path.write_text(
            json.dumps([{"id": "x", "content": "old", "quadrant": "DO_FIRST", "status": "BACKLOG", "created_at": 1}])
        )
        assert store.load_tasks()[0].order is None

    def test_corrupt_file_logs_and_returns_empty(self, store, caplog):
        store.data_dir.mkdir(parents=True)
        store.tasks_path.write_text("{not json")
        with caplog.at_level(logging.ERROR):
            assert store.load_tasks() == []
        assert "Failed to load tasks" in caplog.text

    def test_write_failure_logged_not_raised(self, tmp_path, caplog):
        blocker = tmp_path / "file"
        blocker.write_text("")
        store = JsonStore(blocker / "data")
        with caplog.at_level(logging.ERROR):
            assert store.save_tasks([make_task("a")]) is False
        assert "Failed to save tasks" in caplog.text

    def test_emotions_append_and_replace(self, store):
        e1 = EmotionalState(timestamp=1, feeling=Feeling.CALM, context=CheckInContext.STARTUP)
        e2 = EmotionalState(timestamp=2, feeling=Feeling.ANXIOUS, context=CheckInContext.COMPLETION)
        store.save_emotion(e1)
        store.save_emotion(e2)
        assert store.load_emotions() == [e1, e2]

        store.replace_emotions([e2])
        assert store.load_emotions() == [e2]

    def test_clear(self, store):
        store.save_tasks([make_task("a")])
        assert store.clear() is True
        assert store.load_tasks() == []
        assert store.clear() is True


# ============================================================================
# CSV export / import
# ============================================================================


@pytest.fixture
def tricky_tasks():
    return [
        make_task("plain", Quadrant.DO_FIRST, order=1, reminder=BASE_TIME + 5000),
        make_task("comma", Quadrant.SCHEDULE, order=2, content="Buy milk, eggs, bread"),
        make_task("quote", Quadrant.DELEGATE, order=3, content='Reply "asap" to Sam'),
        make_task(
            "newline",
            Quadrant.ELIMINATE,
            order=None,
            content="Line one\nLine two, with \"both\"",
            status=TaskStatus.DONE,
            completed_at=BASE_TIME + 10,
        ),
    ]


@pytest.fixture
def emotions():
    return [
        EmotionalState(timestamp=BASE_TIME, feeling=Feeling.OVERWHELMED, context=CheckInContext.STARTUP),
        EmotionalState(timestamp=BASE_TIME + 1, feeling=Feeling.CONTROL, context=CheckInContext.COMPLETION),
    ]


class TestCsvExport:
    def test_header_and_type_column(self, tricky_tasks, emotions):
        text = export_csv(tricky_tasks, emotions)
        assert text.splitlines()[0] == ",".join(HEADER)
        assert text.count("\nTASK,") == 4
        assert text.count("\nEMOTION,") == 2

    def test_quotes_only_when_needed(self, tricky_tasks):
        text = export_csv(tricky_tasks, [])
        assert "TASK,plain,Task plain,DO_FIRST" in text
        assert '"Buy milk, eggs, bread"' in text
        assert '"Reply ""asap"" to Sam"' in text


class TestCsvImport:
    def test_round_trip(self, tricky_tasks, emotions):
        tasks, entries = import_csv(export_csv(tricky_tasks, emotions))
        assert tasks == tricky_tasks
        assert entries == emotions

    def test_empty_optional_fields_become_none(self, tricky_tasks):
        tasks, _ = import_csv(export_csv(tricky_tasks, []))
        assert tasks[1].reminder is None
        assert tasks[3].order is None

    def test_rejects_missing_header(self):
        with pytest.raises(ImportParseError):
            import_csv("TASK,a,b\n")

    def test_rejects_wrong_field_count(self, tricky_tasks):
        text = export_csv(tricky_tasks, []) + "TASK,short,row\n"
        with pytest.raises(ImportParseError, match="expected 12 fields"):
            import_csv(text)

    def test_rejects_unknown_type(self):
        text = ",".join(HEADER) + "\nNOTE" + "," * 11 + "\n"
        with pytest.raises(ImportParseError, match="unknown record type"):
            import_csv(text)

    def test_rejects_invalid_values(self, tricky_tasks):
        text = export_csv(tricky_tasks, []).replace("DO_FIRST", "URGENT")
        with pytest.raises(ImportParseError):
            import_csv(text)

    def test_rejects_non_numeric_timestamp(self, emotions):
        text = export_csv([], emotions).replace(str(BASE_TIME + 1), "yesterday")
        with pytest.raises(ImportParseError):
            import_csv(text)

    def test_rejects_header_only(self):
        with pytest.raises(ImportParseError, match="No valid records"):
            import_csv(",".join(HEADER) + "\n")

    def test_rejects_more_than_one_in_progress(self):
        tasks = [make_task("a", status=TaskStatus.IN_PROGRESS), make_task("b", status=TaskStatus.IN_PROGRESS)]
        with pytest.raises(ImportParseError, match="More than one task in progress"):
            import_csv(export_csv(tasks, []))

    def test_accepts_single_in_progress(self):
        tasks, _ = import_csv(export_csv([make_task("a", status=TaskStatus.IN_PROGRESS), make_task("b")], []))
        assert [t.status for t in tasks] == [TaskStatus.IN_PROGRESS, TaskStatus.BACKLOG]

    def test_rejects_done_without_completed_at(self):
        text = export_csv([make_task("a", status=TaskStatus.DONE)], [])
        with pytest.raises(ImportParseError, match="no CompletedAt"):
            import_csv(text)

    def test_rejects_completed_at_on_unfinished_task(self):
        text = export_csv([make_task("a", completed_at=999)], [])
        with pytest.raises(ImportParseError, match="must not have CompletedAt"):
            import_csv(text)
