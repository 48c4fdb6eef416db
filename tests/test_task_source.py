from pathlib import Path

import pytest
import requests

import task_source
from task_source import TaskSourceError, fetch_source, load_tasks


class FakeResponse:
    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def test_load_tasks_from_file(tmp_path: Path, workbook_bytes, task_rows) -> None:
    source = tmp_path / "Question.xlsx"
    source.write_bytes(workbook_bytes(task_rows))

    tasks = load_tasks(source)
    assert [task.id for task in tasks] == [1, 2]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(TaskSourceError):
        fetch_source(tmp_path / "missing.xlsx")


def test_undecodable_file_raises(tmp_path: Path) -> None:
    source = tmp_path / "Question.xlsx"
    source.write_bytes(b"not a workbook")
    with pytest.raises(TaskSourceError):
        load_tasks(source)


def test_remote_source(monkeypatch: pytest.MonkeyPatch, workbook_bytes, task_rows) -> None:
    calls = []

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse(content=workbook_bytes(task_rows))

    monkeypatch.setattr(task_source.requests, "get", fake_get)

    tasks = load_tasks("https://example.com/Question.xlsx", timeout=5)
    assert len(tasks) == 2
    assert calls == [("https://example.com/Question.xlsx", 5)]


def test_remote_error_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        task_source.requests, "get", lambda url, timeout=None: FakeResponse(404)
    )
    with pytest.raises(TaskSourceError, match="HTTP 404"):
        fetch_source("http://example.com/Question.xlsx")


def test_remote_network_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(url, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(task_source.requests, "get", fail)
    with pytest.raises(TaskSourceError):
        fetch_source("http://example.com/Question.xlsx")


def test_truncated_sheet_xml_raises(tmp_path: Path, truncated_workbook_bytes) -> None:
    source = tmp_path / "Question.xlsx"
    source.write_bytes(truncated_workbook_bytes)
    with pytest.raises(TaskSourceError, match="Cannot decode workbook"):
        load_tasks(source)
