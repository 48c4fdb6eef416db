from datetime import datetime
from pathlib import Path

import pytest
from fastapi import HTTPException

from api.utils import file_utils, json_utils, time_utils, validation


def test_safe_asset_path_allows_nested(tmp_path: Path) -> None:
    base_dir = tmp_path / "images"
    base_dir.mkdir()
    resolved = file_utils.safe_asset_path(base_dir, "tasks/task1.png")
    assert resolved == (base_dir / "tasks" / "task1.png").resolve()


def test_safe_asset_path_blocks_traversal(tmp_path: Path) -> None:
    base_dir = tmp_path / "images"
    base_dir.mkdir()
    with pytest.raises(HTTPException):
        file_utils.safe_asset_path(base_dir, "../secret.txt")


def test_json_dump_keeps_unicode() -> None:
    dumped = json_utils.json_dump({"question": "Сколько будет 2+2?"})
    assert "Сколько" in dumped


def test_utc_now_is_iso() -> None:
    parsed = datetime.fromisoformat(time_utils.utc_now())
    assert parsed.tzinfo is not None


def test_validate_id() -> None:
    assert validation.validate_id("sessionId", " abc ") == "abc"
    with pytest.raises(HTTPException):
        validation.validate_id("sessionId", "")
    with pytest.raises(HTTPException):
        validation.validate_id("sessionId", "../bad")
