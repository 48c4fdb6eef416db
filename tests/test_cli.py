import json
from io import BytesIO
from pathlib import Path

from openpyxl import load_workbook

import cli


def test_inspect_prints_tasks(tmp_path: Path, capsys, workbook_bytes, task_rows) -> None:
    source = tmp_path / "Question.xlsx"
    source.write_bytes(workbook_bytes(task_rows))

    assert cli.main(["inspect", str(source)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [task["id"] for task in payload] == [1, 2]
    assert payload[1]["testsQuestions"][0]["question"] == "Задание 2"


def test_answer_key_scores_every_task(tmp_path: Path, workbook_bytes, task_rows) -> None:
    source = tmp_path / "Question.xlsx"
    source.write_bytes(workbook_bytes(task_rows))
    output = tmp_path / "Result.xlsx"

    assert cli.main(["answer-key", str(source), "--output", str(output)]) == 0
    rows = list(load_workbook(BytesIO(output.read_bytes())).active.iter_rows(values_only=True))
    assert rows[6][:2] == ("Общее время", "00:00:00")
    assert [row[3] for row in rows[9:]] == [1, 1]


def test_missing_source_fails(tmp_path: Path, capsys) -> None:
    assert cli.main(["inspect", str(tmp_path / "missing.xlsx")]) == 1
    assert "Error" in capsys.readouterr().err


def test_corrupt_source_fails(tmp_path: Path, capsys, truncated_workbook_bytes) -> None:
    source = tmp_path / "Question.xlsx"
    source.write_bytes(truncated_workbook_bytes)

    assert cli.main(["inspect", str(source)]) == 1
    assert "Cannot decode workbook" in capsys.readouterr().err
