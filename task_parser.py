from __future__ import annotations

import logging
import math
from io import BytesIO
from typing import Iterable, Sequence

from openpyxl import load_workbook

from labels import EMPTY_ANSWER_TEXT, SINGLE_CHOICE_INSTRUCTIONS, task_title
from models import Answer, Question, QuestionType, Task

log = logging.getLogger(__name__)

HEADER_ROWS = 6
TASK_MARKER = "testTask"
MIN_TASK_CELLS = 9

QUESTION_COL = 2
OPTION_COLS = (3, 4, 5, 6)
IMAGE_COL = 7
CORRECT_COL = 8

IMAGES_ROOT = "/images/"


def read_sheet_rows(data: bytes) -> list[list[object]]:
    """
    Decode an xlsx workbook and return the first sheet as rows of cell values.
    Trailing empty cells are dropped, so len(row) is the index of the last
    filled cell + 1. Row 0 is the first row of the sheet.
    """
    workbook = load_workbook(BytesIO(data), data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows: list[list[object]] = []
        for values in sheet.iter_rows(min_row=1, values_only=True):
            row = list(values)
            while row and row[-1] is None:
                row.pop()
            rows.append(row)
        return rows
    finally:
        workbook.close()


def _cell_text(row: Sequence[object], index: int) -> str:
    value = row[index] if index < len(row) else None
    if value is None:
        return ""
    return str(value).strip()


def coerce_answer_number(value: object) -> int | float:
    """
    Correct-answer column to a number. Numeric cells pass through, numeric
    text is parsed, anything else is 0 (matches no 1-based position).
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return 0
    else:
        return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def build_answers(options: Iterable[str], correct: int | float) -> list[Answer]:
    """
    Number the non-empty options 1..k and flag the one at position `correct`.
    Positions are counted after empty options are dropped.
    """
    texts = [text for text in options if text]
    answers = [
        Answer(id=position, text=text, is_correct=position == correct)
        for position, text in enumerate(texts, start=1)
    ]
    if not answers:
        answers.append(Answer(id=1, text=EMPTY_ANSWER_TEXT, is_correct=False))
    return answers


def is_task_row(row: object) -> bool:
    return (
        isinstance(row, (list, tuple))
        and len(row) >= MIN_TASK_CELLS
        and row[0] == TASK_MARKER
    )


def build_task(row: Sequence[object], task_id: int) -> Task:
    question_text = _cell_text(row, QUESTION_COL)
    image = _cell_text(row, IMAGE_COL)
    correct = coerce_answer_number(row[CORRECT_COL])
    answers = build_answers((_cell_text(row, i) for i in OPTION_COLS), correct)

    question = Question(
        id=task_id,
        question=question_text or task_title(task_id),
        type_question=QuestionType.SINGLE,
        instructions=SINGLE_CHOICE_INSTRUCTIONS,
        answers=answers,
    )
    return Task(
        id=task_id,
        questions=[question],
        image_srcs=[f"{IMAGES_ROOT}{image}"] if image else [],
    )


def parse_task_rows(rows: Sequence[object]) -> list[Task]:
    """Build tasks from raw sheet rows. Rows that are not task rows are skipped."""
    data_rows = list(rows[HEADER_ROWS:])
    task_rows = [row for row in data_rows if is_task_row(row)]
    tasks = [build_task(row, task_id) for task_id, row in enumerate(task_rows, start=1)]
    log.debug(
        "Task rows: %d of %d data rows (%d header rows skipped)",
        len(task_rows),
        len(data_rows),
        min(len(rows), HEADER_ROWS),
    )
    return tasks


def parse_task_workbook(data: bytes) -> list[Task]:
    tasks = parse_task_rows(read_sheet_rows(data))
    log.info("Tasks parsed: %d", len(tasks))
    return tasks
