import zipfile
from io import BytesIO
from typing import Callable, Sequence

import pytest
from openpyxl import Workbook

from models import Answer, Question, QuestionType, Task

HEADER_BLOCK = [
    ["Тест"],
    ["Автор"],
    ["Версия"],
    [],
    ["Инструкция"],
    ["type", "n", "question", "V1", "V2", "V3", "V4", "image", "answer"],
]


class FakeClock:
    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_task() -> Callable[..., Task]:
    def _make(
        task_id: int,
        options: Sequence[str] = ("A", "B", "C"),
        correct: int = 1,
        question_type: QuestionType = QuestionType.SINGLE,
    ) -> Task:
        answers = [
            Answer(id=i, text=text, is_correct=i == correct)
            for i, text in enumerate(options, start=1)
        ]
        question = Question(
            id=task_id,
            question=f"Вопрос {task_id}",
            type_question=question_type,
            instructions="",
            answers=answers,
        )
        return Task(id=task_id, questions=[question])

    return _make


@pytest.fixture
def workbook_bytes() -> Callable[[list[list[object]]], bytes]:
    def _build(rows: list[list[object]]) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        for row in rows:
            sheet.append(row)
        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _build


@pytest.fixture
def task_rows() -> list[list[object]]:
    return HEADER_BLOCK + [
        ["testTask", 1, "Сколько будет 2+2?", "3", "4", "5", "", "sum.png", 2],
        ["comment", "пропустить эту строку"],
        ["testTask", 2, "", "Да", "Нет", "", "", "", "1"],
    ]


@pytest.fixture
def truncated_workbook_bytes(workbook_bytes, task_rows) -> bytes:
    """A workbook whose sheet XML is cut in half."""
    source = zipfile.ZipFile(BytesIO(workbook_bytes(task_rows)))
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w") as target:
        for item in source.infolist():
            content = source.read(item.filename)
            if item.filename == "xl/worksheets/sheet1.xml":
                content = content[: len(content) // 2]
            target.writestr(item, content)
    return buffer.getvalue()
