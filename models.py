from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class QuestionType(IntEnum):
    SINGLE = 0  # choosing an answer replaces the selection
    MULTI = 1  # choosing an answer toggles it


@dataclass(frozen=True)
class Answer:
    id: int  # 1-based position after empty options are dropped
    text: str
    is_correct: bool = False


@dataclass(frozen=True)
class Question:
    id: int
    question: str
    type_question: QuestionType
    instructions: str
    answers: List[Answer]

    def correct_position(self) -> int:
        """1-based position of the first correct answer, 0 when none is marked."""
        for position, answer in enumerate(self.answers, start=1):
            if answer.is_correct:
                return position
        return 0


@dataclass(frozen=True)
class Task:
    id: int  # 1-based position among the task rows of the sheet
    questions: List[Question]
    image_srcs: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class TaskCompletion:
    task_id: int
    total_questions: int
    answered_count: int

    @property
    def is_complete(self) -> bool:
        return self.answered_count == self.total_questions
