from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable

from models import QuestionType, Task, TaskCompletion

log = logging.getLogger(__name__)


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


class SessionStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class TaskSession:
    """
    State of one run through the task list: where the respondent is, what
    they picked and how long each task was on screen.

    Answer indices are 0-based positions in Question.answers; only the
    exported workbook uses 1-based numbers.
    """

    def __init__(self, clock: Callable[[], int] = wall_clock_ms):
        self._clock = clock
        self._tasks: list[Task] = []
        self._current_index = 0
        self._selected: dict[int, dict[int, list[int]]] = {}
        self._start_times: dict[int, int] = {}
        self._durations: dict[int, int] = {}
        self.status = SessionStatus.LOADING
        self.error_message: str | None = None

    # ---- lifecycle ----
    def load_tasks(self, tasks: list[Task]) -> None:
        self._tasks = list(tasks)
        self._current_index = 0
        self._selected = {}
        self._start_times = {}
        self._durations = {}
        self.status = SessionStatus.READY
        self.error_message = None
        if self._tasks:
            self._start_times[self._tasks[0].id] = self._clock()
        log.info("Session ready with %d tasks", len(self._tasks))

    def fail(self, message: str) -> None:
        self._tasks = []
        self.status = SessionStatus.ERROR
        self.error_message = message

    @property
    def is_loading(self) -> bool:
        return self.status is SessionStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is SessionStatus.ERROR

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def current_task_index(self) -> int:
        return self._current_index

    @property
    def current_task(self) -> Task | None:
        if not self._tasks:
            return None
        return self._tasks[self._current_index]

    def find_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- timing ----
    def finalize_current_task(self) -> None:
        """Add the time since the active task was entered to its duration."""
        task = self.current_task
        if task is None:
            return
        started = self._start_times.get(task.id)
        if started is None:
            return
        now = self._clock()
        self._durations[task.id] = self._durations.get(task.id, 0) + max(now - started, 0)
        self._start_times[task.id] = now

    def change_task(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            return
        self.finalize_current_task()
        self._current_index = index
        self._start_times[self._tasks[index].id] = self._clock()

    def duration_of(self, task_id: int) -> int:
        return self._durations.get(task_id, 0)

    def total_duration(self) -> int:
        return sum(self._durations.values())

    # ---- answers ----
    def selected_for(self, task_id: int, question_index: int) -> list[int]:
        return list(self._selected.get(task_id, {}).get(question_index, []))

    def toggle_answer(
        self,
        task_id: int,
        question_index: int,
        answer_index: int,
        question_type: QuestionType | int,
    ) -> None:
        task_answers = self._selected.setdefault(task_id, {})
        current = task_answers.get(question_index, [])
        if question_type == QuestionType.SINGLE:
            task_answers[question_index] = [answer_index]
        elif answer_index in current:
            task_answers[question_index] = [i for i in current if i != answer_index]
        else:
            task_answers[question_index] = current + [answer_index]

    def selected_answers(self) -> dict[int, dict[int, list[int]]]:
        return {
            task_id: {q: list(a) for q, a in answers.items()}
            for task_id, answers in self._selected.items()
        }

    # ---- completion ----
    def completion_status(self) -> list[TaskCompletion]:
        result = []
        for task in self._tasks:
            answered = sum(
                1
                for question_index in range(len(task.questions))
                if self.selected_for(task.id, question_index)
            )
            result.append(
                TaskCompletion(
                    task_id=task.id,
                    total_questions=len(task.questions),
                    answered_count=answered,
                )
            )
        return result

    def is_session_complete(self) -> bool:
        return bool(self._tasks) and all(
            item.is_complete for item in self.completion_status()
        )

    def is_current_task_answered(self) -> bool:
        task = self.current_task
        if task is None:
            return False
        return bool(self.selected_for(task.id, 0))
