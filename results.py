from __future__ import annotations

import logging
from io import BytesIO

from openpyxl import Workbook

from labels import (
    NO_ANSWER_PLACEHOLDER,
    RESPONDENT_FIELDS,
    RESULTS_HEADER,
    RESULTS_SHEET_TITLE,
    TOTAL_TIME_LABEL,
    task_title,
)
from models import Task
from session import TaskSession

log = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
RESULT_FILENAME = "Result.xlsx"


def format_duration(duration_ms: int) -> str:
    """Milliseconds to HH:MM:SS. Hours are not wrapped at 24."""
    total_sec = max(int(duration_ms), 0) // 1000
    hours, rest = divmod(total_sec, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def score_task(session: TaskSession, task: Task) -> tuple[int, int]:
    """Return (1-based user answer or 0, score) for the task's first question."""
    question = task.questions[0]
    selected = session.selected_for(task.id, 0)
    user_answer = selected[0] + 1 if selected else 0
    correct = question.correct_position()
    score = 1 if user_answer > 0 and user_answer == correct else 0
    return user_answer, score


def build_result_rows(session: TaskSession) -> list[list[object]] | None:
    """
    Result table: respondent fields, total time, a blank row, the header and
    one row per task. None while the session is incomplete.
    """
    if not session.is_session_complete():
        return None

    # the active task must be closed before the total is taken
    session.finalize_current_task()

    rows: list[list[object]] = [[label] for label in RESPONDENT_FIELDS]
    rows.append([TOTAL_TIME_LABEL, format_duration(session.total_duration())])
    rows.append([])
    rows.append(list(RESULTS_HEADER))

    for task in session.tasks:
        user_answer, score = score_task(session, task)
        rows.append(
            [
                task_title(task.id),
                user_answer or NO_ANSWER_PLACEHOLDER,
                format_duration(session.duration_of(task.id)),
                score,
            ]
        )
    return rows


def write_results_workbook(rows: list[list[object]]) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = RESULTS_SHEET_TITLE
    for row in rows:
        sheet.append(row)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def export_results(session: TaskSession) -> bytes | None:
    rows = build_result_rows(session)
    if rows is None:
        log.info("Export refused: session is not complete")
        return None
    log.info("Exporting results for %d tasks", len(session.tasks))
    return write_results_workbook(rows)
