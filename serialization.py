from __future__ import annotations

from typing import Any

from models import Answer, Question, Task, TaskCompletion
from session import TaskSession


def serialize_answer(answer: Answer) -> dict[str, Any]:
    return {"id": answer.id, "text": answer.text, "isCorrect": answer.is_correct}


def serialize_question(question: Question) -> dict[str, Any]:
    return {
        "id": question.id,
        "question": question.question,
        "typeQuestion": int(question.type_question),
        "instructions": question.instructions,
        "answers": [serialize_answer(answer) for answer in question.answers],
    }


def serialize_task(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "imageSrcs": list(task.image_srcs),
        "testsQuestions": [serialize_question(q) for q in task.questions],
    }


def serialize_completion(item: TaskCompletion) -> dict[str, Any]:
    return {
        "taskId": item.task_id,
        "totalQuestions": item.total_questions,
        "answeredCount": item.answered_count,
        "isComplete": item.is_complete,
    }


def serialize_completion_summary(session: TaskSession) -> dict[str, Any]:
    return {
        "completionByTask": [
            serialize_completion(item) for item in session.completion_status()
        ],
        "isAllTasksComplete": session.is_session_complete(),
        "isCurrentTaskAnswered": session.is_current_task_answered(),
    }


def serialize_session_state(session: TaskSession) -> dict[str, Any]:
    # JSON object keys are strings
    selected = {
        str(task_id): {str(q): answers for q, answers in per_question.items()}
        for task_id, per_question in session.selected_answers().items()
    }
    return {
        "status": session.status.value,
        "isLoading": session.is_loading,
        "isError": session.is_error,
        "errorMessage": session.error_message,
        "tasks": [serialize_task(task) for task in session.tasks],
        "currentTaskIndex": session.current_task_index,
        "selectedAnswers": selected,
        **serialize_completion_summary(session),
    }
