"""Quiz session endpoints."""
from fastapi import APIRouter, BackgroundTasks, HTTPException
from fastapi.responses import Response

from api.models import AnswerToggleRequest, SessionCreatedResponse, TaskChangeRequest
from api.services.session_service import (
    create_session,
    load_session_tasks,
    remove_session,
    session_scope,
)
from api.utils import validate_id
from results import RESULT_FILENAME, XLSX_MEDIA_TYPE, export_results
from serialization import serialize_completion_summary, serialize_session_state

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=SessionCreatedResponse)
def start_session(background_tasks: BackgroundTasks) -> dict[str, object]:
    """Create a session; tasks are loaded in the background."""
    session_id, entry = create_session()
    background_tasks.add_task(load_session_tasks, session_id)
    return {
        "sessionId": session_id,
        "status": entry.session.status.value,
        "createdAt": entry.created_at,
    }


@router.get("/{session_id}")
def get_session_state(session_id: str) -> dict[str, object]:
    """Get full session state."""
    session_id = validate_id("sessionId", session_id)
    with session_scope(session_id) as session:
        return serialize_session_state(session)


@router.delete("/{session_id}")
def end_session(session_id: str) -> dict[str, str]:
    """Drop the session."""
    session_id = validate_id("sessionId", session_id)
    if not remove_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "deleted", "sessionId": session_id}


@router.get("/{session_id}/tasks/{task_id}/questions/{question_index}/selected")
def get_selected_answers(
    session_id: str, task_id: int, question_index: int
) -> dict[str, object]:
    """Get selected answer indices for one question."""
    session_id = validate_id("sessionId", session_id)
    with session_scope(session_id) as session:
        return {
            "taskId": task_id,
            "questionIndex": question_index,
            "selected": session.selected_for(task_id, question_index),
        }


@router.post("/{session_id}/answers")
def toggle_answer(session_id: str, payload: AnswerToggleRequest) -> dict[str, object]:
    """Select or unselect an answer."""
    session_id = validate_id("sessionId", session_id)
    with session_scope(session_id) as session:
        task = session.find_task(payload.taskId)
        if task is None:
            raise HTTPException(status_code=404, detail="Task not found")
        if payload.questionIndex >= len(task.questions):
            raise HTTPException(status_code=404, detail="Question not found")
        if payload.answerIndex >= len(task.questions[payload.questionIndex].answers):
            raise HTTPException(status_code=400, detail="Invalid answerIndex")

        session.toggle_answer(
            payload.taskId,
            payload.questionIndex,
            payload.answerIndex,
            payload.typeQuestion,
        )
        return {
            "taskId": payload.taskId,
            "questionIndex": payload.questionIndex,
            "selected": session.selected_for(payload.taskId, payload.questionIndex),
            **serialize_completion_summary(session),
        }


@router.post("/{session_id}/current-task")
def change_current_task(
    session_id: str, payload: TaskChangeRequest
) -> dict[str, object]:
    """Move to another task. Out-of-range indices leave the state unchanged."""
    session_id = validate_id("sessionId", session_id)
    with session_scope(session_id) as session:
        session.change_task(payload.index)
        return {
            "currentTaskIndex": session.current_task_index,
            **serialize_completion_summary(session),
        }


@router.get("/{session_id}/completion")
def get_completion(session_id: str) -> dict[str, object]:
    """Get per-task completion and overall flags."""
    session_id = validate_id("sessionId", session_id)
    with session_scope(session_id) as session:
        return serialize_completion_summary(session)


@router.get("/{session_id}/export")
def export_session(session_id: str) -> Response:
    """Download the results workbook once every task is answered."""
    session_id = validate_id("sessionId", session_id)
    with session_scope(session_id) as session:
        content = export_results(session)
    if content is None:
        raise HTTPException(status_code=409, detail="Session is not complete")
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{RESULT_FILENAME}"'},
    )
