"""Service layer for in-memory quiz sessions (one per page visit)."""
import logging
import threading
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from fastapi import HTTPException

from api.config import SOURCE_TIMEOUT_SECONDS, TASKS_SOURCE
from api.utils import utc_now
from labels import LOAD_ERROR_MESSAGE
from session import TaskSession
from task_source import TaskSourceError, load_tasks

log = logging.getLogger(__name__)


@dataclass
class SessionEntry:
    session: TaskSession
    created_at: str
    lock: threading.Lock = field(default_factory=threading.Lock)
    last_access: float = field(default_factory=time.monotonic)


_sessions: dict[str, SessionEntry] = {}
_registry_lock = threading.Lock()


def create_session() -> tuple[str, SessionEntry]:
    """Register a new session in loading state."""
    session_id = uuid.uuid4().hex
    entry = SessionEntry(session=TaskSession(), created_at=utc_now())
    with _registry_lock:
        _sessions[session_id] = entry
    log.info("Session %s created", session_id)
    return session_id, entry


def get_session_entry(session_id: str) -> SessionEntry:
    with _registry_lock:
        entry = _sessions.get(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Session not found")
    entry.last_access = time.monotonic()
    return entry


@contextmanager
def session_scope(session_id: str) -> Iterator[TaskSession]:
    """Hold the session lock for the duration of one operation."""
    entry = get_session_entry(session_id)
    with entry.lock:
        yield entry.session


def remove_session(session_id: str) -> bool:
    with _registry_lock:
        removed = _sessions.pop(session_id, None)
    if removed is not None:
        log.info("Session %s removed", session_id)
    return removed is not None


def load_session_tasks(session_id: str) -> None:
    """Fetch and parse the task workbook, then seed the session."""
    with _registry_lock:
        entry = _sessions.get(session_id)
    if entry is None:
        return

    try:
        tasks = load_tasks(TASKS_SOURCE, timeout=SOURCE_TIMEOUT_SECONDS)
    except TaskSourceError as exc:
        log.error("Session %s: failed to load tasks: %s", session_id, exc)
        with entry.lock:
            entry.session.fail(LOAD_ERROR_MESSAGE)
        return

    with entry.lock:
        entry.session.load_tasks(tasks)


def expire_idle_sessions(max_idle_seconds: float) -> int:
    """Drop sessions that were not touched for max_idle_seconds."""
    cutoff = time.monotonic() - max_idle_seconds
    with _registry_lock:
        stale = [sid for sid, entry in _sessions.items() if entry.last_access < cutoff]
        for session_id in stale:
            del _sessions[session_id]
    if stale:
        log.info("Expired %d idle sessions", len(stale))
    return len(stale)


def session_count() -> int:
    with _registry_lock:
        return len(_sessions)


def clear_sessions() -> None:
    with _registry_lock:
        _sessions.clear()
