"""Service for cleanup operations."""
import logging
import threading
import time

from api.config import SESSION_CLEANUP_INTERVAL_SECONDS, SESSION_RETENTION_MINUTES
from api.services.session_service import expire_idle_sessions


def cleanup_idle_sessions() -> int:
    """Remove sessions abandoned for longer than the retention period."""
    if SESSION_RETENTION_MINUTES <= 0:
        return 0
    return expire_idle_sessions(SESSION_RETENTION_MINUTES * 60)


def schedule_sessions_cleanup() -> None:
    """Schedule periodic cleanup of idle sessions."""
    logger = logging.getLogger(__name__)

    def _worker() -> None:
        while True:
            time.sleep(SESSION_CLEANUP_INTERVAL_SECONDS)
            try:
                cleanup_idle_sessions()
            except Exception as e:
                logger.error(f"Failed to cleanup idle sessions: {e}")

    thread = threading.Thread(
        target=_worker,
        name="sessions_cleanup",
        daemon=True,
    )
    thread.start()
