"""Pydantic models."""
from api.models.sessions import (
    AnswerToggleRequest,
    SessionCreatedResponse,
    TaskChangeRequest,
)

__all__ = [
    "AnswerToggleRequest",
    "SessionCreatedResponse",
    "TaskChangeRequest",
]
