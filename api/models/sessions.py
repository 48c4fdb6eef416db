"""Session-related Pydantic models."""
from pydantic import BaseModel, Field


class AnswerToggleRequest(BaseModel):
    """Model for selecting or unselecting an answer."""

    taskId: int = Field(..., ge=1)
    questionIndex: int = Field(..., ge=0)
    answerIndex: int = Field(..., ge=0)
    typeQuestion: int = Field(0, ge=0, le=1)


class TaskChangeRequest(BaseModel):
    """Model for moving to another task."""

    index: int


class SessionCreatedResponse(BaseModel):
    """Model for a freshly created session."""

    sessionId: str
    status: str
    createdAt: str
