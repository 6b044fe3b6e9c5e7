# atomic-mass/schemas/marking.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from checker import AnswerResult

# ---------- Evaluate ----------


class EvaluateRequest(BaseModel):
    expr: str


class EvaluateResponse(BaseModel):
    ok: bool
    value: Optional[float] = None
    feedback: Optional[str] = None


# ---------- Check single ----------


class FeedbackStatus(str, Enum):
    """Feedback state of one problem card on the exercise page."""

    IDLE = "IDLE"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    MISSING_UNIT = "MISSING_UNIT"


STATUS_FOR_RESULT = {
    AnswerResult.CORRECT: FeedbackStatus.SUCCESS,
    AnswerResult.MISSING_UNIT: FeedbackStatus.MISSING_UNIT,
    AnswerResult.INCORRECT: FeedbackStatus.ERROR,
}


class CheckRequest(BaseModel):
    answer: str
    correct_answer: str


class CheckResponse(BaseModel):
    ok: bool
    result: AnswerResult
    status: FeedbackStatus
    correct: bool
    feedback: str
    expected: str


# ---------- Check batch ----------


class CheckBatchRequestItem(CheckRequest):
    id: str


class CheckBatchItem(BaseModel):
    id: str
    response: CheckResponse


class CheckBatchRequest(BaseModel):
    items: List[CheckBatchRequestItem]
    # Client may send it, but server computes its own duration anyway.
    duration_ms: Optional[int] = None


class CheckBatchResponse(BaseModel):
    ok: bool
    total: int
    correct: int
    results: List[CheckBatchItem]
    duration_ms: Optional[int] = None
