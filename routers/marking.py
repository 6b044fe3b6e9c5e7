from __future__ import annotations

import logging
import time
from typing import Any, Dict, List

from fastapi import APIRouter

from calculator import evaluate_expr
from checker import AnswerResult, check_answer
from elements import UNIT
from schemas.marking import (
    STATUS_FOR_RESULT,
    CheckBatchRequest,
    CheckBatchResponse,
    CheckRequest,
    CheckResponse,
    EvaluateRequest,
    EvaluateResponse,
)

logger = logging.getLogger("atomic-mass.marking")

router = APIRouter(tags=["marking"])

_MISSING_UNIT_MSG = f"Almost there! The number is correct, but you are missing the unit {UNIT}."
_INCORRECT_MSG = (
    "Incorrect. Remember to convert percentages to decimals (e.g., 50% = 0.50) before multiplying."
)


def _feedback(result: AnswerResult, expected: str) -> str:
    if result is AnswerResult.CORRECT:
        return f"Great job! The average atomic mass is {expected} {UNIT}."
    if result is AnswerResult.MISSING_UNIT:
        return _MISSING_UNIT_MSG
    return _INCORRECT_MSG


def _check_one(answer: str, correct_answer: str) -> Dict[str, Any]:
    result = check_answer(answer, correct_answer)
    expected = correct_answer.strip()
    return {
        "ok": True,
        "result": result,
        "status": STATUS_FOR_RESULT[result],
        "correct": result is AnswerResult.CORRECT,
        "feedback": _feedback(result, expected),
        "expected": expected,
    }


# --- Endpoints --------------------------------------------------------------------


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    try:
        return {"ok": True, "value": evaluate_expr(req.expr)}
    except ValueError as e:
        return {"ok": False, "value": None, "feedback": str(e)}


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    return _check_one(req.answer, req.correct_answer)


@router.post("/check-batch", response_model=CheckBatchResponse)
def check_batch(req: CheckBatchRequest):
    t0 = time.perf_counter()

    results: List[Dict[str, Any]] = []
    correct_count = 0
    for it in req.items:
        res = _check_one(it.answer, it.correct_answer)
        results.append({"id": it.id, "response": res})
        if res["correct"]:
            correct_count += 1

    measured_ms = int(round((time.perf_counter() - t0) * 1000))
    duration_ms = req.duration_ms if req.duration_ms is not None else measured_ms

    logger.info("checked batch: %d/%d correct", correct_count, len(results))
    return {
        "ok": True,
        "total": len(results),
        "correct": correct_count,
        "results": results,
        "duration_ms": duration_ms,
    }
