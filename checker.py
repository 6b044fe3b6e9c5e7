# atomic-mass/checker.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from elements import TOLERANCE, UNIT


class AnswerResult(str, Enum):
    CORRECT = "correct"
    MISSING_UNIT = "missing_unit"
    INCORRECT = "incorrect"


# Float prefix: "55.123amu" -> 55.123, ".5" -> 0.5, "1e2 amu" -> 100
_LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_leading_number(text: str) -> Optional[Decimal]:
    m = _LEADING_NUMBER_RE.match(text)
    if not m:
        return None
    try:
        return Decimal(m.group(0))
    except InvalidOperation:
        return None


def _to_decimal(value: str | Decimal | float) -> Optional[Decimal]:
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        d = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return d if d.is_finite() else None


def has_unit(text: str) -> bool:
    return UNIT in text.lower()


def check_answer(raw_input: str, correct_answer: str | Decimal) -> AnswerResult:
    """
    Classify a learner's free-text answer against the expected weighted average.

    The number must be within TOLERANCE of the answer; if it is, the unit
    decides between CORRECT and MISSING_UNIT. Empty or unparseable input is
    INCORRECT. Never raises.
    """
    text = (raw_input or "").strip()
    if not text:
        return AnswerResult.INCORRECT

    value = parse_leading_number(text)
    if value is None:
        return AnswerResult.INCORRECT

    expected = _to_decimal(correct_answer)
    if expected is None:
        return AnswerResult.INCORRECT

    try:
        within = abs(value - expected) <= TOLERANCE
    except ArithmeticError:
        # exponent out of range, e.g. "1e9999999"
        return AnswerResult.INCORRECT

    if within:
        return AnswerResult.CORRECT if has_unit(text) else AnswerResult.MISSING_UNIT
    return AnswerResult.INCORRECT
