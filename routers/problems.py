from __future__ import annotations

import logging
import random
from typing import List, Optional

from fastapi import APIRouter, Query

from elements import CONCEPT
from generator import generate_problem_set
from schemas.problems import ConceptOut, ProblemOut
from settings import DEFAULT_PROBLEM_COUNT

logger = logging.getLogger("atomic-mass.problems")

router = APIRouter(tags=["problems"])


@router.get("/problems", response_model=List[ProblemOut])
def list_problems(
    count: int = Query(default=DEFAULT_PROBLEM_COUNT, description="Capped at the element pool size"),
    seed: Optional[int] = Query(default=None, description="Fix the set for reproducible worksheets"),
):
    # one generator per request; nothing shared between calls
    rng = random.Random(seed)
    problems = generate_problem_set(count, rng)
    logger.debug("served %d problems (seed=%s)", len(problems), seed)
    return [ProblemOut.from_problem(p) for p in problems]


@router.get("/concept", response_model=ConceptOut)
def get_concept():
    return CONCEPT
