# atomic-mass/generator.py
"""
Problem generation for weighted-average atomic mass drills.

A problem is 2 or 3 synthetic isotopes whose abundances sum to exactly 100%,
plus the precomputed weighted average. The generation functions take an optional
``rng`` so tests can pass a seeded ``random.Random``; without one a fresh
generator seeded from system entropy is used for that call only.
"""
from __future__ import annotations

import logging
import random
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from elements import ELEMENT_NAMES

logger = logging.getLogger("atomic-mass.generator")

MIN_ISOTOPES = 2
MAX_ISOTOPES = 3
MIN_BASE_MASS = 10
MAX_BASE_MASS = 199
# Every isotope keeps at least this much abundance. With at most 3 isotopes
# the draw range [FLOOR, remaining - FLOOR * left] is never empty.
ABUNDANCE_FLOOR = Decimal("10")
WIDE_STEP_PROBABILITY = 0.3
MASS_DEVIATION = 0.1

_MASS_PLACES = Decimal("0.001")
_PERCENT_PLACES = Decimal("0.01")
_HUNDRED = Decimal("100")


def _fixed(value: float | Decimal, places: Decimal) -> Decimal:
    return Decimal(str(value)).quantize(places, rounding=ROUND_HALF_UP)


class Isotope(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    precise_mass: Decimal
    abundance_percent: Decimal
    mass_number: int

    @property
    def mass_display(self) -> str:
        return f"{self.precise_mass:.3f}"

    @property
    def percent_display(self) -> str:
        return f"{self.abundance_percent:.2f}"


class Problem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    subject_name: str
    isotopes: List[Isotope]
    correct_answer: Decimal

    @property
    def correct_answer_display(self) -> str:
        return f"{self.correct_answer:.3f}"


def weighted_average(isotopes: List[Isotope]) -> Decimal:
    """Σ(mass × abundance / 100), rounded to 3 dp."""
    total = sum(
        (iso.precise_mass * iso.abundance_percent / _HUNDRED for iso in isotopes),
        Decimal("0"),
    )
    return total.quantize(_MASS_PLACES, rounding=ROUND_HALF_UP)


def generate_problem(
    element_name: str, index: int | str, rng: Optional[random.Random] = None
) -> Problem:
    rng = rng or random.Random()

    count = rng.choice((MIN_ISOTOPES, MAX_ISOTOPES))
    base_mass = rng.randint(MIN_BASE_MASS, MAX_BASE_MASS)

    isotopes: List[Isotope] = []
    remaining = _HUNDRED
    for i in range(count):
        step = 2 if rng.random() < WIDE_STEP_PROBABILITY else 1
        mass_number = base_mass + i * step
        precise_mass = _fixed(
            mass_number + rng.uniform(-MASS_DEVIATION, MASS_DEVIATION), _MASS_PLACES
        )

        if i == count - 1:
            percent = remaining.quantize(_PERCENT_PLACES, rounding=ROUND_HALF_UP)
        else:
            left_after = count - i - 1
            upper = remaining - ABUNDANCE_FLOOR * left_after
            percent = _fixed(rng.uniform(float(ABUNDANCE_FLOOR), float(upper)), _PERCENT_PLACES)
            remaining -= percent

        isotopes.append(
            Isotope(
                label=f"Element {element_name}-{mass_number}",
                precise_mass=precise_mass,
                abundance_percent=percent,
                mass_number=mass_number,
            )
        )

    return Problem(
        id=f"problem-{index}",
        subject_name=f"Element {element_name}",
        isotopes=isotopes,
        correct_answer=weighted_average(isotopes),
    )


def generate_problem_set(count: int, rng: Optional[random.Random] = None) -> List[Problem]:
    """
    Pick ``count`` distinct element names (shuffled, without replacement) and
    build one problem per name. Anything above the pool size is capped;
    zero or negative counts give an empty set.
    """
    rng = rng or random.Random()
    if count <= 0:
        return []

    names = list(ELEMENT_NAMES)
    rng.shuffle(names)
    problems = [generate_problem(name, i, rng) for i, name in enumerate(names[:count])]
    logger.debug("generated %d problems: %s", len(problems), [p.subject_name for p in problems])
    return problems
