# atomic-mass/schemas/problems.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel

from generator import Isotope, Problem


class IsotopeOut(BaseModel):
    name: str
    mass: str  # 3 dp, e.g. "86.912"
    percent: str  # 2 dp, e.g. "27.83"
    mass_number: int

    @classmethod
    def from_isotope(cls, iso: Isotope) -> "IsotopeOut":
        return cls(
            name=iso.label,
            mass=iso.mass_display,
            percent=iso.percent_display,
            mass_number=iso.mass_number,
        )


class ProblemOut(BaseModel):
    id: str
    element_name: str
    isotopes: List[IsotopeOut]
    correct_answer: str  # 3 dp

    @classmethod
    def from_problem(cls, p: Problem) -> "ProblemOut":
        return cls(
            id=p.id,
            element_name=p.subject_name,
            isotopes=[IsotopeOut.from_isotope(i) for i in p.isotopes],
            correct_answer=p.correct_answer_display,
        )


class ConceptOut(BaseModel):
    title: str
    summary: str
    formula: str
    steps: List[str]
