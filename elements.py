# Synthetic element pool and fixed exercise content.
# Names are placeholders, not real periodic-table data.
from decimal import Decimal

ELEMENT_NAMES = [
    "Alpha",
    "Beta",
    "Gamma",
    "Delta",
    "Epsilon",
    "Zeta",
    "Theta",
    "Omega",
]

UNIT = "amu"

# Both the stored answer and the learner's rounding are at 3 dp.
TOLERANCE = Decimal("0.005")

CONCEPT = {
    "title": "The Concept",
    "summary": (
        "The average atomic mass is the weighted average of all the naturally "
        "occurring isotopes of an element. It accounts for how common each "
        "isotope is in nature."
    ),
    "formula": "Average Mass = (Mass₁ × %Abundance₁) + (Mass₂ × %Abundance₂) + ...",
    "steps": [
        "Convert percentages to decimals (÷ 100)",
        "Round final answer to 3 decimal places",
        f'Don\'t forget the unit "{UNIT}"',
    ],
}
