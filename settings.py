from __future__ import annotations

import os

# Read once at import; the core modules never look at these.
_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"

ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]

try:
    DEFAULT_PROBLEM_COUNT = int(os.getenv("DEFAULT_PROBLEM_COUNT", "4"))
except ValueError:
    DEFAULT_PROBLEM_COUNT = 4

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    LOG_LEVEL = "INFO"
