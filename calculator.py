# atomic-mass/calculator.py
"""
Scratch calculator for working out a weighted average, e.g.
``34.969 * 75.78% + 36.966 * 24.22%``.

Only plain numeric arithmetic is accepted. ``%`` means "divide by 100" so
abundances can be typed the way they appear in the table.
"""
from __future__ import annotations

import math
import re
from typing import Any, Optional

from sympy import Basic, nan, oo, preorder_traversal, zoo
from sympy.core.power import Pow
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

LEN_LIMIT = 100
INVALID_CHARS_MSG = (
    "Only numeric expressions using digits, spaces, + - * / ^ % . and parentheses are allowed."
)
NON_FINITE_MSG = "Expression is not finite (e.g., division by zero)."
TOO_COMPLEX_MSG = "Expression is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/^%().\s]{1,100}$")
# 75.78% -> (75.78/100), (1+2)% -> ((1+2)/100)
_NUMBER_TAIL_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

_MAX_OPS = 200
_MAX_INT_DIGITS = 200
_MAX_EXPONENT_ABS = 2000


def validate_expr(s: str) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return "Expression required."
    if len(s) > LEN_LIMIT:
        return f"Expression too long (> {LEN_LIMIT})."
    if _ALLOWED_RE.fullmatch(s) is None:
        return INVALID_CHARS_MSG
    return None


def _expand_percent(s: str) -> str:
    """Rewrite postfix ``%`` as a parenthesised ÷100 on the operand before it."""
    out = ""
    for ch in s:
        if ch != "%":
            out += ch
            continue
        body = out.rstrip()
        if body.endswith(")"):
            depth = 0
            start = -1
            for i in range(len(body) - 1, -1, -1):
                if body[i] == ")":
                    depth += 1
                elif body[i] == "(":
                    depth -= 1
                    if depth == 0:
                        start = i
                        break
            if start < 0:
                raise ValueError(INVALID_CHARS_MSG)
        else:
            m = _NUMBER_TAIL_RE.search(body)
            if not m:
                # a % with nothing in front of it
                raise ValueError(INVALID_CHARS_MSG)
            start = m.start()
        out = f"{body[:start]}({body[start:]}/100)"
    return out


def _assert_finite(val: Any) -> None:
    if getattr(val, "is_finite", None) is False or val in (oo, -oo, zoo, nan):
        raise ValueError(NON_FINITE_MSG)


def _check_powers(node: Any, scale: float = 1.0) -> None:
    # (a^m)^n costs a^(m*n): exponents multiply down through the base
    if isinstance(node, Pow):
        _check_powers(node.exp)
        inner = scale
        if getattr(node.exp, "is_number", False):
            try:
                e = abs(float(node.exp))
            except (TypeError, OverflowError):
                raise ValueError(TOO_COMPLEX_MSG)
            if not math.isfinite(e) or e * scale > _MAX_EXPONENT_ABS:
                raise ValueError(TOO_COMPLEX_MSG)
            inner = scale * max(e, 1.0)
        _check_powers(node.base, inner)
        return
    for arg in getattr(node, "args", ()):
        _check_powers(arg, scale)


def _assert_complexity(sym: Any) -> None:
    if getattr(sym, "is_Number", False):
        return

    if hasattr(sym, "count_ops") and sym.count_ops() > _MAX_OPS:
        raise ValueError(TOO_COMPLEX_MSG)

    for node in preorder_traversal(sym):
        if getattr(node, "is_Integer", False) and len(str(abs(int(node)))) > _MAX_INT_DIGITS:
            raise ValueError(TOO_COMPLEX_MSG)
    _check_powers(sym)


def evaluate_expr(expr: str) -> float:
    """Evaluate a validated expression; raises ValueError with learner-facing feedback."""
    msg = validate_expr(expr)
    if msg:
        raise ValueError(msg)

    # evaluate=False so huge powers are caught before sympy computes them
    src = _expand_percent(expr)
    try:
        sym = parse_expr(src, transformations=TRANSFORMS, evaluate=False)
    except Exception:
        raise ValueError(INVALID_CHARS_MSG)
    if not isinstance(sym, Basic):
        # e.g. "()" parses to an empty tuple
        raise ValueError(INVALID_CHARS_MSG)
    _assert_complexity(sym)

    try:
        val = sym.doit()
    except Exception:
        raise ValueError(TOO_COMPLEX_MSG)
    _assert_finite(val)

    try:
        result = float(val.evalf())
    except TypeError:
        raise ValueError(NON_FINITE_MSG)
    if not math.isfinite(result):
        raise ValueError(NON_FINITE_MSG)
    return result
