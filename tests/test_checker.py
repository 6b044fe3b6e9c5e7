import random
from decimal import Decimal

from checker import AnswerResult, check_answer, parse_leading_number
from generator import generate_problem


def test_empty_input_incorrect():
    assert check_answer("", "55.123") is AnswerResult.INCORRECT
    assert check_answer("   ", "12.000") is AnswerResult.INCORRECT


def test_not_a_number_incorrect():
    assert check_answer("not a number", "55.123") is AnswerResult.INCORRECT
    assert check_answer("amu 55.123", "55.123") is AnswerResult.INCORRECT


def test_exact_with_unit_correct():
    assert check_answer("55.123 amu", "55.123") is AnswerResult.CORRECT


def test_exact_without_unit_missing_unit():
    assert check_answer("55.123", "55.123") is AnswerResult.MISSING_UNIT


def test_outside_tolerance_incorrect():
    assert check_answer("55.200 amu", "55.123") is AnswerResult.INCORRECT
    assert check_answer("55.200", "55.123") is AnswerResult.INCORRECT


def test_within_tolerance_correct():
    assert check_answer("55.126 amu", "55.123") is AnswerResult.CORRECT
    assert check_answer("55.12 amu", "55.123") is AnswerResult.CORRECT


def test_tolerance_boundary():
    assert check_answer("55.128 amu", "55.123") is AnswerResult.CORRECT
    assert check_answer("55.118 amu", "55.123") is AnswerResult.CORRECT
    assert check_answer("55.129 amu", "55.123") is AnswerResult.INCORRECT


def test_unit_case_insensitive_and_attached():
    assert check_answer("55.123AMU", "55.123") is AnswerResult.CORRECT
    assert check_answer("  55.123 Amu  ", "55.123") is AnswerResult.CORRECT


def test_garbage_expected_incorrect():
    assert check_answer("55.123 amu", "oops") is AnswerResult.INCORRECT
    assert check_answer("55.123 amu", "NaN") is AnswerResult.INCORRECT


def test_huge_exponent_incorrect():
    assert check_answer("1e9999999 amu", "55.123") is AnswerResult.INCORRECT


def test_decimal_expected_accepted():
    assert check_answer("55.123 amu", Decimal("55.123")) is AnswerResult.CORRECT


def test_check_is_repeatable():
    first = check_answer("55.124", "55.123")
    assert check_answer("55.124", "55.123") is first


def test_parse_leading_number():
    assert parse_leading_number("55.123amu") == Decimal("55.123")
    assert parse_leading_number(".5 amu") == Decimal("0.5")
    assert parse_leading_number("-2") == Decimal("-2")
    assert parse_leading_number("1e2 amu") == Decimal("100")
    assert parse_leading_number("amu") is None
    assert parse_leading_number("Infinity") is None


def test_generated_answer_round_trip():
    p = generate_problem("Alpha", 0, random.Random(11))
    answer = p.correct_answer_display
    assert check_answer(f"{answer} amu", answer) is AnswerResult.CORRECT
    assert check_answer(answer, answer) is AnswerResult.MISSING_UNIT


def test_non_ascii_digits_incorrect():
    assert parse_leading_number("٥٥.١٢٣ amu") is None
    assert check_answer("٥٥.١٢٣ amu", "55.123") is AnswerResult.INCORRECT
