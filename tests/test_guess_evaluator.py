from collections import Counter

import pytest

from dailyword.models.game import LetterEvaluation, LetterState
from dailyword.services.guess_evaluator import evaluate, keyboard_letter_states

C = LetterEvaluation.CORRECT
P = LetterEvaluation.PRESENT
A = LetterEvaluation.ABSENT


def test_duplicate_in_answer_consumed_by_exact_matches():
    assert evaluate("GERTA", "GEERT") == [C, C, P, P, A]


def test_exact_guess_is_all_correct():
    assert evaluate("CRANE", "CRANE") == [C] * 5


def test_no_common_letters_is_all_absent():
    assert evaluate("HUMPH", "CRANE") == [A] * 5


def test_repeated_guess_letter_already_matched_is_absent():
    assert evaluate("EERIE", "CRANE") == [A, A, P, A, C]


def test_earliest_duplicate_wins_present():
    assert evaluate("SPEED", "ABIDE") == [A, A, P, A, P]


def test_correct_match_takes_priority_over_earlier_present():
    # Both L of the answer are taken by exact matches, the leading L gets nothing
    assert evaluate("LOLLY", "HELLO") == [A, P, C, C, A]
    assert evaluate("ALLOY", "HELLO") == [A, P, C, P, A]


def test_evaluation_is_case_insensitive():
    assert evaluate("crane", "CRANE") == [C] * 5


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate("CRAN", "CRANE")


@pytest.mark.parametrize("guess,answer", [
    ("EERIE", "CRANE"),
    ("SPEED", "ABIDE"),
    ("GERTA", "GEERT"),
    ("LLAMA", "HELLO"),
    ("AAAAA", "BANAL"),
    ("EEEEE", "GEESE"),
])
def test_present_never_exceeds_unmatched_answer_letters(guess, answer):
    result = evaluate(guess, answer)
    answer_counts = Counter(answer)
    for letter in set(guess):
        correct = sum(1 for g, r in zip(guess, result) if g == letter and r == C)
        present = sum(1 for g, r in zip(guess, result) if g == letter and r == P)
        assert present <= answer_counts[letter] - correct


def test_keyboard_keeps_best_evaluation_per_letter():
    rows = [
        [LetterState("E", A), LetterState("R", P), LetterState("A", C)],
        [LetterState("R", C), LetterState("E", P), LetterState("A", A)],
        [LetterState("T"), LetterState(None), LetterState("Q")],
    ]

    states = keyboard_letter_states(rows)

    assert states == {"E": "present", "R": "correct", "A": "correct"}
