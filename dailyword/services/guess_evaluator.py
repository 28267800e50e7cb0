"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm, including the
duplicate-letter rule.
"""

from typing import Dict, Iterable, List, Optional

from ..models.game import LetterEvaluation, LetterState

# Higher wins when the same letter was scored differently across rows
_PRIORITY = {
    LetterEvaluation.ABSENT: 1,
    LetterEvaluation.PRESENT: 2,
    LetterEvaluation.CORRECT: 3,
}


def evaluate(guess: str, answer: str) -> List[LetterEvaluation]:
    """
    Scores a guess against the answer, letter by letter.

    First pass marks exact position matches (CORRECT) and consumes those
    answer positions. Second pass walks the remaining guess positions left to
    right and consumes the first unconsumed matching answer letter (PRESENT).
    Anything left over is ABSENT. When the guess repeats a letter more often
    than the answer has it free, the earliest occurrences get PRESENT.
    """
    if len(guess) != len(answer):
        raise ValueError(f"Guess length {len(guess)} does not match answer length {len(answer)}")

    guess = guess.upper()
    answer = answer.upper()
    result: List[Optional[LetterEvaluation]] = [None] * len(guess)
    remaining: List[Optional[str]] = list(answer)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == answer[i]:
            result[i] = LetterEvaluation.CORRECT
            remaining[i] = None

    # Second pass: present letters, consumed in answer-position order
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in remaining:
            result[i] = LetterEvaluation.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = LetterEvaluation.ABSENT

    return result


def keyboard_letter_states(attempts: Iterable[List[LetterState]]) -> Dict[str, str]:
    """
    Best evaluation seen per letter across all scored cells.

    A letter only moves up: ABSENT -> PRESENT -> CORRECT.
    """
    letter_status: Dict[str, LetterEvaluation] = {}
    for row in attempts:
        for cell in row:
            if cell.letter is None or cell.evaluation == LetterEvaluation.UNSCORED:
                continue
            current = letter_status.get(cell.letter)
            if current is None or _PRIORITY[cell.evaluation] > _PRIORITY[current]:
                letter_status[cell.letter] = cell.evaluation
    return {letter: status.value for letter, status in letter_status.items()}
