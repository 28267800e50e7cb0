"""
Game State Machine

Pure transitions over a Puzzle. Each function returns a new Puzzle and never
mutates the one it was given.

    IN_PROGRESS -> IN_PROGRESS   (non-winning guess, attempts left)
    IN_PROGRESS -> WON
    IN_PROGRESS -> LOST          (non-winning guess on the last attempt)
"""

import copy
from enum import Enum
from typing import Collection, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import InvalidLength, NotInDictionary, TerminalPuzzle
from ..models.game import (
    Animation, LetterEvaluation, LetterState, Puzzle, PuzzleStatus, empty_attempt
)


class Outcome(Enum):
    WON = "won"
    LOST = "lost"
    CONTINUE = "continue"


def new_puzzle(day_index: int, answer: str, max_attempts: int = MAX_ATTEMPTS) -> Puzzle:
    """
    Creates an empty, in-progress puzzle.

    Args:
        day_index: Day the puzzle belongs to
        answer: Target word; stored uppercase
        max_attempts: Number of rows on the board

    Returns:
        Puzzle with every row unscored and the first row being edited
    """
    answer = answer.upper()
    return Puzzle(
        day_index=day_index,
        answer=answer,
        attempts=[empty_attempt(len(answer)) for _ in range(max_attempts)],
        current_attempt_index=0,
        status=PuzzleStatus.IN_PROGRESS,
    )


def ensure_in_progress(puzzle: Puzzle) -> None:
    if puzzle.is_over:
        raise TerminalPuzzle(f"Puzzle for day {puzzle.day_index} is {puzzle.status.value}")


def current_guess(puzzle: Puzzle) -> str:
    row = puzzle.attempts[puzzle.current_attempt_index]
    return "".join(cell.letter for cell in row if cell.letter is not None)


def edit_current_guess(puzzle: Puzzle, text: str) -> Puzzle:
    """Overwrites the current row with up to word_length letters of text."""
    ensure_in_progress(puzzle)
    letters = list(text.upper()[:puzzle.word_length])
    updated = copy.deepcopy(puzzle)
    updated.attempts[puzzle.current_attempt_index] = [
        LetterState(letter=letters[i] if i < len(letters) else None)
        for i in range(puzzle.word_length)
    ]
    return updated


def validate_guess(puzzle: Puzzle, vocabulary: Collection[str]) -> str:
    """
    Returns the current row as a word, or raises why it cannot be submitted.

    The vocabulary must hold uppercase words.
    """
    ensure_in_progress(puzzle)
    guess = current_guess(puzzle)
    if len(guess) != puzzle.word_length:
        raise InvalidLength(f"Guess {guess!r} is not {puzzle.word_length} letters long")
    if guess.upper() not in vocabulary:
        raise NotInDictionary(f"Guess {guess!r} is not in the word list")
    return guess.upper()


def set_animation(puzzle: Puzzle, index: int, animation: Animation) -> Puzzle:
    """
    Tags one cell of the current row with an animation.

    Args:
        puzzle: Puzzle to copy
        index: Cell position in the current row
        animation: Animation to show on that cell

    Returns:
        Updated copy of the puzzle
    """
    updated = copy.deepcopy(puzzle)
    updated.attempts[puzzle.current_attempt_index][index].animation = animation
    return updated


def score_cell(puzzle: Puzzle, index: int, evaluation: LetterEvaluation) -> Puzzle:
    """
    Scores one cell of the current row.

    Args:
        puzzle: In-progress puzzle to copy
        index: Cell position in the current row
        evaluation: Score for that cell

    Returns:
        Updated copy of the puzzle

    Raises:
        TerminalPuzzle: If the puzzle is already won or lost
        ValueError: If the cell was scored before
    """
    ensure_in_progress(puzzle)
    cell = puzzle.attempts[puzzle.current_attempt_index][index]
    if cell.evaluation != LetterEvaluation.UNSCORED:
        raise ValueError(f"Cell {index} of attempt {puzzle.current_attempt_index} is already scored")
    updated = copy.deepcopy(puzzle)
    updated.attempts[puzzle.current_attempt_index][index].evaluation = evaluation
    return updated


def decide_outcome(puzzle: Puzzle) -> Tuple[Puzzle, Outcome]:
    """Applies exactly one of WON, LOST or advance-to-next-attempt."""
    ensure_in_progress(puzzle)
    updated = copy.deepcopy(puzzle)
    if current_guess(puzzle).upper() == puzzle.answer:
        updated.status = PuzzleStatus.WON
        return updated, Outcome.WON
    if puzzle.current_attempt_index >= puzzle.max_attempts - 1:
        updated.status = PuzzleStatus.LOST
        return updated, Outcome.LOST
    updated.current_attempt_index += 1
    return updated, Outcome.CONTINUE


_SHARE_SQUARES = {
    LetterEvaluation.CORRECT: "\U0001F7E9",
    LetterEvaluation.PRESENT: "\U0001F7E8",
    LetterEvaluation.ABSENT: "⬜",
}


def share_text(puzzle: Puzzle, title: str) -> str:
    """Spoiler-free summary of the submitted rows, one emoji square per cell."""
    score = str(puzzle.guesses_used) if puzzle.status != PuzzleStatus.LOST else "X"
    rows = [
        "".join(_SHARE_SQUARES.get(cell.evaluation, "") for cell in row)
        for row in puzzle.attempts[:puzzle.guesses_used]
    ]
    board = "\n".join(rows)
    return f"{title} {puzzle.day_index} {score}/{puzzle.max_attempts}\n\n{board}\n"
