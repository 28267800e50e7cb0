"""
Game Data Models

Contains all puzzle-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .statistics import Statistics


class LetterEvaluation(Enum):
    """Per-letter verdict for one board cell."""
    UNSCORED = "tbd"
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class Animation(Enum):
    """Transient UI cue attached to a cell. Not part of the game logic."""
    NONE = "none"
    FLIPIN = "flipin"
    FLIPOUT = "flipout"
    SHAKE = "shake"


class PuzzleStatus(Enum):
    """Lifecycle of one day's puzzle. WON and LOST are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass
class LetterState:
    """One board cell."""
    letter: Optional[str] = None
    evaluation: LetterEvaluation = LetterEvaluation.UNSCORED
    animation: Animation = Animation.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "letter": self.letter,
            "evaluation": self.evaluation.value,
            "animation": self.animation.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LetterState":
        letter = data.get("letter")
        if letter is not None and (not isinstance(letter, str) or len(letter) != 1):
            raise ValueError(f"Invalid cell letter: {letter!r}")
        return cls(
            letter=letter,
            evaluation=LetterEvaluation(data.get("evaluation", LetterEvaluation.UNSCORED.value)),
            animation=Animation(data.get("animation", Animation.NONE.value)),
        )


def empty_attempt(word_length: int) -> List[LetterState]:
    """Returns a row of empty, unscored cells."""
    return [LetterState() for _ in range(word_length)]


@dataclass
class Puzzle:
    """One day's game: the secret answer and the attempt history."""
    day_index: int
    answer: str
    attempts: List[List[LetterState]]
    current_attempt_index: int = 0
    status: PuzzleStatus = PuzzleStatus.IN_PROGRESS

    @property
    def word_length(self) -> int:
        return len(self.answer)

    @property
    def max_attempts(self) -> int:
        return len(self.attempts)

    @property
    def is_over(self) -> bool:
        return self.status != PuzzleStatus.IN_PROGRESS

    @property
    def guesses_used(self) -> int:
        """Number of submitted rows."""
        if self.is_over:
            return self.current_attempt_index + 1
        return self.current_attempt_index

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day_index": self.day_index,
            "answer": self.answer,
            "attempts": [[cell.to_dict() for cell in row] for row in self.attempts],
            "current_attempt_index": self.current_attempt_index,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        answer = data["answer"]
        if not isinstance(answer, str) or not answer.isalpha():
            raise ValueError(f"Invalid answer: {answer!r}")
        attempts = [[LetterState.from_dict(cell) for cell in row] for row in data["attempts"]]
        if not attempts or any(len(row) != len(answer) for row in attempts):
            raise ValueError("Attempt rows do not match the answer length")
        current_attempt_index = int(data["current_attempt_index"])
        if not 0 <= current_attempt_index < len(attempts):
            raise ValueError(f"Attempt index out of range: {current_attempt_index}")
        return cls(
            day_index=int(data["day_index"]),
            answer=answer.upper(),
            attempts=attempts,
            current_attempt_index=current_attempt_index,
            status=PuzzleStatus(data["status"]),
        )


@dataclass
class EngineState:
    """Everything the UI collaborators can read from the engine."""
    puzzle: Optional[Puzzle] = None
    statistics: Statistics = field(default_factory=Statistics)
    input_locked: bool = False
    message: Optional[str] = None

    def to_dict(self, reveal_answer: bool = True) -> Dict[str, Any]:
        puzzle = self.puzzle.to_dict() if self.puzzle else None
        if puzzle and not reveal_answer and not self.puzzle.is_over:
            puzzle["answer"] = None
        return {
            "puzzle": puzzle,
            "statistics": self.statistics.to_dict(),
            "input_locked": self.input_locked,
            "message": self.message,
        }


@dataclass
class CommandResult:
    """Outcome of one engine command."""
    success: bool
    error: Optional[str] = None
    message: Optional[str] = None
    outcome: Optional[str] = None
    evaluations: List[str] = field(default_factory=list)
