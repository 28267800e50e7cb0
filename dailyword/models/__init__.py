"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .game import (
    Animation, CommandResult, EngineState, LetterEvaluation, LetterState,
    Puzzle, PuzzleStatus, empty_attempt
)
from .statistics import FAILED_BUCKET, Statistics, empty_distribution
from .errors import (
    GameError, InputLocked, InvalidLength, NoActivePuzzle, NotInDictionary, TerminalPuzzle
)

__all__ = [
    'Animation', 'CommandResult', 'EngineState', 'LetterEvaluation', 'LetterState',
    'Puzzle', 'PuzzleStatus', 'empty_attempt',
    'FAILED_BUCKET', 'Statistics', 'empty_distribution',
    'GameError', 'InputLocked', 'InvalidLength', 'NoActivePuzzle', 'NotInDictionary', 'TerminalPuzzle'
]
