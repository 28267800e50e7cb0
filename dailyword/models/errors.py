"""
Game Errors

User-facing, recoverable conditions raised by the game rules and reported
by the engine as transient messages.
"""


class GameError(Exception):
    """Base class for all rejected commands."""
    kind = "GameError"


class InvalidLength(GameError):
    """The guess does not have the puzzle's word length."""
    kind = "InvalidLength"


class NotInDictionary(GameError):
    """The guess is well formed but not an accepted word."""
    kind = "NotInDictionary"


class NoActivePuzzle(GameError):
    """A command was issued before a puzzle was loaded."""
    kind = "NoActivePuzzle"


class TerminalPuzzle(GameError):
    """The puzzle is already won or lost."""
    kind = "TerminalPuzzle"


class InputLocked(GameError):
    """A reveal is in flight and input is locked."""
    kind = "InputLocked"
