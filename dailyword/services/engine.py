"""
Engine

Composition root of the daily puzzle. Owns the single EngineState and
exposes the commands the UI collaborators use:

- load_daily_puzzle()
- edit_current_guess(text)
- submit_guess()

plus read accessors, a serializable snapshot and an import operation.
Rejected commands never raise; they return a failed CommandResult and set the
transient message.
"""

import copy
import threading
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from pymongo.errors import PyMongoError

from ..config.app_config import Config
from ..config.game_settings import ANSWER_LIST, GUESS_LIST, MAX_ATTEMPTS, WORD_LENGTH
from ..models.errors import (
    GameError, InputLocked, InvalidLength, NoActivePuzzle, NotInDictionary, TerminalPuzzle
)
from ..models.game import (
    Animation, CommandResult, EngineState, LetterEvaluation, Puzzle, PuzzleStatus
)
from ..models.statistics import Statistics
from ..utils.game_logger import game_logger
from . import game_state_machine as machine
from .guess_evaluator import evaluate, keyboard_letter_states
from .puzzle_selector import PuzzleSelector, seconds_until_next_puzzle
from .state_store import StateStore, create_state_store
from .statistics_tracker import record_loss, record_win

SNAPSHOT_VERSION = 1

Listener = Callable[[str, Dict[str, Any]], None]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Engine:
    """
    Single-player daily puzzle engine.

    Commands are expected one at a time. The staged reveal of submit_guess
    suspends through `sleep` between steps; while it runs the input lock is
    set and edits, submissions and loads are rejected with InputLocked.
    """

    def __init__(self,
                 selector: PuzzleSelector,
                 answers: Sequence[str] = ANSWER_LIST,
                 guesses: Sequence[str] = GUESS_LIST,
                 store: Optional[StateStore] = None,
                 clock: Callable[[], datetime] = _utc_now,
                 sleep: Callable[[float], None] = time.sleep,
                 reveal_step_delay: float = Config.REVEAL_STEP_DELAY_SECONDS,
                 shake_delay: float = Config.SHAKE_DELAY_SECONDS,
                 messages: Optional[Dict[str, str]] = None,
                 title: str = Config.GAME_TITLE):
        self.selector = selector
        self.vocabulary = frozenset(word.upper() for word in list(guesses) + list(answers))
        self.store = store
        self.clock = clock
        self.sleep = sleep
        self.reveal_step_delay = reveal_step_delay
        self.shake_delay = shake_delay
        self.messages = dict(default_messages())
        self.messages.update(messages or {})
        self.title = title

        self._state = EngineState()
        self._mutex = threading.RLock()
        self._listeners: List[Listener] = []

        if self.store is not None:
            data = self.store.load()
            if data is not None:
                self.import_state(data)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> EngineState:
        """Copy of the current state; mutating it has no effect on the engine."""
        with self._mutex:
            return copy.deepcopy(self._state)

    def keyboard(self) -> Dict[str, str]:
        """
        Best-known state of every letter guessed so far.

        Returns:
            Mapping of uppercase letter to "correct", "present" or "absent".
            Empty when no puzzle is loaded.
        """
        with self._mutex:
            if self._state.puzzle is None:
                return {}
            return keyboard_letter_states(self._state.puzzle.attempts)

    def share(self) -> Optional[str]:
        """
        Emoji summary of the current puzzle.

        Returns:
            Share text, or None when no puzzle is loaded
        """
        with self._mutex:
            if self._state.puzzle is None:
                return None
            return machine.share_text(self._state.puzzle, self.title)

    def seconds_until_next_puzzle(self) -> int:
        return seconds_until_next_puzzle(self.clock(), self.selector.epoch)

    def clear_message(self) -> None:
        with self._mutex:
            self._state.message = None
        self._notify('state_update')

    def add_listener(self, listener: Listener) -> None:
        """Registers a callback receiving (event, payload) for every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def load_daily_puzzle(self) -> CommandResult:
        """Starts today's puzzle unless the stored one is still current."""
        with self._mutex:
            if self._state.input_locked:
                return self._reject(InputLocked("Reveal in progress"))

            today = self.selector.day_index_for(self.clock())
            puzzle = self._state.puzzle
            if puzzle is not None and puzzle.day_index >= today:
                return CommandResult(success=True)

            self._state.puzzle = machine.new_puzzle(today, self.selector.answer_for(today), MAX_ATTEMPTS)
            self._state.message = None

        game_logger.log_game_event(today, 'puzzle_loaded', policy=self.selector.policy)
        self._save()
        self._notify('state_update')
        return CommandResult(success=True)

    def edit_current_guess(self, text: str) -> CommandResult:
        with self._mutex:
            try:
                puzzle = self._editable_puzzle()
                self._state.puzzle = machine.edit_current_guess(puzzle, text or "")
            except GameError as error:
                return self._reject(error)

        self._save()
        self._notify('state_update')
        return CommandResult(success=True)

    def submit_guess(self, sleep: Optional[Callable[[float], None]] = None) -> CommandResult:
        """
        Validates and scores the current row.

        Runs the staged reveal: for each cell flip in, wait, score, flip out,
        wait. A rejected guess shakes the row instead and keeps its letters.
        The input lock is held for the whole sequence and released on every
        exit path.
        """
        sleep = sleep or self.sleep

        with self._mutex:
            try:
                puzzle = self._editable_puzzle()
            except GameError as error:
                return self._reject(error)
            self._state.input_locked = True
            before = puzzle

        completed = False
        try:
            try:
                with self._mutex:
                    guess = machine.validate_guess(self._state.puzzle, self.vocabulary)
            except (InvalidLength, NotInDictionary) as error:
                self._shake(sleep)
                completed = True
                with self._mutex:
                    return self._reject(error)

            evaluations = evaluate(guess, before.answer)
            try:
                self._reveal(evaluations, sleep)
            except GameError as error:
                with self._mutex:
                    self._state.puzzle = before
                    completed = True
                    return self._reject(error)

            with self._mutex:
                outcome = self._complete()
                message = self._state.message
            completed = True
            return CommandResult(
                success=True,
                message=message,
                outcome=outcome.value,
                evaluations=[evaluation.value for evaluation in evaluations],
            )
        finally:
            with self._mutex:
                if not completed:
                    # Abandoned mid-reveal: the row goes back to its unsubmitted form
                    self._state.puzzle = before
                self._state.input_locked = False
            self._save()
            self._notify('state_update')

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def export_state(self) -> Dict[str, Any]:
        """Serializable snapshot of the durable state (puzzle and statistics)."""
        with self._mutex:
            return {
                "version": SNAPSHOT_VERSION,
                "puzzle": self._state.puzzle.to_dict() if self._state.puzzle else None,
                "statistics": self._state.statistics.to_dict(),
            }

    def import_state(self, data: Dict[str, Any]) -> bool:
        """
        Replaces the durable state with a snapshot.

        Malformed snapshots are discarded: the engine falls back to fresh
        statistics and no puzzle, and False is returned. While a reveal is
        in flight the import is refused and the current state is kept.
        """
        with self._mutex:
            if self._state.input_locked:
                game_logger.log_game_event(None, "import_refused", reason="input_locked")
                return False

        try:
            if data.get("version", SNAPSHOT_VERSION) != SNAPSHOT_VERSION:
                raise ValueError(f"Unsupported snapshot version: {data.get('version')!r}")
            puzzle = Puzzle.from_dict(data["puzzle"]) if data.get("puzzle") else None
            statistics = Statistics.from_dict(data.get("statistics") or {})
            if puzzle is not None:
                self._check_imported_puzzle(puzzle)
        except (AttributeError, KeyError, TypeError, ValueError) as error:
            game_logger.log_game_event(None, 'state_discarded',
                                       error_type=type(error).__name__, error_message=str(error))
            with self._mutex:
                self._state = EngineState()
            return False

        with self._mutex:
            self._state = EngineState(puzzle=puzzle, statistics=statistics)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _editable_puzzle(self) -> Puzzle:
        if self._state.input_locked:
            raise InputLocked("Reveal in progress")
        if self._state.puzzle is None:
            raise NoActivePuzzle("Load the daily puzzle first")
        machine.ensure_in_progress(self._state.puzzle)
        return self._state.puzzle

    def _check_imported_puzzle(self, puzzle: Puzzle) -> None:
        if puzzle.word_length != WORD_LENGTH or puzzle.max_attempts != MAX_ATTEMPTS:
            raise ValueError("Puzzle dimensions do not match the game settings")
        for row in puzzle.attempts:
            for cell in row:
                cell.animation = Animation.NONE
        if puzzle.status == PuzzleStatus.IN_PROGRESS:
            # The row being edited has not been submitted yet
            for cell in puzzle.attempts[puzzle.current_attempt_index]:
                cell.evaluation = LetterEvaluation.UNSCORED

    def _reject(self, error: GameError) -> CommandResult:
        message = None
        if not isinstance(error, InputLocked):
            message = self._message_for(error)
            self._state.message = message
        day_index = self._state.puzzle.day_index if self._state.puzzle else None
        game_logger.log_game_event(day_index, 'command_rejected',
                                   error_type=error.kind, error_message=str(error))
        return CommandResult(success=False, error=error.kind, message=message)

    def _message_for(self, error: GameError) -> str:
        template = self.messages.get(error.kind, str(error))
        return render_message(template, length=WORD_LENGTH)

    def _update_cell(self, index: int, animation: Animation,
                     evaluation: Optional[LetterEvaluation] = None) -> None:
        with self._mutex:
            puzzle = self._state.puzzle
            if evaluation is not None:
                puzzle = machine.score_cell(puzzle, index, evaluation)
            puzzle = machine.set_animation(puzzle, index, animation)
            self._state.puzzle = puzzle
            cell = puzzle.attempts[puzzle.current_attempt_index][index]
            payload = {
                'attempt_index': puzzle.current_attempt_index,
                'index': index,
                'cell': cell.to_dict(),
            }
        self._notify('letter_state', payload)

    def _reveal(self, evaluations: List[LetterEvaluation], sleep: Callable[[float], None]) -> None:
        for index, evaluation in enumerate(evaluations):
            self._update_cell(index, Animation.FLIPIN)
            sleep(self.reveal_step_delay)
            self._update_cell(index, Animation.FLIPOUT, evaluation)
            sleep(self.reveal_step_delay)

    def _shake(self, sleep: Callable[[float], None]) -> None:
        for index in range(WORD_LENGTH):
            self._update_cell(index, Animation.SHAKE)
        sleep(self.shake_delay)
        for index in range(WORD_LENGTH):
            self._update_cell(index, Animation.NONE)

    def _complete(self) -> machine.Outcome:
        puzzle, outcome = machine.decide_outcome(self._state.puzzle)
        self._state.puzzle = puzzle

        if outcome == machine.Outcome.WON:
            attempts_used = puzzle.current_attempt_index + 1
            self._state.statistics = record_win(self._state.statistics, attempts_used)
            game_logger.log_game_event(puzzle.day_index, 'game_won',
                                       attempts_used=attempts_used, target_word=puzzle.answer)
        elif outcome == machine.Outcome.LOST:
            self._state.statistics = record_loss(self._state.statistics)
            self._state.message = render_message(
                self.messages['AnswerReveal'], length=WORD_LENGTH, answer=puzzle.answer)
            game_logger.log_game_event(puzzle.day_index, 'game_lost', target_word=puzzle.answer)
        else:
            game_logger.log_game_event(puzzle.day_index, 'guess_scored',
                                       attempt_index=puzzle.current_attempt_index - 1)
        return outcome

    def _save(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(self.export_state())
        except (OSError, PyMongoError) as e:
            # The command already took effect in memory
            game_logger.logger.warning(f"Failed to persist game state: {type(e).__name__}: {e}")

    def _notify(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        if payload is None:
            payload = self.state.to_dict(reveal_answer=False)
        for listener in list(self._listeners):
            listener(event, payload)


class _KeepUnknownFields(dict):
    def __missing__(self, key):
        return "{" + key + "}"


def render_message(template: str, **values: Any) -> str:
    """
    Fills a message template with the given fields.

    Args:
        template: Operator-supplied text using {length} and {answer} fields
        **values: Field values

    Returns:
        The rendered text. Unknown fields are kept as written and a template
        that is not a valid format string is returned unchanged.
    """
    try:
        return template.format_map(_KeepUnknownFields(values))
    except (ValueError, IndexError, AttributeError) as e:
        game_logger.logger.warning(f"Message template could not be rendered: {e}")
        return template


def default_messages(config_class=Config) -> Dict[str, str]:
    """User-facing message templates keyed by error kind."""
    return {
        InvalidLength.kind: config_class.MESSAGE_INVALID_LENGTH,
        NotInDictionary.kind: config_class.MESSAGE_NOT_IN_DICTIONARY,
        NoActivePuzzle.kind: config_class.MESSAGE_NO_ACTIVE_PUZZLE,
        TerminalPuzzle.kind: config_class.MESSAGE_TERMINAL_PUZZLE,
        'AnswerReveal': config_class.MESSAGE_ANSWER_REVEAL,
    }


# Global engine instance
_engine = None


def get_engine() -> Optional[Engine]:
    """Get the global engine instance."""
    return _engine


def initialize_engine(config_class=Config, store: Optional[StateStore] = None, **kwargs) -> Engine:
    """Initialize the global engine instance from a configuration class."""
    global _engine
    selector = kwargs.pop('selector', None) or PuzzleSelector(
        kwargs.get('answers', ANSWER_LIST),
        policy=config_class.SELECTION_POLICY,
        seed=config_class.PERMUTATION_SEED,
    )
    if store is None:
        store = create_state_store(config_class)
    kwargs.setdefault('reveal_step_delay', config_class.REVEAL_STEP_DELAY_SECONDS)
    kwargs.setdefault('shake_delay', config_class.SHAKE_DELAY_SECONDS)
    kwargs.setdefault('messages', default_messages(config_class))
    kwargs.setdefault('title', config_class.GAME_TITLE)
    _engine = Engine(selector, store=store, **kwargs)
    return _engine
