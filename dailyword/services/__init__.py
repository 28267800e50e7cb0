"""
Services Package

Contains the puzzle rules and the engine that composes them.
"""

from .engine import Engine, get_engine, initialize_engine
from .guess_evaluator import evaluate, keyboard_letter_states
from .puzzle_selector import PuzzleSelector, day_index_for, permute
from .state_store import JsonFileStateStore, MemoryStateStore, MongoStateStore, create_state_store

__all__ = [
    'Engine', 'get_engine', 'initialize_engine',
    'evaluate', 'keyboard_letter_states',
    'PuzzleSelector', 'day_index_for', 'permute',
    'JsonFileStateStore', 'MemoryStateStore', 'MongoStateStore', 'create_state_store'
]
