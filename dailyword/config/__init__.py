"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, constants and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    WORD_LENGTH, MAX_ATTEMPTS, EPOCH, ANSWER_LIST, GUESS_LIST,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'EPOCH', 'ANSWER_LIST', 'GUESS_LIST',
    'validate_word_list_integrity', 'get_word_statistics'
]
