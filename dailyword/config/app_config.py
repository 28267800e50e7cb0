"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv('config.env')


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Persistence Settings ("file", "mongo" or "memory")
    STATE_BACKEND = os.getenv('STATE_BACKEND', 'file')
    STATE_FILE = os.getenv('STATE_FILE', 'data/game_state.json')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DATABASE = os.getenv('MONGO_DATABASE', 'dailyword')
    PLAYER_ID = os.getenv('PLAYER_ID', 'local')
    
    # Puzzle Selection Settings ("permuted" or "sequential")
    SELECTION_POLICY = os.getenv('SELECTION_POLICY', 'permuted')
    PERMUTATION_SEED = os.getenv('PERMUTATION_SEED', 'dailyword-v1')
    
    # Reveal Timing
    REVEAL_STEP_DELAY_SECONDS = float(os.getenv('REVEAL_STEP_DELAY_SECONDS', 0.15))
    SHAKE_DELAY_SECONDS = float(os.getenv('SHAKE_DELAY_SECONDS', 0.25))
    
    # User-facing strings (passed through unchanged)
    GAME_TITLE = os.getenv('GAME_TITLE', 'Dailyword')
    MESSAGE_INVALID_LENGTH = os.getenv('MESSAGE_INVALID_LENGTH', 'The word must be {length} letters long')
    MESSAGE_NOT_IN_DICTIONARY = os.getenv('MESSAGE_NOT_IN_DICTIONARY', 'Word not found!')
    MESSAGE_NO_ACTIVE_PUZZLE = os.getenv('MESSAGE_NO_ACTIVE_PUZZLE', 'No puzzle loaded yet')
    MESSAGE_TERMINAL_PUZZLE = os.getenv('MESSAGE_TERMINAL_PUZZLE', "Today's puzzle is finished, come back tomorrow")
    MESSAGE_ANSWER_REVEAL = os.getenv('MESSAGE_ANSWER_REVEAL', 'Too bad! The word was {answer}')
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STATE_BACKEND = 'memory'
    SELECTION_POLICY = 'sequential'
    REVEAL_STEP_DELAY_SECONDS = 0.0
    SHAKE_DELAY_SECONDS = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}


def get_config(name=None):
    """
    Picks the configuration class for an environment.

    Args:
        name: 'development', 'production' or 'testing'. Defaults to the
            APP_ENV environment variable; unknown names fall back to Config.

    Returns:
        The configuration class
    """
    if name is None:
        name = os.getenv('APP_ENV', 'default')
    return config.get(name.lower(), config['default'])
