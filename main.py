"""
Dailyword Server - Main Entry Point

This is the main entry point for the daily puzzle server.
It initializes the engine and starts the Flask-SocketIO application.
"""

from dailyword import create_app
from dailyword.config import (
    get_config, validate_word_list_integrity, get_word_statistics, ANSWER_LIST, GUESS_LIST
)
from dailyword.services.engine import initialize_engine
from dailyword.utils.game_logger import game_logger


def main(config_class=None):
    """Main function to initialize the engine and start the server."""
    config_class = config_class or get_config()
    try:
        print(f"Initializing engine ({config_class.__name__})...")
        
        validate_word_list_integrity(ANSWER_LIST)
        validate_word_list_integrity(GUESS_LIST)
        print(f"✓ Word lists loaded ({len(ANSWER_LIST)} answers, {len(GUESS_LIST)} guesses)")
        
        stats = get_word_statistics(ANSWER_LIST)
        top_letters = ", ".join(letter for letter, _ in stats["most_common_letters"])
        print(f"✓ Answer letters: avg {stats['avg_vowel_count']} vowels, most common {top_letters}")
        
        engine = initialize_engine(config_class)
        print(f"✓ Engine initialized ({config_class.STATE_BACKEND} state, "
              f"{config_class.SELECTION_POLICY} selection)")
        
        result = engine.load_daily_puzzle()
        if result.success:
            print(f"✓ Puzzle for day {engine.state.puzzle.day_index} ready")
        
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info("Dailyword Server Starting")
        
        print(f"\nStarting Dailyword Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Dailyword Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
