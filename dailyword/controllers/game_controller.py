"""
Game Controller

Handles all puzzle-related HTTP endpoints. Each endpoint forwards to one
engine command and returns the resulting state.
"""

from flask import Blueprint, request, jsonify
from ..services.engine import get_engine
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

# HTTP status per rejected-command kind
ERROR_STATUS = {
    'InvalidLength': 400,
    'NotInDictionary': 400,
    'NoActivePuzzle': 404,
    'TerminalPuzzle': 409,
    'InputLocked': 409,
}


def _engine_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game engine unavailable'
    }), 500


def _day_index(engine):
    puzzle = engine.state.puzzle
    return puzzle.day_index if puzzle else None


def _command_response(engine, action, result, **log_details):
    """Builds the JSON reply for a command result and logs it."""
    response_data = {
        'success': result.success,
        'error': result.error,
        'message': result.message,
        'outcome': result.outcome,
        'evaluations': result.evaluations,
        'state': engine.state.to_dict(reveal_answer=False),
        'keyboard': engine.keyboard()
    }
    game_logger.log_server_response(
        request, action, result.success, response_data, _day_index(engine), **log_details
    )
    if result.success:
        return jsonify(response_data)
    return jsonify(response_data), ERROR_STATUS.get(result.error, 400)


def _error_response(action, error, day_index=None):
    game_logger.log_error(request, error, action, day_index)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, day_index)
    return jsonify(error_response), 500


@game_bp.route('/puzzle/load', methods=['POST'])
def load_puzzle():
    """Load today's puzzle, keeping the stored one if it is still current."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'load_puzzle')
        result = engine.load_daily_puzzle()
        return _command_response(engine, 'load_puzzle', result)

    except Exception as e:
        return _error_response('load_puzzle', e)


@game_bp.route('/puzzle/guess', methods=['PUT'])
def edit_guess():
    """Replace the letters of the row being edited."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('text'), str):
            error_response = {
                'success': False,
                'error': 'Text is required'
            }
            game_logger.log_server_response(request, 'edit_guess', False, error_response)
            return jsonify(error_response), 400

        text = data['text']
        game_logger.log_user_action(request, 'edit_guess', _day_index(engine), text_length=len(text))
        result = engine.edit_current_guess(text)
        return _command_response(engine, 'edit_guess', result)

    except Exception as e:
        return _error_response('edit_guess', e)


@game_bp.route('/puzzle/submit', methods=['POST'])
def submit_guess():
    """Submit the current row. Blocks until the staged reveal finishes."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'submit_guess', _day_index(engine))
        result = engine.submit_guess()
        return _command_response(engine, 'submit_guess', result, outcome=result.outcome)

    except Exception as e:
        return _error_response('submit_guess', e)


@game_bp.route('/state', methods=['GET'])
def get_state():
    """Get the current engine state (answer hidden until the puzzle is over)."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'get_state', _day_index(engine))
        response_data = {
            'success': True,
            'state': engine.state.to_dict(reveal_answer=False),
            'keyboard': engine.keyboard(),
            'seconds_until_next_puzzle': engine.seconds_until_next_puzzle()
        }
        game_logger.log_server_response(request, 'get_state', True, response_data, _day_index(engine))
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_state', e)


@game_bp.route('/statistics', methods=['GET'])
def get_statistics():
    """Get the player's aggregate statistics."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'get_statistics')
        response_data = {
            'success': True,
            'statistics': engine.state.statistics.to_dict()
        }
        game_logger.log_server_response(request, 'get_statistics', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_statistics', e)


@game_bp.route('/share', methods=['GET'])
def get_share_text():
    """Get the emoji summary of the current puzzle."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        game_logger.log_user_action(request, 'share', _day_index(engine))
        text = engine.share()
        if text is None:
            error_response = {
                'success': False,
                'error': 'NoActivePuzzle'
            }
            game_logger.log_server_response(request, 'share', False, error_response)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'text': text
        }
        game_logger.log_server_response(request, 'share', True, response_data, _day_index(engine))
        return jsonify(response_data)

    except Exception as e:
        return _error_response('share', e)


@game_bp.route('/message', methods=['DELETE'])
def dismiss_message():
    """Dismiss the transient message once the UI has shown it."""
    try:
        engine = get_engine()
        if not engine:
            return _engine_unavailable()

        engine.clear_message()
        response_data = {'success': True}
        game_logger.log_server_response(request, 'dismiss_message', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('dismiss_message', e)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        engine = get_engine()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'engine_available': engine is not None,
            'puzzle_loaded': engine is not None and engine.state.puzzle is not None,
            'log_stats': game_logger.get_log_stats()
        }
        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
