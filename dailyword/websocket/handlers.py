"""
WebSocket Event Handlers

Streams the staged reveal to the browser: every cell flip is emitted as a
`letter_state` event while submit_guess runs, followed by `state_update`.
"""

from dataclasses import asdict
from flask_socketio import emit
from ..services.engine import get_engine
from ..utils.game_logger import game_logger


def _state_payload(engine):
    return {
        'state': engine.state.to_dict(reveal_answer=False),
        'keyboard': engine.keyboard()
    }


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Send the current state to a freshly connected client."""
        engine = get_engine()
        if engine:
            emit('state_update', _state_payload(engine))

    @socketio.on('load_puzzle')
    def handle_load_puzzle(data=None):
        engine = get_engine()
        if not engine:
            emit('error', {'error': 'Game engine unavailable'})
            return

        result = engine.load_daily_puzzle()
        emit('command_result', asdict(result))
        emit('state_update', _state_payload(engine))

    @socketio.on('edit_guess')
    def handle_edit_guess(data):
        engine = get_engine()
        if not engine:
            emit('error', {'error': 'Game engine unavailable'})
            return

        text = data.get('text') if isinstance(data, dict) else None
        if not isinstance(text, str):
            emit('error', {'error': 'Text is required'})
            return

        result = engine.edit_current_guess(text)
        if not result.success:
            emit('command_result', asdict(result))
        emit('state_update', _state_payload(engine))

    @socketio.on('submit_guess')
    def handle_submit_guess(data=None):
        """Run the staged reveal, pausing with socketio.sleep between cell flips."""
        engine = get_engine()
        if not engine:
            emit('error', {'error': 'Game engine unavailable'})
            return

        def forward_letter_state(event, payload):
            if event == 'letter_state':
                emit('letter_state', payload)

        engine.add_listener(forward_letter_state)
        try:
            result = engine.submit_guess(sleep=socketio.sleep)
        except Exception as e:
            game_logger.logger.error(f"WebSocket submit_guess failed: {e}")
            emit('error', {'error': str(e)})
            return
        finally:
            engine.remove_listener(forward_letter_state)

        emit('command_result', asdict(result))
        emit('state_update', _state_payload(engine))
