import pytest

from dailyword import create_app
from dailyword.config.app_config import TestingConfig
from dailyword.services import engine as engine_module
from dailyword.services.engine import initialize_engine

from .conftest import ANSWERS, GUESSES, FakeClock


@pytest.fixture
def app_and_socketio():
    initialize_engine(TestingConfig, answers=ANSWERS, guesses=GUESSES, clock=FakeClock())
    app, socketio = create_app(TestingConfig)
    yield app, socketio
    engine_module._engine = None


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


def edit(client, text):
    return client.put('/api/puzzle/guess', json={'text': text})


def test_health(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json()['engine_available'] is True


def test_submit_before_load_is_not_found(client):
    response = client.post('/api/puzzle/submit')

    assert response.status_code == 404
    assert response.get_json()['error'] == 'NoActivePuzzle'


def test_load_hides_the_answer(client):
    response = client.post('/api/puzzle/load')

    body = response.get_json()
    assert response.status_code == 200
    assert body['state']['puzzle']['day_index'] == 0
    assert body['state']['puzzle']['answer'] is None


def test_edit_requires_text(client):
    client.post('/api/puzzle/load')

    assert client.put('/api/puzzle/guess', json={}).status_code == 400


def test_short_guess_is_a_bad_request(client):
    client.post('/api/puzzle/load')
    edit(client, 'CRA')

    response = client.post('/api/puzzle/submit')

    body = response.get_json()
    assert response.status_code == 400
    assert body['error'] == 'InvalidLength'
    assert body['message'] == 'The word must be 5 letters long'
    assert body['state']['puzzle']['current_attempt_index'] == 0


def test_full_game_over_http(client):
    client.post('/api/puzzle/load')
    edit(client, 'trace')
    first = client.post('/api/puzzle/submit').get_json()

    assert first['outcome'] == 'continue'
    assert first['evaluations'] == ['absent', 'correct', 'correct', 'present', 'correct']
    assert first['keyboard']['C'] == 'present'

    edit(client, 'crane')
    second = client.post('/api/puzzle/submit').get_json()

    assert second['outcome'] == 'won'
    assert second['state']['puzzle']['status'] == 'WON'
    assert second['state']['puzzle']['answer'] == 'CRANE'

    statistics = client.get('/api/statistics').get_json()['statistics']
    assert statistics['games_won'] == 1
    assert statistics['guess_distribution']['2'] == 1
    assert statistics['win_percentage'] == 100

    share = client.get('/api/share').get_json()
    assert share['text'].startswith('Dailyword 0 2/6')

    again = edit(client, 'house')
    assert again.status_code == 409
    assert again.get_json()['error'] == 'TerminalPuzzle'


def test_state_and_message_dismissal(client):
    client.post('/api/puzzle/load')
    edit(client, 'qqqqq')
    client.post('/api/puzzle/submit')

    state = client.get('/api/state').get_json()
    assert state['state']['message'] == 'Word not found!'
    assert 0 < state['seconds_until_next_puzzle'] <= 86400

    assert client.delete('/api/message').status_code == 200
    assert client.get('/api/state').get_json()['state']['message'] is None


def test_share_before_load_is_not_found(client):
    assert client.get('/api/share').status_code == 404


def test_socket_submit_streams_the_reveal(app_and_socketio):
    app, socketio = app_and_socketio
    socket_client = socketio.test_client(app)
    socket_client.get_received()

    socket_client.emit('load_puzzle')
    socket_client.emit('edit_guess', {'text': 'crane'})
    socket_client.get_received()
    socket_client.emit('submit_guess')

    received = socket_client.get_received()
    names = [message['name'] for message in received]
    assert names.count('letter_state') == 10
    result = next(message['args'][0] for message in received if message['name'] == 'command_result')
    assert result['outcome'] == 'won'
    assert names[-1] == 'state_update'


@pytest.mark.parametrize("payload", [["CRANE"], "CRANE", 5, {'text': 5}])
def test_edit_with_a_malformed_body_is_a_bad_request(client, payload):
    client.post('/api/puzzle/load')

    response = client.put('/api/puzzle/guess', json=payload)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Text is required'


@pytest.mark.parametrize("payload", [["CRANE"], "CRANE", None])
def test_socket_edit_with_a_malformed_payload_reports_an_error(app_and_socketio, payload):
    app, socketio = app_and_socketio
    socket_client = socketio.test_client(app)
    socket_client.emit('load_puzzle')
    socket_client.get_received()

    socket_client.emit('edit_guess', payload)

    received = socket_client.get_received()
    assert [message['name'] for message in received] == ['error']
    assert received[0]['args'][0] == {'error': 'Text is required'}
