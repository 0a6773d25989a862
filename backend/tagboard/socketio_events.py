from flask_socketio import emit
from flask import current_app
from tagboard import socketio
from tagboard.services.tag.board import get_board


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})
    # New clients render immediately instead of waiting for the next tick
    emit('leaderboard_update', get_board(current_app).snapshot())


def _valid_payload(data) -> bool:
    if data is None or isinstance(data, dict):
        return True
    emit('error', {'message': 'payload must be an object'})
    return False


def handle_request_leaderboard(data=None):
    if not _valid_payload(data):
        return
    emit('leaderboard_update', get_board(current_app).snapshot())


def handle_request_achievements(data=None):
    if not _valid_payload(data):
        return
    emit('achievements', get_board(current_app).achievements().to_dict())


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('request_leaderboard', handle_request_leaderboard, namespace='/ws')
    socketio.on_event('request_achievements', handle_request_achievements, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        # Test-only mirror on default namespace
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('request_leaderboard', handle_request_leaderboard, namespace='/')
        socketio.on_event('request_achievements', handle_request_achievements, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
