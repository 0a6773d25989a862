from flask import Blueprint, jsonify, request, current_app
from tagboard import socketio
from tagboard.services.tag.board import get_board
from tagboard.services.tag.loader import reload_log


tag = Blueprint('tag', __name__)


def _broadcast(payload: dict) -> None:
    socketio.emit('leaderboard_update', payload, namespace='/ws')


@tag.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    return jsonify(get_board(current_app).snapshot())


@tag.route('/achievements', methods=['GET'])
def get_achievements():
    return jsonify(get_board(current_app).achievements().to_dict())


@tag.route('/state', methods=['GET'])
def get_state():
    board = get_board(current_app)
    payload = board.snapshot()
    payload['achievements'] = board.achievements().to_dict()
    payload['rules'] = board.rules.to_dict()
    payload['tick_interval_ms'] = int(current_app.config.get('TICK_INTERVAL_MS', 1000))
    return jsonify(payload)


@tag.route('/reload', methods=['POST'])
def reload_from_source():
    app = current_app._get_current_object()
    run = reload_log(app)
    if run is None:
        return jsonify({'error': 'Could not load the tag log'}), 502
    payload = get_board(app).snapshot()
    _broadcast(payload)
    return jsonify(payload)


@tag.route('/upload', methods=['POST'])
def upload_log():
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'JSON body must be an object with a "csv" field'}), 400
        text = data.get('csv')
    else:
        text = request.get_data(as_text=True)
    if not isinstance(text, str) or not text.strip():
        return jsonify({'error': 'CSV content is required'}), 400

    app = current_app._get_current_object()
    reload_log(app, text=text, source='upload')
    payload = get_board(app).snapshot()
    _broadcast(payload)
    return jsonify(payload), 201
