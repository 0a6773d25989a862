from flask import Blueprint, jsonify, current_app
from tagboard.services.tag.board import get_board

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the tag leaderboard server!'})

@main.route('/health')
def health():
    run = get_board(current_app).run
    return jsonify({
        'status': 'ok',
        'events': len(run.events),
        'loaded_at': run.loaded_at.isoformat() if run.loaded_at else None,
    })
