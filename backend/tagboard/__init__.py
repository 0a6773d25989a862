from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One board (current run) per app
    from tagboard.services.tag.board import get_board
    get_board(flask_app)

    # Import and register blueprints here
    from tagboard.main import main
    flask_app.register_blueprint(main)

    from tagboard.api.tag import tag
    flask_app.register_blueprint(tag, url_prefix='/api/tag')

    # Register Socket.IO event handlers
    from tagboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('tag-score')
    @click.option('--source', default=None, help='Log URL or local CSV path (defaults to TAG_LOG_SOURCE).')
    def tag_score_command(source):
        """Loads the tag log, scores it and prints the leaderboard."""
        from tagboard.services.tag.loader import reload_log
        with flask_app.app_context():
            run = reload_log(flask_app, source=source)
            if run is None:
                raise click.ClickException('Could not load the tag log.')
            board = get_board(flask_app)
            for entry in board.leaderboard():
                marker = ' *' if entry.is_holder else ''
                click.echo(
                    f"{entry.rank:>3}. {entry.player:<20} {entry.points:>6} pts  "
                    f"{entry.to_dict()['holding_time']}{marker}"
                )
            facts = board.achievements().to_dict()
            click.echo('')
            for name, value in facts.items():
                if isinstance(value, dict):
                    value = f"{value['caught']} caught by {value['catcher']} after {value['gap']}"
                click.echo(f"{name}: {value if value is not None else 'no data'}")

    flask_app.cli.add_command(tag_score_command)

    return flask_app
