import os
import sys
from datetime import datetime, timedelta
import pytest

# Ensure the backend root (containing the `tagboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from tagboard import create_app, socketio
from tagboard.models import ScoringRules, TagEvent


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    TAG_ROSTER = ['Alice', 'Bob', 'Cara']
    TAG_AWARD_POINTS = [50, 40, 30, 20, 10, 5]
    TAG_PENALTY_PER_HOUR = 5
    TAG_BONUS_UNTAGGED_DAY = 35
    TAG_REFERENCE_YEAR = 2025
    TAG_LOG_SOURCE = 'https://example.invalid/tag.csv'
    TAG_FETCH_TIMEOUT_SEC = 1
    TAG_LOAD_ON_START = False
    TICK_INTERVAL_MS = 1000
    TIMER_HEARTBEAT_SEC = 0


T0 = datetime(2025, 3, 12, 10, 0)

# Same log as the `example_events` fixture, in the published CSV format
EXAMPLE_CSV = (
    "DATUM,CAS,MENO\n"
    "12.3.,10:00,Alice\n"
    "12.3.,11:30,Bob\n"
    "12.3.,12:00,Alice\n"
)


@pytest.fixture()
def rules():
    return ScoringRules(roster=('A', 'B', 'C'))


@pytest.fixture()
def example_events():
    return [
        TagEvent(T0, 'A'),
        TagEvent(T0 + timedelta(minutes=90), 'B'),
        TagEvent(T0 + timedelta(minutes=120), 'A'),
    ]


@pytest.fixture()
def example_csv():
    return EXAMPLE_CSV


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
