import time
from datetime import datetime
from typing import Optional

from tagboard import socketio
from .board import get_board


_clock_started = set()


def tick_once(app, now: Optional[datetime] = None) -> dict:
    """Advance the current holder to `now` and push the leaderboard to clients."""
    board = get_board(app)
    board.tick(now or datetime.now())
    payload = board.snapshot()
    socketio.emit('leaderboard_update', payload, namespace='/ws')
    return payload


def start_live_clock(app) -> None:
    """Start the recurring live clock for this app.

    - No-ops in TESTING mode
    - Ensures a single clock per app
    - Every TICK_INTERVAL_MS credits the tag holder and emits leaderboard_update
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return

    key = id(app)
    if key in _clock_started:
        app.logger.info("[clock-skip] live clock already running")
        return
    _clock_started.add(key)

    interval = max(1, int(app.config.get('TICK_INTERVAL_MS', 1000))) / 1000.0
    try:
        hb = int(app.config.get('TIMER_HEARTBEAT_SEC', 0))
    except (TypeError, ValueError):
        hb = 0
    app.logger.info(f"[clock-set] interval={interval}s heartbeat={hb}s")

    def _worker():
        last_beat = time.time()
        payload = None
        while True:
            socketio.sleep(interval)
            with app.app_context():
                try:
                    payload = tick_once(app)
                except Exception:
                    app.logger.exception("[tick] live clock update failed")
                    payload = None
            if payload is not None and hb and time.time() - last_beat >= hb:
                last_beat = time.time()
                app.logger.info(
                    f"[clock-heartbeat] holder={payload['last_caught_player']} events={payload['event_count']}"
                )

    socketio.start_background_task(_worker)
