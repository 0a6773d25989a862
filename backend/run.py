from tagboard import create_app, socketio
from tagboard.services.tag.loader import reload_log
from tagboard.services.tag.scheduler import start_live_clock

app = create_app()

if __name__ == '__main__':
    if app.config.get('TAG_LOAD_ON_START'):
        reload_log(app)
    start_live_clock(app)
    # Reloader would start a second clock
    socketio.run(app, debug=True, use_reloader=False)
