from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

SESSION_KEY = 'meuhte.session'
BROADCASTER_KEY = 'meuhte.broadcaster'


def get_session(flask_app):
    return flask_app.extensions[SESSION_KEY]


def get_broadcaster(flask_app):
    return flask_app.extensions[BROADCASTER_KEY]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config['CORS_ORIGINS']
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One session per process, created here and shared by every handler
    from meuhte.services.game import SessionState, SnapshotBroadcaster
    session = SessionState()
    flask_app.extensions[SESSION_KEY] = session
    flask_app.extensions[BROADCASTER_KEY] = SnapshotBroadcaster(socketio, session, namespace=namespace)

    from meuhte.main import main
    flask_app.register_blueprint(main)

    from meuhte.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    from meuhte.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    flask_app.logger.info(
        f"[startup] namespace={namespace} max_players={session.capacity} origins={allowed_origins}"
    )
    return flask_app
