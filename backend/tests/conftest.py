import os
import sys
import pytest

# Ensure the backend root (containing the `meuhte` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from meuhte import create_app, socketio


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SOCKETIO_NAMESPACE = '/ws'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect(flask_app):
    """Open a Socket.IO test client on /ws and return (client, sid).

    The sid is read from the `connected` greeting and is the id the session
    uses for this connection. Initial events are flushed.
    """
    opened = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/ws'
        )
        opened.append(test_client)
        received = test_client.get_received('/ws')
        greeting = next(pkt for pkt in received if pkt['name'] == 'connected')
        return test_client, greeting['args'][0]['sid']

    yield _connect

    for test_client in opened:
        if test_client.is_connected('/ws'):
            test_client.disconnect(namespace='/ws')


@pytest.fixture()
def sio_client(connect):
    test_client, _ = connect()
    return test_client
