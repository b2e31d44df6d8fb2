import logging

from meuhte import create_app, socketio

app = create_app()


if __name__ == '__main__':
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, debug=True)
