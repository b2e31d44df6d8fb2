from flask import current_app, request
from flask_socketio import emit

from meuhte import get_broadcaster, get_session, socketio
from meuhte.exceptions import GameError


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data) -> dict:
    return data if isinstance(data, dict) else {}


def _run(event: str, operation, *args):
    """Apply a session operation for the calling connection.

    On success every client receives the new snapshot; on rejection only the
    caller hears about it, with the message text untouched.
    """
    try:
        operation(*args)
    except GameError as exc:
        current_app.logger.info(f"[rejected] event={event} sid={_get_sid()} reason={exc.message!r}")
        emit('error', {'message': exc.message})
        return {'success': False, 'message': exc.message}
    get_broadcaster(current_app).broadcast()
    return {'success': True}


def handle_connect(auth=None):
    emit('connected', {'sid': _get_sid()})
    get_broadcaster(current_app).send_to(_get_sid())


def handle_disconnect(reason=None):
    # Leave is driven by the transport only; no client event removes a player
    removed = get_session(current_app).leave(_get_sid())
    current_app.logger.info(f"[disconnect] sid={_get_sid()} removed={removed} reason={reason}")
    get_broadcaster(current_app).broadcast()


def handle_join(data=None):
    name = _payload(data).get('name')
    current_app.logger.info(f"[join] sid={_get_sid()} name={name!r}")
    return _run('join', get_session(current_app).join, _get_sid(), name)


def handle_submit_answer(data=None):
    answer = _payload(data).get('answer')
    return _run('submit_answer', get_session(current_app).submit_answer, _get_sid(), answer)


def handle_update_player_name(data=None):
    data = _payload(data)
    return _run(
        'update_player_name',
        get_session(current_app).update_player_name,
        _get_sid(),
        data.get('player_id'),
        data.get('current_name'),
        data.get('name'),
    )


def handle_reset_game(data=None):
    return _run('reset_game', get_session(current_app).reset, _get_sid())


def handle_get_state(data=None):
    return get_session(current_app).snapshot().to_dict()


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join', handle_join, namespace=namespace)
    socketio.on_event('submit_answer', handle_submit_answer, namespace=namespace)
    socketio.on_event('update_player_name', handle_update_player_name, namespace=namespace)
    socketio.on_event('reset_game', handle_reset_game, namespace=namespace)
    socketio.on_event('get_state', handle_get_state, namespace=namespace)
