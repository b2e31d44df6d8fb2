from flask import Blueprint, current_app, jsonify

from meuhte import get_session

game = Blueprint('game', __name__)


@game.route('/state', methods=['GET'])
def get_game_state():
    """
    Returns the current session snapshot, for clients resynchronizing after a
    reconnect. Answers stay hidden until every player has answered.
    """
    snapshot = get_session(current_app).snapshot()
    return jsonify(snapshot.to_dict())
