from flask import Blueprint, jsonify, request, current_app
from wordtower import current_session, socketio
from wordtower.models import Placement
from wordtower.services.towers.errors import GameError, InvalidRequestError


towers = Blueprint('towers', __name__)


@towers.errorhandler(GameError)
def handle_game_error(exc: GameError):
    return jsonify(exc.to_dict()), exc.http_status


def _parse_build_request(data):
    if not isinstance(data, dict):
        raise InvalidRequestError('request body must be a JSON object')
    done = data.get('done', False)
    if not isinstance(done, bool):
        raise InvalidRequestError("'done' must be a boolean")
    words = data.get('words')
    if words is None:
        words = []
    elif not isinstance(words, list):
        raise InvalidRequestError("'words' must be a list")
    return done, [Placement.from_dict(w) for w in words]


@towers.route('/build', methods=['POST'])
def build():
    done, placements = _parse_build_request(request.get_json(silent=True))
    try:
        snapshot = current_session().build(done, placements)
    except GameError as exc:
        current_app.logger.info(f"[build] rejected code={exc.code} message={exc.message}")
        raise
    payload = snapshot.to_dict()
    current_app.logger.info(
        f"[build] placed={len(placements)} done={done} tower_score={snapshot.tower.score} total={snapshot.score}"
    )
    socketio.emit('tower_update', payload, namespace='/ws')
    return jsonify(payload)


@towers.route('/shuffle', methods=['POST'])
def shuffle():
    try:
        result = current_session().shuffle()
    except GameError as exc:
        current_app.logger.info(f"[shuffle] rejected code={exc.code} message={exc.message}")
        raise
    payload = result.to_dict()
    socketio.emit('words_update', payload, namespace='/ws')
    return jsonify(payload)


@towers.route('/towers', methods=['GET'])
def get_towers():
    return jsonify(current_session().towers().to_dict())


@towers.route('/words', methods=['GET'])
def get_words():
    pool = current_session().words()
    return jsonify(pool.to_dict())


@towers.route('/rounds', methods=['GET'])
def get_rounds():
    return jsonify(current_session().rounds().to_dict())
