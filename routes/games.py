import logging

from flask import Blueprint, jsonify

from services.core import hunting_methods_for
from .common import get_store, parse_id

logger = logging.getLogger(__name__)

bp = Blueprint('games', __name__)


@bp.route('/api/games')
def list_games():
    try:
        return jsonify(get_store().get_all_games())
    except Exception:
        logger.exception("Error fetching games")
        return jsonify({"message": "Failed to fetch games"}), 500


@bp.route('/api/games/<game_id>')
def game_detail(game_id):
    try:
        gid = parse_id(game_id)
        game = get_store().get_game(gid) if gid is not None else None
        if not game:
            return jsonify({"message": "Game not found"}), 404
        return jsonify(game)
    except Exception:
        logger.exception("Error fetching game details")
        return jsonify({"message": "Failed to fetch game details"}), 500


@bp.route('/api/games/<game_id>/pokemon')
def game_pokemon(game_id):
    try:
        gid = parse_id(game_id)
        if gid is None:
            # Nothing can match a non-numeric id
            return jsonify([])
        return jsonify(get_store().get_pokemon_by_game(gid))
    except Exception:
        logger.exception("Error fetching pokemon by game")
        return jsonify({"message": "Failed to fetch pokemon by game"}), 500


@bp.route('/api/games/<game_id>/hunting-methods')
def game_hunting_methods(game_id):
    """Shiny hunting methods known for a game ([] when none are listed)."""
    try:
        gid = parse_id(game_id)
        game = get_store().get_game(gid) if gid is not None else None
        if not game:
            return jsonify({"message": "Game not found"}), 404
        return jsonify(hunting_methods_for(game['shortCode']))
    except Exception:
        logger.exception("Error fetching hunting methods")
        return jsonify({"message": "Failed to fetch hunting methods"}), 500
