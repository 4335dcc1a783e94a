import logging

from flask import Blueprint, jsonify, request

from services.core import parse_generations
from services.store import DEFAULT_SORT
from .common import get_store, int_arg, parse_id

logger = logging.getLogger(__name__)

bp = Blueprint('pokemon', __name__)

DEFAULT_LIMIT = 20


@bp.route('/api/pokemon')
def list_pokemon():
    try:
        limit = int_arg('limit', DEFAULT_LIMIT)
        offset = int_arg('offset', 0)
        if limit <= 0:
            limit = DEFAULT_LIMIT
        if offset < 0:
            offset = 0
        generations = parse_generations(request.args.get('generation'))
        type_name = (request.args.get('type') or '').strip() or None
        sort = (request.args.get('sort') or DEFAULT_SORT).strip().lower()
        return jsonify(get_store().get_pokemon_list(limit, offset, generations, type_name, sort))
    except Exception:
        logger.exception("Error fetching pokemon")
        return jsonify({"message": "Failed to fetch pokemon"}), 500


@bp.route('/api/pokemon/search')
def search_pokemon():
    try:
        q = request.args.get('q')
        if not q:
            return jsonify({"message": "Query parameter 'q' is required"}), 400
        return jsonify(get_store().search_pokemon(q))
    except Exception:
        logger.exception("Error searching pokemon")
        return jsonify({"message": "Failed to search pokemon"}), 500


@bp.route('/api/pokemon/<id_or_name>')
def pokemon_detail(id_or_name):
    try:
        store = get_store()
        poke_id = parse_id(id_or_name)
        if poke_id is not None:
            pokemon = store.get_pokemon_by_id(poke_id)
        else:
            pokemon = store.get_pokemon_by_name(id_or_name)
        if not pokemon:
            return jsonify({"message": "Pokemon not found"}), 404
        return jsonify(pokemon)
    except Exception:
        logger.exception("Error fetching pokemon details")
        return jsonify({"message": "Failed to fetch pokemon details"}), 500
