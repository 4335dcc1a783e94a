import logging

from flask import Blueprint, jsonify

from .common import get_importer

logger = logging.getLogger(__name__)

bp = Blueprint('status', __name__)


@bp.route('/api/status')
def import_status():
    """Whether the startup import finished and which entries it had to skip."""
    try:
        return jsonify(get_importer().status())
    except Exception:
        logger.exception("Error reading import status")
        return jsonify({"message": "Failed to read import status"}), 500
