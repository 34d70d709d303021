"""
Asset routes
The shared record endpoints plus tag lookup and the dashboard counts
"""

from flask import Blueprint, jsonify
from itam.buisness.core.errors import NotFoundError
from .records import create_records_blueprint, get_store

bp = create_records_blueprint('assets', 'Asset', 'asset')
stats_bp = Blueprint('api_stats', __name__, url_prefix='/api')


@bp.route('/tag/<path:asset_tag>', methods=['GET'])
def get_asset_by_tag(asset_tag):
    row = get_store('assets').get_by_tag(asset_tag)
    if row is None:
        raise NotFoundError("Asset not found")
    return jsonify(row)


@stats_bp.route('/stats', methods=['GET'])
def asset_stats():
    return jsonify(get_store('assets').stats())
