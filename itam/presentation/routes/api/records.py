"""
Generic record routes
Builds the list/get/search/create/update/delete endpoint family for one collection
"""

import re
from flask import Blueprint, current_app, jsonify, request
from itam.buisness.core.errors import NotFoundError, ValidationError
from itam.buisness.core.field_types import INTEGER_MAX

_RECORD_ID = re.compile(r'^[0-9]{1,10}$')


def get_store(collection):
    """Store for a collection, built around the app's database session"""
    return current_app.extensions['itam']['stores'][collection]


def parse_record_id(raw_id, label='Record'):
    """
    Validate a path identifier

    Raises:
        ValidationError: If the id is not a positive integer that fits the id column
    """
    if not _RECORD_ID.match(raw_id or '') or not 1 <= int(raw_id) <= INTEGER_MAX:
        raise ValidationError(f"Invalid {label.lower()} id: {raw_id}")
    return int(raw_id)


def json_body():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def create_records_blueprint(collection, label, singular):
    """
    Build the endpoint family for one collection

    Args:
        collection (str): URL segment and store key, e.g. 'assets'
        label (str): Display name used in messages, e.g. 'Asset'
        singular (str): Key holding the row in delete responses, e.g. 'asset'

    Returns:
        Blueprint: Registered under /api/<collection>
    """
    bp = Blueprint(f'api_{collection}', __name__, url_prefix=f'/api/{collection}')

    def found_or_404(row):
        if row is None:
            raise NotFoundError(f"{label} not found")
        return row

    @bp.route('', methods=['GET'])
    def list_records():
        return jsonify(get_store(collection).list_all())

    @bp.route('/<record_id>', methods=['GET'])
    def get_record(record_id):
        record_id = parse_record_id(record_id, label)
        return jsonify(found_or_404(get_store(collection).get(record_id)))

    @bp.route('/search/<path:query>', methods=['GET'])
    def search_records(query):
        return jsonify(get_store(collection).search(query))

    @bp.route('', methods=['POST'])
    def create_record():
        row = get_store(collection).create(json_body())
        return jsonify(row), 201

    @bp.route('/<record_id>', methods=['PUT'])
    def update_record(record_id):
        record_id = parse_record_id(record_id, label)
        row = get_store(collection).update(record_id, json_body())
        return jsonify(found_or_404(row))

    @bp.route('/<record_id>', methods=['DELETE'])
    def delete_record(record_id):
        record_id = parse_record_id(record_id, label)
        row = found_or_404(get_store(collection).delete(record_id))
        return jsonify({'message': f"{label} deleted", singular: row})

    return bp
