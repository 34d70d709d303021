"""
Error handlers for the JSON API
Every failure leaves the API as {"error": <message>, "code": <error kind>}
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException
from itam.buisness.core.errors import ErrorKind, RecordStoreError
from itam.utils.logger import get_logger

logger = get_logger("itam.routes.errors")


def _kind_for_status(status_code):
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    if status_code == 409:
        return ErrorKind.CONFLICT
    if status_code < 500:
        return ErrorKind.VALIDATION
    return ErrorKind.INFRASTRUCTURE


def handle_record_store_error(error):
    if error.http_status >= 500:
        logger.error(f"{error.kind.value}: {error.message}")
    else:
        logger.info(f"{error.kind.value}: {error.message}")
    return jsonify(error.to_dict()), error.http_status


def handle_http_exception(error):
    return jsonify({
        'error': error.description,
        'code': _kind_for_status(error.code or 500).value,
    }), error.code


def handle_unexpected_error(error):
    logger.error(f"Unhandled error: {error}", exc_info=True)
    return jsonify({
        'error': 'Internal server error',
        'code': ErrorKind.INFRASTRUCTURE.value,
    }), 500


def register_error_handlers(app):
    app.register_error_handler(RecordStoreError, handle_record_store_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected_error)
