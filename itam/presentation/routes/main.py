"""
Main routes for the IT asset tracker
Liveness probe and request logging
"""

import logging
from datetime import datetime, timezone
from flask import Blueprint, current_app, jsonify, request
from itam import limiter
from itam.build import is_database_ready
from itam.utils.logger import get_logger
from itam.utils.logging_sanitizer import sanitize_json_body

main = Blueprint('main', __name__)
logger = get_logger("itam.routes.main")


@main.before_app_request
def log_request():
    logger.info(f"{request.method} {request.path}")
    if request.is_json and logger.isEnabledFor(logging.DEBUG):
        body = request.get_json(silent=True)
        logger.debug(f"Request body: {sanitize_json_body(body)}")


@main.route('/health', methods=['GET'])
@limiter.exempt
def health():
    """Liveness probe; reports degraded when schema initialization never succeeded"""
    ready = is_database_ready(current_app)
    return jsonify({
        'status': 'ok' if ready else 'degraded',
        'database': 'ready' if ready else 'unavailable',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })
