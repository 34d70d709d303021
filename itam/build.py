"""
Build orchestrator for the IT asset tracker
Runs schema initialization with a fixed retry policy and owns the database handle lifecycle
"""

import time
from sqlalchemy.exc import SQLAlchemyError
from itam import db
from itam.buisness.core.errors import SchemaInitializationError
from itam.utils.logger import get_logger

logger = get_logger("itam.build")


def initialize_database(app, attempts=None, delay=None):
    """
    Create and verify the schema, retrying serially with a fixed delay

    Args:
        app: Flask application bound to ``db``
        attempts (int, optional): Maximum tries (default: INIT_RETRY_ATTEMPTS)
        delay (float, optional): Seconds between tries (default: INIT_RETRY_DELAY)

    Returns:
        bool: True if the schema is ready, False if the app is left degraded
    """
    from itam.data.core.build import build_models, verify_schema

    attempts = max(1, attempts if attempts is not None else app.config['INIT_RETRY_ATTEMPTS'])
    delay = delay if delay is not None else app.config['INIT_RETRY_DELAY']
    state = app.extensions['itam']

    for attempt in range(1, attempts + 1):
        logger.info(f"Starting database initialization (attempt {attempt}/{attempts})")
        try:
            with app.app_context():
                build_models()
                verify_schema()
            state['database_ready'] = True
            logger.info("Database initialized")
            return True
        except (SQLAlchemyError, SchemaInitializationError) as e:
            logger.error(f"Database initialization attempt {attempt}/{attempts} failed: {e}")
            if attempt < attempts:
                time.sleep(delay)

    state['database_ready'] = False
    logger.critical(f"Database initialization failed after {attempts} attempts; serving in degraded state")
    return False


def is_database_ready(app):
    return app.extensions.get('itam', {}).get('database_ready', False)


def release_database(app):
    """Remove the scoped session and dispose of the connection pool"""
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    logger.info("Database connections released")
