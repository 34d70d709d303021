"""
Routes package for the IT asset tracker
One blueprint per record collection under /api, plus the health probe
"""

from itam.utils.logger import get_logger

logger = get_logger("itam.routes")


def init_app(app):
    """Register all blueprints and error handlers with the Flask app"""
    logger.debug("Initializing route blueprints")

    from .main import main
    from .errors import register_error_handlers
    from .api import assets, licenses, users, contracts

    app.register_blueprint(main)
    app.register_blueprint(assets.bp)
    app.register_blueprint(assets.stats_bp)
    app.register_blueprint(licenses.bp)
    app.register_blueprint(users.bp)
    app.register_blueprint(contracts.bp)

    register_error_handlers(app)
    logger.debug("Route blueprints registered")
