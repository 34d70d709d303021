from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os
from itam.utils.logger import setup_logging, get_logger

# Initialize extensions
db = SQLAlchemy()
cors = CORS()
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://"  # Use Redis in production for distributed systems
)


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def create_app(test_config=None):
    """
    Application factory.

    Reads configuration from the environment, applies ``test_config`` overrides,
    binds the database handle, builds the record stores around it and runs schema
    initialization (with retries) before returning.

    Args:
        test_config (dict, optional): Config values that take precedence over the environment

    Returns:
        Flask: The configured application
    """
    from pathlib import Path

    base_dir = Path(__file__).parent.parent
    app = Flask(__name__, instance_path=str(base_dir / 'instance'))

    # Configuration
    default_db_path = Path(app.instance_path) / 'itam.db'
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get(
        'DATABASE_URL', f"sqlite:///{default_db_path.resolve()}"
    )
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {'pool_pre_ping': True}
    app.config['PORT'] = int(os.environ.get('PORT', '5000'))
    app.config['CORS_ORIGIN'] = os.environ.get('CORS_ORIGIN', '*')
    app.config['INIT_RETRY_ATTEMPTS'] = int(os.environ.get('INIT_RETRY_ATTEMPTS', '5'))
    app.config['INIT_RETRY_DELAY'] = float(os.environ.get('INIT_RETRY_DELAY', '2'))
    app.config['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', 'INFO')
    app.config['LOG_DIR'] = os.environ.get('LOG_DIR', 'logs')
    app.config['RATELIMIT_DEFAULT'] = os.environ.get('RATELIMIT_DEFAULT', '1000 per hour')
    app.config['RATELIMIT_ENABLED'] = _env_flag('RATELIMIT_ENABLED', 'True')

    if test_config:
        app.config.update(test_config)

    app.json.sort_keys = False

    setup_logging(level=app.config['LOG_LEVEL'], log_dir=app.config['LOG_DIR'])
    logger = get_logger("itam.app")
    logger.info("Initializing Flask application")

    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///'):
        Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    # Initialize extensions with app
    db.init_app(app)
    cors.init_app(app, resources={
        r"/api/*": {"origins": app.config['CORS_ORIGIN']},
        r"/health": {"origins": app.config['CORS_ORIGIN']},
    })
    limiter.init_app(app)
    logger.debug("Extensions initialized")

    # Import models to ensure they're registered with SQLAlchemy
    from itam.data.core.asset_info.asset import Asset
    from itam.data.core.license_info.license import License
    from itam.data.core.user_info.user import User
    from itam.data.core.contract_info.contract import Contract

    # Record stores share the scoped session; it is removed after every request
    from itam.buisness import build_record_stores
    app.extensions['itam'] = {
        'stores': build_record_stores(db.session),
        'database_ready': False,
    }

    # Register blueprints and error handlers
    from itam.presentation.routes import init_app as init_routes
    init_routes(app)

    # Schema initialization with retries; failure leaves the app degraded
    from itam.build import initialize_database
    initialize_database(app)

    logger.info("Flask application initialization complete")

    return app
