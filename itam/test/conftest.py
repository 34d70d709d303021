"""
Pytest configuration and fixtures for the API and record store tests
"""
import pytest
from itam import create_app
from itam import db as _db


TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'RATELIMIT_ENABLED': False,
    'INIT_RETRY_ATTEMPTS': 1,
    'INIT_RETRY_DELAY': 0,
    'LOG_DIR': None,
}


def make_app(**overrides):
    config = dict(TEST_CONFIG)
    config.update(overrides)
    return create_app(config)


@pytest.fixture(scope='function')
def app():
    """Flask application backed by a fresh in-memory database"""
    app = make_app()
    with app.app_context():
        yield app
        _db.session.remove()


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def stores(app):
    """Record stores keyed by collection name"""
    return app.extensions['itam']['stores']


def new_asset(**fields):
    """Minimal valid asset field bag"""
    data = {'asset_tag': 'A-100', 'asset_type': 'hardware'}
    data.update(fields)
    return data
