"""
Test schema creation, verification and the startup retry policy.
"""

import pytest

from itam import db
from itam.build import initialize_database, is_database_ready
from itam.buisness.core.errors import SchemaInitializationError
from itam.data.core import Contract
from itam.data.core.build import build_models, describe_schema, expected_schema, verify_schema
from itam.test.conftest import make_app


def test_create_app_builds_schema(app):
    """A fresh app has every table and index in place"""
    assert is_database_ready(app), "Schema should be ready after create_app"
    assert describe_schema() == expected_schema()


def test_expected_schema_names():
    schema = expected_schema()
    assert set(schema) == {'assets', 'licenses', 'users', 'contracts'}
    assert schema['assets'] == {'idx_assets_asset_tag', 'idx_assets_status'}
    assert schema['licenses'] == {'idx_licenses_license_name', 'idx_licenses_status'}
    assert schema['users'] == {'idx_users_user_name', 'idx_users_status'}
    assert schema['contracts'] == {'idx_contracts_contract_name', 'idx_contracts_status'}


def test_build_is_idempotent(app, stores):
    stores['assets'].create({'asset_tag': 'A-1', 'asset_type': 'hardware'})
    before = describe_schema()

    build_models()
    build_models()
    verify_schema()

    assert describe_schema() == before
    assert len(stores['assets'].list_all()) == 1, "Rebuilding must not touch existing rows"


def test_verify_detects_missing_table(app):
    Contract.__table__.drop(db.engine)

    with pytest.raises(SchemaInitializationError) as exc_info:
        verify_schema()
    assert 'contracts' in exc_info.value.message

    build_models()
    verify_schema()


def test_verify_detects_missing_index(app):
    with db.engine.begin() as connection:
        connection.exec_driver_sql('DROP INDEX idx_users_status')

    with pytest.raises(SchemaInitializationError) as exc_info:
        verify_schema()
    assert 'idx_users_status' in exc_info.value.message


def test_retries_then_degrades(app, monkeypatch):
    calls = []
    sleeps = []

    def failing_verify():
        calls.append(1)
        raise SchemaInitializationError("Table verification failed, missing: assets")

    monkeypatch.setattr('itam.data.core.build.verify_schema', failing_verify)
    monkeypatch.setattr('itam.build.time.sleep', sleeps.append)

    assert initialize_database(app, attempts=3, delay=0.5) is False
    assert len(calls) == 3, "Every attempt should be tried"
    assert sleeps == [0.5, 0.5], "Delay only between attempts"
    assert not is_database_ready(app)

    response = app.test_client().get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'degraded'


def test_recovers_on_later_attempt(app, monkeypatch):
    outcomes = [SchemaInitializationError("not yet"), None]
    real_verify = verify_schema

    def flaky_verify():
        outcome = outcomes.pop(0)
        if outcome is not None:
            raise outcome
        real_verify()

    monkeypatch.setattr('itam.data.core.build.verify_schema', flaky_verify)
    monkeypatch.setattr('itam.build.time.sleep', lambda seconds: None)

    assert initialize_database(app, attempts=5, delay=0) is True
    assert outcomes == []
    assert is_database_ready(app)


def test_unreachable_database_leaves_app_degraded():
    """Startup never raises; requests fail with infrastructure errors instead"""
    app = make_app(SQLALCHEMY_DATABASE_URI='sqlite:////nonexistent-dir/itam.db')
    client = app.test_client()

    assert not is_database_ready(app)

    health = client.get('/health').get_json()
    assert health['status'] == 'degraded'
    assert health['database'] == 'unavailable'

    response = client.get('/api/assets')
    assert response.status_code == 500
    assert response.get_json()['code'] == 'infrastructure'
