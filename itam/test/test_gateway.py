"""
Test the client data gateway against the real API (through the Flask test client)
and against a mocked transport for failure paths and URL building.
"""

from unittest.mock import MagicMock
from urllib.parse import urlsplit

import pytest
import requests

from itam.buisness.core.errors import ErrorKind
from itam.client.gateway import DataGateway, GatewayError
from itam.test.conftest import new_asset


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _TestClientResponse:
    """Just enough of requests.Response for the gateway"""

    def __init__(self, response):
        self.status_code = response.status_code
        self.content = response.data
        self._response = response

    def json(self):
        body = self._response.get_json(silent=True)
        if body is None:
            raise ValueError("No JSON body")
        return body


class _TestClientSession:
    """Routes gateway requests into a Flask test client"""

    def __init__(self, client):
        self.client = client
        self.closed = False

    def request(self, method, url, json=None, timeout=None):
        response = self.client.open(urlsplit(url).path, method=method, json=json)
        return _TestClientResponse(response)

    def close(self):
        self.closed = True


def _mock_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    if body is None:
        response.content = b""
        response.json.side_effect = ValueError("No JSON body")
    else:
        response.content = b"{...}"
        response.json.return_value = body
    return response


@pytest.fixture
def gateway(client):
    return DataGateway("http://itam.test", session=_TestClientSession(client))


# ---------------------------------------------------------------------------
# Against the API
# ---------------------------------------------------------------------------

def test_health(gateway):
    assert gateway.health()['status'] == 'ok'


def test_asset_round_trip(gateway):
    created = gateway.create('assets', new_asset(manufacturer='Dell Inc'))
    assert created['status'] == 'In Use'

    assert gateway.get('assets', created['id']) == created
    assert [row['id'] for row in gateway.list('assets')] == [created['id']]
    assert [row['id'] for row in gateway.search('assets', 'dell')] == [created['id']]
    assert gateway.asset_by_tag('A-100')['id'] == created['id']

    updated = gateway.update('assets', created['id'], {'status': 'Retired'})
    assert updated['status'] == 'Retired'
    assert gateway.asset_stats()['retired'] == 1

    deleted = gateway.delete('assets', created['id'])
    assert deleted['id'] == created['id'], "Delete should hand back the removed row"
    assert gateway.list('assets') == []


def test_missing_records_are_none(gateway):
    assert gateway.get('licenses', 404) is None
    assert gateway.update('licenses', 404, {'status': 'Expired'}) is None
    assert gateway.delete('licenses', 404) is None
    assert gateway.asset_by_tag('NOPE') is None


def test_conflict_is_typed(gateway):
    gateway.create('users', {'user_name': 'Ana', 'email': 'ana@example.com'})

    with pytest.raises(GatewayError) as exc_info:
        gateway.create('users', {'user_name': 'Other Ana', 'email': 'ana@example.com'})

    assert exc_info.value.kind is ErrorKind.CONFLICT
    assert exc_info.value.status_code == 409
    assert 'email' in exc_info.value.message


def test_validation_is_typed(gateway):
    with pytest.raises(GatewayError) as exc_info:
        gateway.create('contracts', {'vendor': 'Acme'})

    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert 'contract_name' in exc_info.value.message


def test_unknown_collection(gateway):
    with pytest.raises(ValueError):
        gateway.list('widgets')


# ---------------------------------------------------------------------------
# Against a mocked transport
# ---------------------------------------------------------------------------

def test_transport_failure_is_infrastructure():
    session = MagicMock()
    session.request.side_effect = requests.ConnectionError("connection refused")
    gateway = DataGateway("http://itam.test", session=session)

    with pytest.raises(GatewayError) as exc_info:
        gateway.list('assets')

    assert exc_info.value.kind is ErrorKind.INFRASTRUCTURE
    assert exc_info.value.status_code is None


def test_error_without_json_body_falls_back_to_status():
    session = MagicMock()
    session.request.return_value = _mock_response(status_code=502)
    gateway = DataGateway("http://itam.test", session=session)

    with pytest.raises(GatewayError) as exc_info:
        gateway.asset_stats()

    assert exc_info.value.kind is ErrorKind.INFRASTRUCTURE
    assert exc_info.value.message == "HTTP 502"


def test_search_term_is_url_encoded():
    session = MagicMock()
    session.request.return_value = _mock_response(body=[])
    gateway = DataGateway("http://itam.test/", session=session, timeout=3)

    assert gateway.search('assets', 'X1/Gen 9') == []

    session.request.assert_called_once_with(
        method="GET",
        url="http://itam.test/api/assets/search/X1%2FGen%209",
        json=None,
        timeout=3,
    )


def test_context_manager_closes_session(client):
    session = _TestClientSession(client)
    with DataGateway("http://itam.test", session=session) as gateway:
        gateway.health()
    assert session.closed
