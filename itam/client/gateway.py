"""Client data gateway for the IT asset tracker API.

Translates UI actions (load, search, save, delete) into HTTP calls and turns
the API's error bodies back into typed errors.

Usage:
    from itam.client.gateway import DataGateway
    gateway = DataGateway("http://localhost:5000")
    assets = gateway.list("assets")
    gateway.create("assets", {"asset_tag": "A-100", "asset_type": "hardware"})
"""

from urllib.parse import quote

import requests

from itam.buisness.core.errors import ErrorKind
from itam.utils.logger import get_logger

logger = get_logger("itam.client.gateway")

# Collection -> key holding the row in delete responses
COLLECTIONS = {
    "assets": "asset",
    "licenses": "license",
    "users": "user",
    "contracts": "contract",
}


class GatewayError(Exception):
    """API call failed; ``kind`` mirrors the server's error code"""

    def __init__(self, kind, message, status_code=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


class DataGateway:
    """Thin wrapper over the REST API, one method per UI action."""

    def __init__(self, base_url="http://localhost:5000", session=None, timeout=10):
        """
        Args:
            base_url: Server root (without /api)
            session: Optional requests.Session (or compatible) to send requests with
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session

    def _get_session(self):
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "Content-Type": "application/json",
                "Accept": "application/json",
            })
        return self._session

    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # ------------------------------------------------------------------

    @staticmethod
    def _collection(entity):
        if entity not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {entity}")
        return entity

    def _request(self, method, path, data=None, absent_on_404=False):
        url = f"{self.base_url}{path}"
        try:
            response = self._get_session().request(
                method=method,
                url=url,
                json=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise GatewayError(ErrorKind.INFRASTRUCTURE, f"Could not reach API: {e}") from e

        if response.status_code == 404 and absent_on_404:
            return None

        if response.status_code >= 400:
            raise self._error_from(response)

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_from(response):
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = body.get("error") or f"HTTP {response.status_code}"
        try:
            kind = ErrorKind(body.get("code"))
        except ValueError:
            if response.status_code == 404:
                kind = ErrorKind.NOT_FOUND
            elif response.status_code == 409:
                kind = ErrorKind.CONFLICT
            elif response.status_code < 500:
                kind = ErrorKind.VALIDATION
            else:
                kind = ErrorKind.INFRASTRUCTURE
        return GatewayError(kind, message, response.status_code)

    # ------------------------------------------------------------------
    # UI actions
    # ------------------------------------------------------------------

    def health(self):
        return self._request("GET", "/health")

    def list(self, entity):
        return self._request("GET", f"/api/{self._collection(entity)}")

    def get(self, entity, record_id):
        """Fetch one record; None when the API reports it missing"""
        return self._request("GET", f"/api/{self._collection(entity)}/{record_id}", absent_on_404=True)

    def search(self, entity, query):
        encoded = quote(str(query), safe="")
        return self._request("GET", f"/api/{self._collection(entity)}/search/{encoded}")

    def create(self, entity, data):
        return self._request("POST", f"/api/{self._collection(entity)}", data=data)

    def update(self, entity, record_id, data):
        """Send only the changed fields; None when the record no longer exists"""
        return self._request(
            "PUT", f"/api/{self._collection(entity)}/{record_id}", data=data, absent_on_404=True
        )

    def delete(self, entity, record_id):
        """Delete a record and return it; None when it was already gone"""
        body = self._request(
            "DELETE", f"/api/{self._collection(entity)}/{record_id}", absent_on_404=True
        )
        if body is None:
            return None
        return body.get(COLLECTIONS[entity], body)

    def asset_by_tag(self, asset_tag):
        encoded = quote(str(asset_tag), safe="")
        return self._request("GET", f"/api/assets/tag/{encoded}", absent_on_404=True)

    def asset_stats(self):
        return self._request("GET", "/api/stats")
