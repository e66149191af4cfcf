"""Thin synchronous client for the Caterly HTTP API.

Transport problems and 5xx answers surface as ``UpstreamError``; 4xx answers
as ``RequestRejected`` carrying the server's error message.
"""

import os

import httpx
import structlog

from storefront.exceptions import RequestRejected, UpstreamError

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


def default_base_url() -> str:
    return os.environ.get("CATERLY_API_URL", DEFAULT_BASE_URL)


class StorefrontClient:
    def __init__(self, base_url: str | None = None, client: httpx.Client | None = None, timeout: float = 10.0):
        # An injected client (e.g. FastAPI's TestClient) carries its own base URL
        self._http = client or httpx.Client(base_url=base_url or default_base_url(), timeout=timeout)
        self.token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def request(self, method: str, path: str, json=None, params=None):
        try:
            response = self._http.request(method, path, json=json, params=params, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.warning("API unreachable", method=method, path=path, error=str(exc))
            raise UpstreamError(f"{method} {path} failed: {exc}") from exc

        if response.status_code >= 500:
            raise UpstreamError(f"{method} {path} returned {response.status_code}")
        if response.status_code >= 400:
            raise RequestRejected(response.status_code, _error_message(response))
        return response.json() if response.content else None

    def get(self, path: str, params=None):
        return self.request("GET", path, params=params)

    def post(self, path: str, json=None):
        return self.request("POST", path, json=json)

    def put(self, path: str, json=None):
        return self.request("PUT", path, json=json)

    def delete(self, path: str):
        return self.request("DELETE", path)

    # -------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------
    def login(self, phone: str, password: str) -> dict:
        """Log in and keep the bearer token for later calls. Returns the account."""
        payload = self.post("/auth/login", json={"phone": phone, "password": password})
        self.token = payload["token"]
        logger.info("Logged in", account_id=payload["account"]["account_id"])
        return payload["account"]

    def logout(self) -> None:
        self.token = None

    def close(self) -> None:
        self._http.close()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or body)
    return str(body)
