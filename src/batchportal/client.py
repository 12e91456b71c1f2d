"""Thin HTTP client mirroring the portal's browser form flow.

Input is checked with the same validators the server uses before any
request is sent. The session token is kept under a single fixed key in a
small JSON file, and "authenticated" means only that a non-empty token is
stored: expiry is not checked locally, a stale token is only discovered
when the server rejects it.
"""

import json
from pathlib import Path
from typing import Any

import httpx
import structlog

from batchportal.core.modules.batch_job.validators import validate_batch_job_request
from batchportal.core.modules.session.validators import validate_login

logger = structlog.get_logger(__name__)

AUTH_TOKEN_KEY = "auth_token"  # noqa: S105
DEFAULT_TIMEOUT = httpx.Timeout(10.0)


class PortalApiError(RuntimeError):
    """Raised when the portal API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TokenStore:
    """Persistent key/value storage for the session token."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get_token(self) -> str | None:
        return self._read().get(AUTH_TOKEN_KEY)

    def set_token(self, token: str) -> None:
        data = self._read()
        data[AUTH_TOKEN_KEY] = token
        self._write(data)

    def remove_token(self) -> None:
        data = self._read()
        if data.pop(AUTH_TOKEN_KEY, None) is not None:
            self._write(data)

    def is_authenticated(self) -> bool:
        """Presence-only check: any stored non-empty token counts."""
        return bool(self.get_token())


class PortalClient:
    """Client for the login, start-batch and verify endpoints."""

    def __init__(self, http_client: httpx.Client, token_store: TokenStore) -> None:
        self._http = http_client
        self.token_store = token_store

    @classmethod
    def connect(cls, base_url: str, token_path: Path) -> "PortalClient":
        return cls(httpx.Client(base_url=base_url, timeout=DEFAULT_TIMEOUT), TokenStore(token_path))

    def close(self) -> None:
        self._http.close()

    def _auth_headers(self) -> dict[str, str]:
        token = self.token_store.get_token()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _handle(self, response: httpx.Response, fallback: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if response.status_code >= 400:
            message = data.get("message") if isinstance(data, dict) else None
            raise PortalApiError(response.status_code, message or fallback)
        return data if isinstance(data, dict) else {"data": data}

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and store the returned token. Returns the public user fields."""
        credentials = validate_login({"email": email, "password": password})
        response = self._http.post("/api/login", json=credentials.model_dump())
        data = self._handle(response, "Invalid email or password")
        self.token_store.set_token(data["token"])
        logger.debug("client_logged_in", user_id=data["user"]["id"])
        return data["user"]

    def logout(self) -> None:
        self.token_store.remove_token()

    def start_batch(self, old_patients_target: float, import_setup_id: int, hourly_batch_count: float) -> dict[str, Any]:
        """Submit a batch job and return the recorded job."""
        payload = {
            "oldPatientsTarget": old_patients_target,
            "importSetupId": import_setup_id,
            "hourlyBatchCount": hourly_batch_count,
        }
        validate_batch_job_request(payload)
        response = self._http.post("/api/start-batch", json=payload, headers=self._auth_headers())
        data = self._handle(response, "Failed to start batch")
        return data["batchJob"]

    def verify(self) -> dict[str, Any]:
        """Ask the server whether the stored token is still valid."""
        response = self._http.get("/api/verify", headers=self._auth_headers())
        return self._handle(response, "Invalid or expired token")["user"]

    def is_authenticated(self) -> bool:
        return self.token_store.is_authenticated()
