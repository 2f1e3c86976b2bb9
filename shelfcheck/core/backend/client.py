"""Thin client for the managed database's REST API (PostgREST dialect)."""

import logging
from typing import Any, Mapping

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)


class BackendError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def http_session(timeout: int = 20) -> requests.Session:
    s = requests.Session()
    retries = Retry(
        total=3,
        backoff_factor=0.6,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET", "POST"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.request_timeout = timeout  # type: ignore[attr-defined]
    return s


class RestClient:
    def __init__(
        self,
        base_url: str,
        service_key: str,
        *,
        timeout: int = 20,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("Backend URL is required.")
        if not service_key:
            raise ValueError("Backend service key is required.")
        self.base_url = base_url.rstrip("/")
        self._service_key = service_key
        self._http = session or http_session(timeout)
        if not hasattr(self._http, "request_timeout"):
            self._http.request_timeout = timeout  # type: ignore[attr-defined]

    def _headers(self, *, prefer: str | None = None) -> dict[str, str]:
        headers = {
            "apikey": self._service_key,
            "Authorization": f"Bearer {self._service_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/rest/v1/{path.lstrip('/')}"

    def _handle(self, response: requests.Response) -> Any:
        if response.status_code >= 400:
            raise _error_from_response(response)
        if not response.content:
            return None
        return response.json()

    def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Mapping[str, Any] | None = None,
        order: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = limit
        response = self._http.get(
            self._url(table),
            params=params,
            headers=self._headers(),
            timeout=self._http.request_timeout,
        )
        return self._handle(response) or []

    def exists(self, table: str, column: str, value: Any) -> bool:
        return bool(self.select(table, columns=column, filters={column: value}, limit=1))

    def insert(self, table: str, rows: dict[str, Any] | list[dict[str, Any]]) -> list[dict[str, Any]]:
        response = self._http.post(
            self._url(table),
            json=rows,
            headers=self._headers(prefer="return=representation"),
            timeout=self._http.request_timeout,
        )
        created = self._handle(response)
        logger.debug("Inserted %s row(s) into %s", len(created or []), table)
        return created or []

    def rpc(self, function: str, params: Mapping[str, Any] | None = None) -> Any:
        response = self._http.post(
            self._url(f"rpc/{function}"),
            json=dict(params or {}),
            headers=self._headers(),
            timeout=self._http.request_timeout,
        )
        return self._handle(response)


def _error_from_response(response: requests.Response) -> BackendError:
    code: str | None = None
    message = ""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        code = payload.get("code")
        message = str(payload.get("message") or payload.get("error") or "")
    if not message:
        message = str(getattr(response, "text", "") or f"HTTP {response.status_code}")
    return BackendError(message, status_code=response.status_code, code=code)


__all__ = ["BackendError", "RestClient", "http_session"]
