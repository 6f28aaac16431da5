from __future__ import annotations

import logging
import os
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import to_jsonable_python

from vms_schema_utils.core.errors import PACKAGE_NAME, VmsError
from vms_schema_utils.core.instrumentation import r_log

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 30.0


def _env_timeout() -> float:
    raw = os.getenv("VMS_API_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid VMS_API_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT


class ApiClient:
    """JSON REST client for the VMS backend.

    Settings fall back to ``VMS_API_BASE_URL``, ``VMS_API_TIMEOUT`` and
    ``VMS_API_TOKEN`` when not passed explicitly.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        token: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url or os.getenv("VMS_API_BASE_URL") or DEFAULT_BASE_URL
        self._timeout = _env_timeout() if timeout is None else timeout

        token = token if token is not None else os.getenv("VMS_API_TOKEN")
        default_headers = {"Accept": "application/json", **(headers or {})}
        if token:
            default_headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self._timeout,
            headers=default_headers,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        data: Any = None,
    ) -> dict[str, Any]:
        body = r_log(to_jsonable_python(data), f"{method} {path}") if data is not None else None
        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise VmsError.violation(
                "remote_request",
                "{detail}",
                detail=str(exc),
                method=method,
                path=path,
            ) from exc

        if response.status_code >= 400:
            detail: Optional[str] = None
            try:
                payload = response.json()
                if isinstance(payload, dict):
                    detail = payload.get("message") or payload.get("error") or payload.get("detail")
            except ValueError:
                detail = None
            logger.warning("%s %s returned %d", method, path, response.status_code)
            raise VmsError.violation(
                "remote_http_error",
                "{status_code}: {detail}",
                status_code=response.status_code,
                detail=str(detail or response.text),
                method=method,
                path=path,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise VmsError.violation(
                "remote_parse",
                "Remote API returned invalid JSON",
                method=method,
                path=path,
            ) from exc
        if not isinstance(payload, dict):
            raise VmsError.violation(
                "remote_parse",
                "Remote API returned non-object payload",
                method=method,
                path=path,
            )
        logger.debug("%s %s -> %d", method, path, response.status_code)
        return payload

    @staticmethod
    def _parse(payload: dict[str, Any], response_model: Optional[type[ModelT]]) -> Any:
        if response_model is None:
            return payload
        try:
            return response_model.model_validate(payload)
        except ValidationError as exc:
            raise VmsError.from_validation_error(
                exc, {"response_model": response_model.__name__}
            ) from exc

    def get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        *,
        response_model: Optional[type[ModelT]] = None,
    ) -> Any:
        """GET ``path``; returns the JSON object, or ``response_model`` parsed from it."""
        return self._parse(self._request("GET", path, params=params), response_model)

    def post(
        self,
        path: str,
        data: Any = None,
        *,
        response_model: Optional[type[ModelT]] = None,
    ) -> Any:
        payload = self._request("POST", path, data=data if data is not None else {})
        return self._parse(payload, response_model)

    def patch(
        self,
        path: str,
        data: Any = None,
        *,
        response_model: Optional[type[ModelT]] = None,
    ) -> Any:
        payload = self._request("PATCH", path, data=data if data is not None else {})
        return self._parse(payload, response_model)

    def delete(self, path: str, *, response_model: Optional[type[ModelT]] = None) -> Any:
        return self._parse(self._request("DELETE", path), response_model)


_default_api_client: Optional[ApiClient] = None


def set_api_client(client: ApiClient) -> None:
    """Install the client used by the module-level ``api_*`` helpers."""
    global _default_api_client
    _default_api_client = client


def get_api_client() -> ApiClient:
    """Return the installed client, creating one from the environment if needed."""
    global _default_api_client

    if _default_api_client is None:
        logger.debug("No API client installed, creating one for %s", PACKAGE_NAME)
        _default_api_client = ApiClient()
    return _default_api_client


def api_get(
    url: str,
    params: Optional[dict[str, Any]] = None,
    *,
    response_model: Optional[type[ModelT]] = None,
) -> Any:
    return get_api_client().get(url, params, response_model=response_model)


def api_post(url: str, data: Any = None, *, response_model: Optional[type[ModelT]] = None) -> Any:
    return get_api_client().post(url, data, response_model=response_model)


def api_patch(url: str, data: Any = None, *, response_model: Optional[type[ModelT]] = None) -> Any:
    return get_api_client().patch(url, data, response_model=response_model)


def api_delete(url: str, *, response_model: Optional[type[ModelT]] = None) -> Any:
    return get_api_client().delete(url, response_model=response_model)
