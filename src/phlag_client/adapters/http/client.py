"""HTTP adapter – HttpxFlagTransport."""
from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx

from phlag_client.application.feature_flags.port import (
    FlagTransport,
    FlagValue,
    is_flag_snapshot,
)
from phlag_client.kernel.errors import (
    AuthenticationError,
    EnvironmentNotFoundError,
    FlagNotFoundError,
    NetworkError,
    ServiceError,
)
from phlag_client.observability.logging import get_logger

logger = get_logger(__name__)

FLAG_ENDPOINT = "flag/{environment}/{flag_name}"
ALL_FLAGS_ENDPOINT = "all-flags/{environment}"


class HttpxFlagTransport(FlagTransport):
    """Thin synchronous httpx wrapper with structured error mapping.

    Every request is authenticated with ``Authorization: Bearer <api_key>``
    and resolved relative to *base_url*.
    """

    def __init__(self, base_url: str, api_key: str, *, timeout: float = 10.0, **kwargs: Any) -> None:
        self._base_url = base_url.rstrip("/")
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }
        headers.update(kwargs.pop("headers", None) or {})
        self._client = httpx.Client(
            base_url=self._base_url + "/",
            timeout=timeout,
            headers=headers,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def __enter__(self) -> "HttpxFlagTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_one(self, environment: str, flag_name: str) -> FlagValue:
        path = FLAG_ENDPOINT.format(
            environment=quote(environment, safe=""),
            flag_name=quote(flag_name, safe=""),
        )
        return self._get(path, environment=environment, flag_name=flag_name)

    def fetch_all(self, environment: str) -> dict[str, FlagValue]:
        path = ALL_FLAGS_ENDPOINT.format(environment=quote(environment, safe=""))
        payload = self._get(path, environment=environment)
        # an environment without flags is served as an empty JSON array
        if payload == []:
            payload = {}
        if not is_flag_snapshot(payload):
            raise ServiceError(
                f"Unexpected all-flags payload for environment '{environment}'",
                endpoint=path,
                detail={"payload_type": type(payload).__name__},
            )
        return payload

    def _get(self, path: str, *, environment: str, flag_name: str | None = None) -> Any:
        try:
            response = self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._classify(exc, path, environment, flag_name) from exc
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Request timed out: GET {path}", endpoint=path, cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"Network error: GET {path}: {exc}", endpoint=path, cause=exc) from exc

        logger.debug("phlag.http.response", path=path, status_code=response.status_code)
        try:
            return json.loads(response.content)
        except (ValueError, RecursionError) as exc:
            raise ServiceError(
                f"Invalid JSON in response to GET {path}",
                endpoint=path,
                status_code=response.status_code,
                cause=exc,
            ) from exc

    @staticmethod
    def _classify(
        exc: httpx.HTTPStatusError,
        path: str,
        environment: str,
        flag_name: str | None,
    ) -> Exception:
        status = exc.response.status_code
        context: dict[str, Any] = {"endpoint": path, "status_code": status, "cause": exc}
        if status == 401:
            return AuthenticationError(**context)
        if status == 404:
            if flag_name is not None:
                return FlagNotFoundError(flag_name, **context)
            return EnvironmentNotFoundError(environment, **context)
        return ServiceError(f"HTTP {status} from GET {path}", **context)


__all__ = ["ALL_FLAGS_ENDPOINT", "FLAG_ENDPOINT", "HttpxFlagTransport"]
