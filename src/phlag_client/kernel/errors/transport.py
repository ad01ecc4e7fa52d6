"""Transport errors — credential, connectivity and server failures."""

from __future__ import annotations

from typing import Any

from phlag_client.kernel.errors.base import PhlagError


class AuthenticationError(PhlagError):
    """The API key was rejected by the server."""

    default_code = "authentication_failed"

    def __init__(self, message: str = "Invalid API key", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NetworkError(PhlagError):
    """Connection failure, timeout or DNS resolution error."""

    default_code = "network_error"


class ServiceError(PhlagError):
    """The service returned an unexpected status or an unreadable body."""

    default_code = "service_error"


__all__ = ["AuthenticationError", "NetworkError", "ServiceError"]
