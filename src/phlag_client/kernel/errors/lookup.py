"""Lookup errors — the server does not know the requested resource."""

from __future__ import annotations

from typing import Any

from phlag_client.kernel.errors.base import PhlagError


class NotFoundError(PhlagError):
    """The requested resource does not exist on the server."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class FlagNotFoundError(NotFoundError):
    """No flag with the requested name exists.

    Only raised by uncached lookups; the cached path resolves unknown flags
    to ``None`` instead.
    """

    default_code = "flag_not_found"

    def __init__(self, flag_name: str | None = None, **kwargs: Any) -> None:
        super().__init__("Flag", flag_name, **kwargs)


class EnvironmentNotFoundError(NotFoundError):
    """The configured environment does not exist."""

    default_code = "environment_not_found"

    def __init__(self, environment: str | None = None, **kwargs: Any) -> None:
        super().__init__("Environment", environment, **kwargs)


__all__ = ["EnvironmentNotFoundError", "FlagNotFoundError", "NotFoundError"]
