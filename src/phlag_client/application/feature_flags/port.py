"""Application feature flags – FlagTransport port and flag value types."""
from __future__ import annotations

import abc
from typing import Any, Mapping

FlagValue = bool | int | float | str | None
"""A single flag value as served by Phlag; ``None`` is the absent marker."""

FlagSnapshot = Mapping[str, FlagValue]
"""Every flag of one environment, keyed by flag name."""


def is_flag_value(value: Any) -> bool:
    """Return True when *value* is a JSON scalar or null."""
    return value is None or isinstance(value, (bool, int, float, str))


def is_flag_snapshot(payload: Any) -> bool:
    """Return True when *payload* is a ``{name: scalar}`` mapping."""
    if not isinstance(payload, dict):
        return False
    return all(isinstance(k, str) and is_flag_value(v) for k, v in payload.items())


class FlagTransport(abc.ABC):
    """Port: fetch flag values from the remote flag source."""

    @abc.abstractmethod
    def fetch_one(self, environment: str, flag_name: str) -> FlagValue:
        """Fetch a single flag.

        Raises ``AuthenticationError``, ``FlagNotFoundError``,
        ``EnvironmentNotFoundError``, ``NetworkError`` or ``ServiceError``.
        """

    @abc.abstractmethod
    def fetch_all(self, environment: str) -> dict[str, FlagValue]:
        """Fetch every flag of *environment* in one request.

        Never raises ``FlagNotFoundError``.
        """

    def close(self) -> None:
        """Release any held resources."""


__all__ = ["FlagSnapshot", "FlagTransport", "FlagValue", "is_flag_snapshot", "is_flag_value"]
