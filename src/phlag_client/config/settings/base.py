"""Config settings – Settings base class and the client settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from phlag_client.config.validation.errors import InvalidSettingValueError

DEFAULT_CACHE_TTL = 300
DEFAULT_TIMEOUT = 10.0


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class PhlagSettings(Settings):
    """Everything a :class:`~phlag_client.PhlagClient` needs from its embedder.

    Loaded from ``PHLAG_*`` environment variables by
    :class:`~phlag_client.config.settings.loaders.EnvSettingsLoader`::

        PHLAG_BASE_URL=http://flags.internal:8000
        PHLAG_API_KEY=...
        PHLAG_ENVIRONMENT=production
        PHLAG_CACHE=true
        PHLAG_CACHE_TTL=120
    """

    _prefix: ClassVar[str] = "PHLAG"

    base_url: str
    api_key: str
    environment: str
    cache: bool = False
    cache_file: str | None = None
    cache_ttl: int = DEFAULT_CACHE_TTL
    timeout: float = DEFAULT_TIMEOUT

    def _validate(self) -> None:
        for name in ("base_url", "api_key", "environment"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingValueError(name, value, "must be a non-empty string")
        if self.cache_ttl <= 0:
            raise InvalidSettingValueError("cache_ttl", self.cache_ttl, "must be positive")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if self.cache_file is not None and not self.cache_file.strip():
            self.cache_file = None


__all__ = ["DEFAULT_CACHE_TTL", "DEFAULT_TIMEOUT", "PhlagSettings", "Settings"]
