"""Application feature flags – PhlagClient."""
from __future__ import annotations

from typing import Any

from phlag_client.adapters.http import HttpxFlagTransport
from phlag_client.application.cache import FlagCacheStore, default_cache_path
from phlag_client.application.feature_flags.port import FlagTransport, FlagValue
from phlag_client.config.settings import EnvSettingsLoader, PhlagSettings
from phlag_client.config.settings.base import DEFAULT_CACHE_TTL, DEFAULT_TIMEOUT
from phlag_client.kernel.time import Clock, SystemClock
from phlag_client.observability.logging import get_logger

logger = get_logger(__name__)


class PhlagClient:
    """Read feature flags of one environment from a Phlag server.

    Without caching every :meth:`get_flag` issues one request for that flag.
    With ``cache=True`` the first lookup loads every flag of the environment
    into a :class:`~phlag_client.application.cache.FlagCacheStore` shared
    through a file with other processes, and later lookups are answered from
    memory until the TTL runs out.

    The two modes differ for unknown flags: uncached lookups raise
    :class:`~phlag_client.kernel.errors.FlagNotFoundError`, cached lookups
    return ``None``.

    Usage::

        client = PhlagClient(
            "http://localhost:8000",
            api_key,
            "production",
            cache=True,
        )
        if client.is_enabled("feature_checkout"):
            ...
        max_items = client.get_flag("max_items")
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        environment: str,
        *,
        cache: bool = False,
        cache_file: str | None = None,
        cache_ttl: int = DEFAULT_CACHE_TTL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: FlagTransport | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._environment = environment
        self._cache_enabled = cache
        self._cache_ttl = cache_ttl
        self._timeout = timeout
        self._clock: Clock = clock or SystemClock()
        self._owns_transport = transport is None
        self._transport: FlagTransport = transport or HttpxFlagTransport(
            base_url, api_key, timeout=timeout
        )
        self._cache_file = cache_file or default_cache_path(base_url, environment)
        self._store: FlagCacheStore | None = None
        if cache:
            self._store = FlagCacheStore(
                self._transport,
                environment,
                self._cache_file,
                ttl=cache_ttl,
                clock=self._clock,
            )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_settings(cls, settings: PhlagSettings, **kwargs: Any) -> "PhlagClient":
        """Build a client from a populated :class:`PhlagSettings`."""
        return cls(
            settings.base_url,
            settings.api_key,
            settings.environment,
            cache=settings.cache,
            cache_file=settings.cache_file,
            cache_ttl=settings.cache_ttl,
            timeout=settings.timeout,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "PhlagClient":
        """Build a client from ``PHLAG_*`` environment variables."""
        return cls.from_settings(EnvSettingsLoader().load(PhlagSettings), **kwargs)

    def with_environment(self, environment: str) -> "PhlagClient":
        """Return a new client for *environment*; this client is unchanged.

        The new client keeps the server, credential, timeout and cache
        settings and shares this client's transport. Its cache file is always
        derived afresh so two environments never share one file.
        """
        return PhlagClient(
            self._base_url,
            self._api_key,
            environment,
            cache=self._cache_enabled,
            cache_ttl=self._cache_ttl,
            timeout=self._timeout,
            transport=self._transport,
            clock=self._clock,
        )

    # ------------------------------------------------------------------
    # Flag lookups
    # ------------------------------------------------------------------

    def get_flag(self, name: str) -> FlagValue:
        """Return the value of flag *name*.

        SWITCH flags yield ``True``/``False``; INTEGER, FLOAT and STRING flags
        yield their value or ``None`` when inactive.
        """
        if self._store is None:
            return self._transport.fetch_one(self._environment, name)
        return self._store.get(name)

    def is_enabled(self, name: str) -> bool:
        """Return True only when flag *name* is the boolean ``True``."""
        return self.get_flag(name) is True

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def warm_cache(self) -> None:
        """Load every flag now instead of on first lookup. No-op without caching."""
        if self._store is None:
            return
        self._store.warm()
        logger.info("phlag.cache_warmed", environment=self._environment, path=self._cache_file)

    def clear_cache(self) -> None:
        """Forget cached flags and delete the cache file. No-op without caching."""
        if self._store is None:
            return
        self._store.invalidate()

    def is_cache_enabled(self) -> bool:
        return self._cache_enabled

    def get_cache_file_path(self) -> str:
        return self._cache_file

    def get_cache_ttl(self) -> int:
        return self._cache_ttl

    @property
    def environment(self) -> str:
        return self._environment

    def get_environment(self) -> str:
        return self._environment

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> "PhlagClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"PhlagClient(base_url={self._base_url!r}, environment={self._environment!r}, "
            f"cache={self._cache_enabled!r})"
        )


__all__ = ["PhlagClient"]
