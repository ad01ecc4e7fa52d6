"""Application cache – FlagCacheStore."""
from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping

from phlag_client.application.cache.persistence import read_snapshot, write_snapshot
from phlag_client.application.feature_flags.port import FlagTransport, FlagValue
from phlag_client.config.settings.base import DEFAULT_CACHE_TTL
from phlag_client.kernel.time import Clock, SystemClock
from phlag_client.observability.logging import get_logger

logger = get_logger(__name__)


class FlagCacheStore:
    """Lazily-loaded snapshot of every flag of one environment.

    The snapshot is backed by a file shared by every process pointed at the
    same server and environment. Freshness is judged against two clocks:

    * the in-process *last loaded* instant decides whether this instance
      re-checks at all; it reloads once ``now - last_loaded > ttl``;
    * the file modification time decides whether a reload can be served
      from disk; the file is stale once ``now - mtime >= ttl``.

    Only when the file is missing, stale or unusable is the transport asked
    for the full flag set, after which the file is atomically replaced.

    One instance is meant to serve one thread. Embedders sharing an instance
    across threads must serialise calls themselves.
    """

    def __init__(
        self,
        transport: FlagTransport,
        environment: str,
        path: str,
        *,
        ttl: int | float = DEFAULT_CACHE_TTL,
        clock: Clock | None = None,
    ) -> None:
        self._transport = transport
        self._environment = environment
        self._path = path
        self._ttl = ttl
        self._clock: Clock = clock or SystemClock()
        self._snapshot: dict[str, FlagValue] | None = None
        self._last_loaded: float | None = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def ttl(self) -> int | float:
        return self._ttl

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def last_loaded(self) -> float | None:
        """Clock timestamp of the most recent load, or ``None``."""
        return self._last_loaded

    @property
    def snapshot(self) -> Mapping[str, FlagValue] | None:
        """Read-only view of the resident snapshot; never triggers a load."""
        if self._snapshot is None:
            return None
        return MappingProxyType(self._snapshot)

    def get(self, flag_name: str) -> FlagValue:
        """Return *flag_name* from the snapshot, loading it first if needed.

        Unknown flags resolve to ``None``. Transport errors raised while
        loading propagate unchanged.
        """
        if self._snapshot is None or self._is_expired():
            self._load()
        assert self._snapshot is not None
        return self._snapshot.get(flag_name)

    def warm(self) -> None:
        """Load a fresh snapshot now, whether or not one is resident."""
        self._load()

    def invalidate(self) -> None:
        """Drop the resident snapshot and delete the backing file.

        Never raises; a leftover file is either judged stale or overwritten
        by the next load.
        """
        self._snapshot = None
        self._last_loaded = None
        try:
            os.remove(self._path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("flag_cache.invalidate_failed", path=self._path, error=str(exc))
        else:
            logger.debug("flag_cache.invalidated", path=self._path)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_expired(self) -> bool:
        if self._last_loaded is None:
            return True
        return self._clock.timestamp() - self._last_loaded > self._ttl

    def _load(self) -> None:
        cached = self._read_fresh_file(self._clock.timestamp())
        if cached is not None:
            self._adopt(cached)
            logger.debug("flag_cache.file_hit", path=self._path, environment=self._environment)
            return

        flags = self._transport.fetch_all(self._environment)
        self._adopt(flags)
        logger.debug(
            "flag_cache.fetched",
            path=self._path,
            environment=self._environment,
            flags=len(flags),
        )
        write_snapshot(self._path, flags, now=self._last_loaded)

    def _read_fresh_file(self, now: float) -> dict[str, FlagValue] | None:
        try:
            mtime = os.stat(self._path).st_mtime
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("flag_cache.stat_failed", path=self._path, error=str(exc))
            return None

        if now - mtime >= self._ttl:
            logger.debug("flag_cache.file_expired", path=self._path, age=now - mtime)
            return None

        # a concurrent writer may have removed or replaced the file since the stat
        if not os.path.isfile(self._path):
            return None
        return read_snapshot(self._path)

    def _adopt(self, flags: Mapping[str, FlagValue]) -> None:
        self._snapshot = dict(flags)
        self._last_loaded = self._clock.timestamp()


__all__ = ["DEFAULT_CACHE_TTL", "FlagCacheStore"]
