"""Application cache – CacheKey builder and default cache file path."""
from __future__ import annotations

import hashlib
import os
import tempfile

__all__ = ["CACHE_FILE_PREFIX", "CacheKey", "default_cache_path"]

CACHE_FILE_PREFIX = "flagcache_"


class CacheKey:
    """Factory for deterministic cache key strings."""

    @staticmethod
    def for_environment(base_url: str, environment: str) -> str:
        # trailing slashes do not change the server, so they must not change the key
        canonical = f"{base_url.rstrip('/')}|{environment}"
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def default_cache_path(base_url: str, environment: str, directory: str | None = None) -> str:
    """Return the cache file every client of *base_url*/*environment* shares.

    The file lives in the system temp directory unless *directory* is given.
    """
    key = CacheKey.for_environment(base_url, environment)
    return os.path.join(directory or tempfile.gettempdir(), f"{CACHE_FILE_PREFIX}{key}.json")
