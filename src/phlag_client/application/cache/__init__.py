"""Application cache – file-backed, TTL-bound flag snapshot shared across processes."""
from phlag_client.application.cache.keys import CacheKey, default_cache_path
from phlag_client.application.cache.persistence import file_sha256, read_snapshot, write_snapshot
from phlag_client.application.cache.store import DEFAULT_CACHE_TTL, FlagCacheStore

__all__ = [
    "CacheKey",
    "DEFAULT_CACHE_TTL",
    "FlagCacheStore",
    "default_cache_path",
    "file_sha256",
    "read_snapshot",
    "write_snapshot",
]
