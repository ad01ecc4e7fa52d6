"""Application cache – atomic snapshot persistence.

The cache file is never modified in place. A writer serialises the snapshot
into ``<cache file>.<pid>.<thread id>.tmp`` next to the target and renames
it over the target, so a concurrent reader sees either the previous
complete file or the new complete file. When the new content is
byte-identical to the current file, only its modification time is refreshed.

Every failure here is logged and swallowed: the cache file only affects
latency, never the flag values a caller receives.
"""

from __future__ import annotations

import contextlib
import hashlib
import json
import os
import threading
from typing import Any, Mapping

from phlag_client.application.feature_flags.port import FlagValue, is_flag_snapshot
from phlag_client.observability.logging import get_logger

logger = get_logger(__name__)

FILE_HASH_CHUNK_SIZE = 64 * 1024


def file_sha256(path: str) -> str:
    """Return SHA-256 hex digest for a file."""
    digest = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def temp_path_for(path: str) -> str:
    """Return the temporary file this process and thread use while replacing *path*."""
    return f"{path}.{os.getpid()}.{threading.get_ident()}.tmp"


def serialize_snapshot(snapshot: Mapping[str, FlagValue]) -> bytes:
    # sorted keys keep the digest stable for equal snapshots
    return json.dumps(dict(snapshot), ensure_ascii=False, sort_keys=True).encode("utf-8")


def read_snapshot(path: str) -> dict[str, FlagValue] | None:
    """Return the snapshot stored at *path*, or ``None`` when unusable.

    Missing, unreadable, truncated or wrongly-shaped files all yield ``None``.
    """
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        logger.debug("flag_cache.read_failed", path=path, error=str(exc))
        return None

    try:
        payload: Any = json.loads(raw.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        logger.warning("flag_cache.corrupt_file", path=path, error=str(exc))
        return None

    if not is_flag_snapshot(payload):
        logger.warning("flag_cache.unexpected_shape", path=path, payload_type=type(payload).__name__)
        return None
    return payload


def write_snapshot(path: str, snapshot: Mapping[str, FlagValue], *, now: float | None = None) -> bool:
    """Atomically persist *snapshot* to *path*.

    *now* is the modification time stamped on the file when its content is
    unchanged; ``None`` uses the current system time. Returns True when the
    file at *path* holds *snapshot* afterwards.
    """
    tmp_path = temp_path_for(path)
    try:
        data = serialize_snapshot(snapshot)
        with open(tmp_path, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("flag_cache.persist_failed", path=path, stage="write", error=str(exc))
        _discard(tmp_path)
        return False

    if _has_digest(path, hashlib.sha256(data).hexdigest()):
        try:
            os.utime(path, None if now is None else (now, now))
        except OSError as exc:
            logger.debug("flag_cache.touch_failed", path=path, error=str(exc))
        else:
            _discard(tmp_path)
            logger.debug("flag_cache.touched", path=path)
            return True

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        logger.warning("flag_cache.persist_failed", path=path, stage="rename", error=str(exc))
        _discard(tmp_path)
        return False

    logger.debug("flag_cache.persisted", path=path, flags=len(snapshot))
    return True


def _has_digest(path: str, digest: str) -> bool:
    try:
        return file_sha256(path) == digest
    except OSError:
        return False


def _discard(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


__all__ = [
    "FILE_HASH_CHUNK_SIZE",
    "file_sha256",
    "read_snapshot",
    "serialize_snapshot",
    "temp_path_for",
    "write_snapshot",
]
