"""Unit tests for cache key and default cache path derivation."""

from __future__ import annotations

import os
import tempfile

import pytest

from phlag_client.application.cache import CacheKey, FlagCacheStore, default_cache_path
from phlag_client.testing.fakes import FakeFlagTransport


class TestCacheKey:
    def test_deterministic(self) -> None:
        assert CacheKey.for_environment("http://flags", "prod") == CacheKey.for_environment(
            "http://flags", "prod"
        )

    def test_environment_changes_key(self) -> None:
        assert CacheKey.for_environment("http://flags", "prod") != CacheKey.for_environment(
            "http://flags", "staging"
        )

    def test_server_changes_key(self) -> None:
        assert CacheKey.for_environment("http://a", "prod") != CacheKey.for_environment(
            "http://b", "prod"
        )

    def test_trailing_slash_ignored(self) -> None:
        assert CacheKey.for_environment("http://flags/", "prod") == CacheKey.for_environment(
            "http://flags", "prod"
        )

    def test_separator_prevents_ambiguous_concatenation(self) -> None:
        assert CacheKey.for_environment("http://flags/a", "b") != CacheKey.for_environment(
            "http://flags/", "ab"
        )


class TestDefaultCachePath:
    def test_lives_in_system_temp_dir(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
        path = default_cache_path("http://flags", "prod")
        assert os.path.dirname(path) == str(tmp_path)

    def test_file_name_shape(self) -> None:
        name = os.path.basename(default_cache_path("http://flags", "prod"))
        assert name.startswith("flagcache_")
        assert name.endswith(".json")
        assert CacheKey.for_environment("http://flags", "prod") in name

    def test_explicit_directory(self, tmp_path) -> None:
        path = default_cache_path("http://flags", "prod", directory=str(tmp_path))
        assert os.path.dirname(path) == str(tmp_path)

    def test_two_stores_share_default_path(self) -> None:
        transport = FakeFlagTransport()
        first = FlagCacheStore(transport, "prod", default_cache_path("http://flags", "prod"))
        second = FlagCacheStore(transport, "prod", default_cache_path("http://flags", "prod"))
        assert first.path == second.path
        assert isinstance(first.path, str)
