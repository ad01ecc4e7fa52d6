"""Unit tests for config settings and loaders."""

from __future__ import annotations

import dataclasses

import pytest

from phlag_client.config.settings import EnvSettingsLoader, PhlagSettings
from phlag_client.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_REQUIRED = {
    "PHLAG_BASE_URL": "http://flags.test",
    "PHLAG_API_KEY": "k" * 64,
    "PHLAG_ENVIRONMENT": "production",
}


# ---------------------------------------------------------------------------
# PhlagSettings
# ---------------------------------------------------------------------------


class TestPhlagSettings:
    def test_defaults(self) -> None:
        s = PhlagSettings(base_url="http://x", api_key="k", environment="prod")
        assert s.cache is False
        assert s.cache_file is None
        assert s.cache_ttl == 300
        assert s.timeout == 10.0

    def test_prefix_is_class_level_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(PhlagSettings)]
        assert "_prefix" not in names
        assert names[:3] == ["base_url", "api_key", "environment"]
        assert PhlagSettings._prefix == "PHLAG"

    def test_required_fields_accepted_positionally(self) -> None:
        s = PhlagSettings("http://x", "k", "prod")
        assert (s.base_url, s.api_key, s.environment) == ("http://x", "k", "prod")

    @pytest.mark.parametrize("field", ["base_url", "api_key", "environment"])
    def test_blank_required_field_rejected(self, field: str) -> None:
        values = {"base_url": "http://x", "api_key": "k", "environment": "prod", field: "  "}
        with pytest.raises(InvalidSettingValueError) as exc_info:
            PhlagSettings(**values)
        assert exc_info.value.setting_name == field

    def test_non_positive_ttl_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PhlagSettings(base_url="http://x", api_key="k", environment="p", cache_ttl=0)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PhlagSettings(base_url="http://x", api_key="k", environment="p", timeout=-1.0)

    def test_blank_cache_file_normalised_to_none(self) -> None:
        s = PhlagSettings(base_url="http://x", api_key="k", environment="p", cache_file="")
        assert s.cache_file is None


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_required_fields(self) -> None:
        s = EnvSettingsLoader(_REQUIRED).load(PhlagSettings)
        assert s.base_url == "http://flags.test"
        assert s.environment == "production"
        assert s.cache is False

    def test_coerces_types(self) -> None:
        env = dict(_REQUIRED)
        env.update(
            {
                "PHLAG_CACHE": "yes",
                "PHLAG_CACHE_TTL": "120",
                "PHLAG_TIMEOUT": "2.5",
                "PHLAG_CACHE_FILE": "/tmp/flags.json",
            }
        )
        s = EnvSettingsLoader(env).load(PhlagSettings)
        assert s.cache is True
        assert s.cache_ttl == 120
        assert s.timeout == 2.5
        assert s.cache_file == "/tmp/flags.json"

    def test_bool_false_values(self) -> None:
        for falsy in ("false", "0", "no", "off"):
            env = dict(_REQUIRED, PHLAG_CACHE=falsy)
            assert EnvSettingsLoader(env).load(PhlagSettings).cache is False

    def test_missing_required_raises(self) -> None:
        env = dict(_REQUIRED)
        del env["PHLAG_API_KEY"]
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(env).load(PhlagSettings)
        assert exc_info.value.setting_name == "PHLAG_API_KEY"

    def test_uncoercible_value_raises(self) -> None:
        env = dict(_REQUIRED, PHLAG_CACHE_TTL="five minutes")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(env).load(PhlagSettings)
        assert exc_info.value.setting_name == "PHLAG_CACHE_TTL"

    def test_validation_error_propagates(self) -> None:
        env = dict(_REQUIRED, PHLAG_CACHE_TTL="-5")
        with pytest.raises(ConfigError):
            EnvSettingsLoader(env).load(PhlagSettings)

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key, value in _REQUIRED.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setenv("PHLAG_CACHE", "true")
        s = EnvSettingsLoader().load(PhlagSettings)
        assert s.cache is True
