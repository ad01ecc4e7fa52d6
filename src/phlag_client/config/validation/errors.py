"""Config validation errors.

Both setting errors put the offending setting into ``detail`` so that
``str(err)`` and ``err.to_dict()`` name it without parsing the message.
An API key value is never echoed back.
"""
from __future__ import annotations

from phlag_client.kernel.errors import PhlagError

_SECRET_SETTINGS = frozenset({"api_key", "phlag_api_key"})


class ConfigError(PhlagError):
    """Raised when client settings are invalid or could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required ``PHLAG_*`` variable or setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used by the client."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        shown = "***" if setting_name.lower() in _SECRET_SETTINGS else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
