"""Application feature flags – transport port, value types and the client."""
from phlag_client.application.feature_flags.port import (
    FlagSnapshot,
    FlagTransport,
    FlagValue,
    is_flag_snapshot,
    is_flag_value,
)
from phlag_client.application.feature_flags.client import PhlagClient

__all__ = [
    "FlagSnapshot",
    "FlagTransport",
    "FlagValue",
    "PhlagClient",
    "is_flag_snapshot",
    "is_flag_value",
]
