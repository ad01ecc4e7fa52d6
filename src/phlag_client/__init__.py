"""
phlag_client – client library for the Phlag feature-flag service.

Import path convention::

    from phlag_client import PhlagClient
    from phlag_client.kernel.errors import FlagNotFoundError
    from phlag_client.config.settings import PhlagSettings
"""

from phlag_client.application.feature_flags import PhlagClient
from phlag_client.kernel.errors import (
    AuthenticationError,
    EnvironmentNotFoundError,
    FlagNotFoundError,
    NetworkError,
    PhlagError,
    ServiceError,
)

__version__ = "0.1.0"
__all__ = [
    "AuthenticationError",
    "EnvironmentNotFoundError",
    "FlagNotFoundError",
    "NetworkError",
    "PhlagClient",
    "PhlagError",
    "ServiceError",
    "__version__",
]
