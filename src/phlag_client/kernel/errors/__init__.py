"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    PhlagError
    ├── NotFoundError            (lookup.py)
    │   ├── FlagNotFoundError
    │   └── EnvironmentNotFoundError
    ├── AuthenticationError      (transport.py)
    ├── NetworkError
    ├── ServiceError
    └── ConfigError              (phlag_client.config.validation)
"""

from phlag_client.kernel.errors.base import PhlagError
from phlag_client.kernel.errors.lookup import (
    EnvironmentNotFoundError,
    FlagNotFoundError,
    NotFoundError,
)
from phlag_client.kernel.errors.transport import (
    AuthenticationError,
    NetworkError,
    ServiceError,
)

__all__ = [
    "AuthenticationError",
    "EnvironmentNotFoundError",
    "FlagNotFoundError",
    "NetworkError",
    "NotFoundError",
    "PhlagError",
    "ServiceError",
]
