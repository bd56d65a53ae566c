"""API layer for component-publisher"""

from .exceptions import (
    PublishToolError,
    RegistryResolutionError,
    PackagingError,
    PublishError,
    InvalidCredentialsError,
    CliVersionMismatchError,
    RuntimeVersionMismatchError,
    NetworkOrRegistryError,
    CleanupError,
    ConfigError,
    TransportError,
    UnauthorizedError,
    RegistryRejectionError,
    RegistryTransportError,
)
from .publisher import Publisher, publish

__all__ = [
    # Main classes
    "Publisher",

    # Convenience functions
    "publish",

    # Exceptions
    "PublishToolError",
    "RegistryResolutionError",
    "PackagingError",
    "PublishError",
    "InvalidCredentialsError",
    "CliVersionMismatchError",
    "RuntimeVersionMismatchError",
    "NetworkOrRegistryError",
    "CleanupError",
    "ConfigError",

    # Transport conditions
    "TransportError",
    "UnauthorizedError",
    "RegistryRejectionError",
    "RegistryTransportError",
]
