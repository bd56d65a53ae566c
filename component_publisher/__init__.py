"""Component Publisher - package a component and publish it to registries.

This tool packages a local component, uploads the compressed artifact to
every configured registry in order, and stops at the first failure.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Exceptions
from .api.exceptions import (
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
)

# Core API
from .api.publisher import Publisher, publish

# Data models
from .models import (
    Credentials,
    PublishRequest,
    PublishResult,
    EndpointPublishResult,
    ComponentInfo,
    PackageArtifact,
)

# Services
from .services import PublishService, RegistryPublisher, CredentialBroker, Prompter

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Publisher",
    "PublishService",
    "RegistryPublisher",
    "CredentialBroker",
    "Prompter",

    # Core API functions
    "publish",

    # Data models
    "Credentials",
    "PublishRequest",
    "PublishResult",
    "EndpointPublishResult",
    "ComponentInfo",
    "PackageArtifact",

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
]
