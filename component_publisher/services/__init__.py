# component_publisher/services/__init__.py
"""Business logic services for component-publisher"""

from .config_service import ConfigService
from .credential_broker import CredentialBroker, Prompter
from .publish_service import PublishService
from .registry_publisher import RegistryPublisher, build_route
from .registry_resolver import RegistryResolver, StaticRegistryResolver

__all__ = [
    "ConfigService",
    "CredentialBroker",
    "Prompter",
    "PublishService",
    "RegistryPublisher",
    "RegistryResolver",
    "StaticRegistryResolver",
    "build_route",
]
