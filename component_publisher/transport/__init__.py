# component_publisher/transport/__init__.py
"""Registry transports"""

from .base import RegistryTransport
from .http import HttpRegistryTransport

__all__ = [
    "RegistryTransport",
    "HttpRegistryTransport",
]
