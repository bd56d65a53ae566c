"""Data models for component-publisher"""

from .component import ComponentInfo, PackageArtifact
from .config import Config
from .request import Credentials, PublishRequest
from .result import EndpointPublishResult, PublishResult

__all__ = [
    # Request models
    "PublishRequest",
    "Credentials",

    # Component models
    "ComponentInfo",
    "PackageArtifact",

    # Result models
    "EndpointPublishResult",
    "PublishResult",

    # Config models
    "Config",
]
