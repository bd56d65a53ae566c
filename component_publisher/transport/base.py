# component_publisher/transport/base.py
"""Registry transport abstract base class"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.request import Credentials


class RegistryTransport(ABC):
    """Abstract base class for registry upload transports

    ``upload`` returns on success and otherwise raises one of:

    - UnauthorizedError: the registry requires (other) credentials
    - RegistryRejectionError: structured error with ``code`` and ``details``
    - any other exception: opaque failure
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize transport

        Args:
            config: Transport-specific configuration
        """
        self.config = config or {}
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize transport (e.g., open connection pools)"""
        if not self._initialized:
            await self._do_initialize()
            self._initialized = True

    async def _do_initialize(self) -> None:
        """Actual initialization logic to be implemented by subclasses"""
        pass

    @abstractmethod
    async def upload(self,
                     route: str,
                     artifact_path: Path,
                     credentials: Optional[Credentials] = None) -> None:
        """
        Upload artifact to a registry route

        Args:
            route: Full upload URL ({registry}/{name}/{version})
            artifact_path: Compressed artifact
            credentials: Credentials to authenticate with, if known
        """
        pass

    async def close(self) -> None:
        """Close transport connections"""
        if self._initialized:
            await self._do_close()
            self._initialized = False

    async def _do_close(self) -> None:
        """Actual cleanup logic to be implemented by subclasses"""
        pass

    async def __aenter__(self):
        """Async context manager entry"""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
