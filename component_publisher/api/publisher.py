# component_publisher/api/publisher.py
"""Publisher API for publishing operations"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml

from ..models import PublishRequest, PublishResult
from ..services import (
    ConfigService,
    CredentialBroker,
    Prompter,
    PublishService,
    RegistryResolver,
    StaticRegistryResolver,
)
from ..transport import HttpRegistryTransport, RegistryTransport
from ..utils.async_utils import run_async


class Publisher:
    """Publisher class for publishing operations"""

    def __init__(self,
                 prompter: Prompter,
                 registries: Optional[List[str]] = None,
                 config_path: Optional[Union[str, Path]] = None,
                 timeout: Optional[float] = None,
                 transport: Optional[RegistryTransport] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize publisher

        Args:
            prompter: Terminal input used when a registry asks for credentials
            registries: Fixed registry list (overrides the config file)
            config_path: Configuration file to read registries from
            timeout: Upload timeout in seconds (overrides the config file)
            transport: Registry transport (defaults to HTTP)
            logger: Logger for progress messages
        """
        self.config_service = ConfigService(config_path)
        self.logger = logger

        if registries is not None:
            self.registry_resolver = StaticRegistryResolver(registries)
        else:
            self.registry_resolver = RegistryResolver(self.config_service)

        if transport is None:
            if timeout is None:
                timeout = self._configured_timeout()
            transport = HttpRegistryTransport({'timeout': timeout})

        self.transport = transport
        self.credential_broker = CredentialBroker(prompter, logger)

    def _configured_timeout(self) -> Optional[float]:
        """Timeout from the config file, None if absent or unreadable

        An unreadable file is reported by the registry resolver during the run.
        """
        if not self.config_service.exists:
            return None
        try:
            return self.config_service.config.timeout
        except (OSError, yaml.YAMLError, ValueError, TypeError):
            return None

    def publish(self,
                component_path: Union[str, Path],
                username: Optional[str] = None,
                password: Optional[str] = None) -> PublishResult:
        """
        Publish component

        Args:
            component_path: Component source directory
            username: Registry username (optional)
            password: Registry password (optional)

        Returns:
            PublishResult: Publishing result
        """
        request = PublishRequest.create(component_path, username, password)
        return run_async(self.publish_async(request))

    async def publish_async(self, request: PublishRequest) -> PublishResult:
        """Async publish implementation"""
        async with self.transport:
            service = PublishService.create(
                self.registry_resolver,
                self.transport,
                self.credential_broker,
                self.logger
            )
            return await service.publish(request)


# Convenience function
def publish(component_path: Union[str, Path], prompter: Prompter, **options) -> PublishResult:
    """
    Publish a component (convenience function)

    Args:
        component_path: Component source directory
        prompter: Terminal input implementation
        **options: Options
            - username: Registry username
            - password: Registry password
            - registries: Fixed registry list
            - config_path: Configuration file
            - timeout: Upload timeout in seconds

    Returns:
        PublishResult: Publishing result
    """
    username = options.pop('username', None)
    password = options.pop('password', None)

    publisher = Publisher(prompter, **options)
    return publisher.publish(component_path, username=username, password=password)
