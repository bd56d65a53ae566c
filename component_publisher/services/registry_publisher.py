# component_publisher/services/registry_publisher.py
"""Upload of an artifact to a single registry endpoint"""

import logging
from pathlib import Path
from typing import Optional

from .credential_broker import CredentialBroker
from ..api.exceptions import (
    InvalidCredentialsError,
    NetworkOrRegistryError,
    UnauthorizedError,
)
from ..constants import (
    MAX_CREDENTIAL_RETRIES,
    MSG_CREDENTIALS_REQUIRED,
    MSG_PUBLISHED,
    MSG_PUBLISHING,
)
from ..core.error_classifier import classify_upload_error
from ..models.request import Credentials
from ..models.result import EndpointPublishResult
from ..transport.base import RegistryTransport


def build_route(registry: str, name: str, version: str) -> str:
    """
    Build upload route for a component

    Args:
        registry: Registry base URL, with or without one trailing slash
        name: Component name
        version: Component version

    Returns:
        '{registry}/{name}/{version}'
    """
    base = registry[:-1] if registry.endswith('/') else registry
    return f"{base}/{name}/{version}"


class RegistryPublisher:
    """Publishes to one registry with a single credential retry"""

    def __init__(self,
                 transport: RegistryTransport,
                 credential_broker: CredentialBroker,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize registry publisher

        Args:
            transport: Registry transport
            credential_broker: Used after an unauthorized response without credentials
            logger: Logger for progress messages
        """
        self.transport = transport
        self.credential_broker = credential_broker
        self.logger = logger or logging.getLogger(__name__)

    async def resolve_known_credentials(self,
                                        credentials: Optional[Credentials]) -> Optional[Credentials]:
        """
        Pass credentials supplied with the request through the broker

        Args:
            credentials: Request credentials, None unless both parts were given

        Returns:
            Credentials to send on first attempts, or None to stay anonymous
        """
        if credentials is None:
            return None
        return await self.credential_broker.resolve(credentials)

    async def publish_to_endpoint(self,
                                  route: str,
                                  artifact_path: Path,
                                  credentials: Optional[Credentials] = None,
                                  registry: Optional[str] = None) -> EndpointPublishResult:
        """
        Upload artifact to one endpoint

        The first attempt uses whatever credentials are known. An
        unauthorized answer without credentials prompts once and retries;
        with credentials it is final.

        Args:
            route: Upload route
            artifact_path: Compressed artifact
            credentials: Known credentials, if any
            registry: Registry base URL, for reporting

        Returns:
            EndpointPublishResult
        """
        result = EndpointPublishResult(registry=registry or route, route=route, success=False)
        credential_retries = 0

        while True:
            result.attempts += 1
            self.logger.info(MSG_PUBLISHING.format(route=route))

            try:
                await self.transport.upload(route, artifact_path, credentials)

            except UnauthorizedError:
                if credentials is not None or credential_retries >= MAX_CREDENTIAL_RETRIES:
                    return self._fail(result, InvalidCredentialsError(route))

                self.logger.warning(MSG_CREDENTIALS_REQUIRED)
                try:
                    credentials = await self.credential_broker.resolve()
                except Exception as e:
                    return self._fail(
                        result,
                        NetworkOrRegistryError(f"Could not read credentials: {e}", route)
                    )

                credential_retries += 1
                result.prompted = True
                continue

            except Exception as e:
                return self._fail(result, classify_upload_error(e, route))

            self.logger.info(MSG_PUBLISHED.format(route=route))
            result.success = True
            return result

    def _fail(self, result: EndpointPublishResult, error) -> EndpointPublishResult:
        self.logger.error(str(error))
        result.error = error
        return result
