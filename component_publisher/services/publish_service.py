# component_publisher/services/publish_service.py
"""Publish service implementation"""

import logging
import time
from typing import Optional

from .credential_broker import CredentialBroker
from .registry_publisher import RegistryPublisher, build_route
from ..api.exceptions import (
    CleanupError,
    PackagingError,
    PublishToolError,
    RegistryResolutionError,
)
from ..constants import MSG_COMPRESSING, MSG_PACKAGING
from ..core import Cleanup, Compressor, Packager, PathResolver
from ..models import PackageArtifact, PublishRequest, PublishResult


class PublishService:
    """Packages a component and publishes it to every configured registry

    Registries are attempted in configured order and the run stops at the
    first failure. The compressed artifact is removed once at the end of
    every run; the package directory is left in place.
    """

    def __init__(self,
                 registry_resolver,
                 registry_publisher: RegistryPublisher,
                 packager: Optional[Packager] = None,
                 compressor: Optional[Compressor] = None,
                 cleanup: Optional[Cleanup] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize publish service

        Args:
            registry_resolver: Object with ``async resolve() -> List[str]``
            registry_publisher: Per-endpoint publisher
            packager: Component packager
            compressor: Package compressor
            cleanup: Artifact cleanup
            logger: Logger for progress messages
        """
        self.registry_resolver = registry_resolver
        self.registry_publisher = registry_publisher
        self.packager = packager or Packager()
        self.compressor = compressor or Compressor()
        self.cleanup = cleanup or Cleanup()
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def create(cls,
               registry_resolver,
               transport,
               credential_broker: CredentialBroker,
               logger: Optional[logging.Logger] = None) -> 'PublishService':
        """Wire a service from a transport and a credential broker"""
        return cls(
            registry_resolver=registry_resolver,
            registry_publisher=RegistryPublisher(transport, credential_broker, logger),
            logger=logger
        )

    async def publish(self, request: PublishRequest) -> PublishResult:
        """
        Publish workflow

        Args:
            request: Publish request

        Returns:
            PublishResult: the first failure, or the cleanup failure when
            everything else succeeded
        """
        start_time = time.time()
        paths = PathResolver(request.component_path)
        result = PublishResult(success=False)

        try:
            error = await self._run(request, paths, result)
        finally:
            cleanup_error = await self._remove_archive(paths)

        if error is None and cleanup_error is not None:
            self.logger.error(str(cleanup_error))
            error = cleanup_error
        elif cleanup_error is not None:
            self.logger.debug(f"Cleanup also failed: {cleanup_error}")

        result.error = error
        result.cleanup_error = cleanup_error
        result.success = error is None
        result.duration = time.time() - start_time
        return result

    async def _run(self,
                   request: PublishRequest,
                   paths: PathResolver,
                   result: PublishResult) -> Optional[PublishToolError]:
        """Resolve, package, compress and upload; return the first error"""
        # 1. Resolve registries
        try:
            registries = await self.registry_resolver.resolve()
        except RegistryResolutionError as e:
            self.logger.error(str(e))
            return e
        except Exception as e:
            error = RegistryResolutionError(f"Failed to resolve registries: {e}")
            self.logger.error(str(error))
            return error

        result.registries = list(registries)

        # 2-3. Package and compress
        try:
            artifact = await self._package_and_compress(paths)
        except Exception as e:
            error = PackagingError(e)
            self.logger.error(str(error))
            return error

        result.artifact = artifact

        # 4. Upload in order, stop at the first failure
        credentials = await self.registry_publisher.resolve_known_credentials(request.credentials)

        for registry in registries:
            route = build_route(registry, artifact.name, artifact.version)
            endpoint_result = await self.registry_publisher.publish_to_endpoint(
                route,
                artifact.archive_path,
                credentials,
                registry=registry
            )
            result.endpoints.append(endpoint_result)

            if not endpoint_result.success:
                return endpoint_result.error

        return None

    async def _package_and_compress(self, paths: PathResolver) -> PackageArtifact:
        """Run packager then compressor"""
        package_dir = paths.get_package_dir()
        archive_path = paths.get_archive_path()

        self.logger.info(MSG_PACKAGING.format(path=package_dir))
        component = await self.packager.package(paths.component_path)

        self.logger.info(MSG_COMPRESSING.format(path=archive_path))
        await self.compressor.compress(package_dir, archive_path)

        return PackageArtifact(
            package_dir=package_dir,
            archive_path=archive_path,
            component=component
        )

    async def _remove_archive(self, paths: PathResolver) -> Optional[PublishToolError]:
        """Remove the compressed artifact, returning the failure if any"""
        try:
            await self.cleanup.remove(paths.get_archive_path())
        except CleanupError as e:
            return e
        except Exception as e:
            return CleanupError(str(paths.get_archive_path()), e)
        return None
