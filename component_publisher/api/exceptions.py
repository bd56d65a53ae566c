"""Exception definitions for component-publisher"""

from typing import Any, Dict, Optional

from ..constants import (
    ErrorCode,
    ERR_PUBLISHING_FAIL,
    ERR_PACKAGE_CREATION_FAIL,
    ERR_INVALID_CREDENTIALS,
    ERR_CLI_VERSION_NEEDS_UPGRADE,
    ERR_RUNTIME_VERSION_NEEDS_UPGRADE,
    MSG_CLEANUP_FAILED,
    UPGRADE_COMMAND,
)


class PublishToolError(Exception):
    """Base exception for component-publisher"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class RegistryResolutionError(PublishToolError):
    """Registry endpoints could not be resolved"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.REGISTRY_RESOLUTION_FAILED)


class PackagingError(PublishToolError):
    """Packaging or compression of the component failed"""

    def __init__(self, cause: Any):
        super().__init__(
            ERR_PACKAGE_CREATION_FAIL.format(details=cause),
            ErrorCode.PACKAGING_FAILED
        )
        self.cause = cause


class PublishError(PublishToolError):
    """Base class for failures while uploading to one registry"""

    def __init__(self, details: str, error_code: str, route: Optional[str] = None):
        super().__init__(ERR_PUBLISHING_FAIL.format(details=details), error_code)
        self.details = details
        self.route = route


class InvalidCredentialsError(PublishError):
    """Registry refused credentials that were already known"""

    def __init__(self, route: str):
        super().__init__(
            ERR_INVALID_CREDENTIALS.format(route=route),
            ErrorCode.INVALID_CREDENTIALS,
            route
        )


class CliVersionMismatchError(PublishError):
    """Registry requires a different CLI version"""

    def __init__(self, suggested_version: str, route: Optional[str] = None):
        self.upgrade_command = UPGRADE_COMMAND.format(version=suggested_version)
        super().__init__(
            ERR_CLI_VERSION_NEEDS_UPGRADE.format(command=self.upgrade_command),
            ErrorCode.CLI_VERSION_MISMATCH,
            route
        )
        self.suggested_version = suggested_version


class RuntimeVersionMismatchError(PublishError):
    """Registry requires a different runtime version"""

    def __init__(self, suggested_version: str, route: Optional[str] = None):
        super().__init__(
            ERR_RUNTIME_VERSION_NEEDS_UPGRADE.format(version=suggested_version),
            ErrorCode.RUNTIME_VERSION_MISMATCH,
            route
        )
        self.suggested_version = suggested_version


class NetworkOrRegistryError(PublishError):
    """Any other upload failure"""

    def __init__(self, cause: Any, route: Optional[str] = None):
        super().__init__(str(cause), ErrorCode.NETWORK_OR_REGISTRY_ERROR, route)
        self.cause = cause


class CleanupError(PublishToolError):
    """Removing the compressed artifact failed"""

    def __init__(self, path: str, cause: Any):
        super().__init__(
            MSG_CLEANUP_FAILED.format(path=path, error=cause),
            ErrorCode.CLEANUP_FAILED
        )
        self.path = path
        self.cause = cause


class ConfigError(PublishToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


# Conditions reported by registry transports. These are not user-facing;
# RegistryPublisher classifies them into the errors above.

class TransportError(Exception):
    """Base class for transport-level upload outcomes"""
    pass


class UnauthorizedError(TransportError):
    """Registry answered 401 Unauthorized"""

    def __init__(self, route: str):
        super().__init__(f"Unauthorized: {route}")
        self.route = route


class RegistryRejectionError(TransportError):
    """Registry answered with a structured error body"""

    def __init__(self,
                 code: str,
                 message: str = "",
                 details: Optional[Dict[str, Any]] = None,
                 status_code: Optional[int] = None):
        super().__init__(message or code)
        self.code = code
        self.details = details or {}
        self.status_code = status_code


class RegistryTransportError(TransportError):
    """Upload failed without a structured registry answer"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
