"""Classification of registry upload failures"""

from typing import Callable, Dict

from ..api.exceptions import (
    CliVersionMismatchError,
    NetworkOrRegistryError,
    PublishError,
    RegistryRejectionError,
    RuntimeVersionMismatchError,
)
from ..constants import CODE_CLI_VERSION_NOT_VALID, CODE_NODE_VERSION_NOT_VALID

# Registry rejection code -> error factory(suggested_version, route)
REJECTION_CLASSIFIERS: Dict[str, Callable[[str, str], PublishError]] = {
    CODE_CLI_VERSION_NOT_VALID: CliVersionMismatchError,
    CODE_NODE_VERSION_NOT_VALID: RuntimeVersionMismatchError,
}


def classify_upload_error(error: Exception, route: str) -> PublishError:
    """
    Map an upload failure to the publish error taxonomy

    Unauthorized responses are not handled here; they drive the
    credential retry in RegistryPublisher.

    Args:
        error: Exception raised by the transport
        route: Upload route that failed

    Returns:
        Classified publish error
    """
    if isinstance(error, PublishError):
        return error

    if isinstance(error, RegistryRejectionError):
        factory = REJECTION_CLASSIFIERS.get(error.code)
        suggested_version = error.details.get('suggestedVersion')
        if factory and suggested_version:
            return factory(str(suggested_version), route)

    return NetworkOrRegistryError(error, route)
