# component_publisher/services/registry_resolver.py
"""Registry endpoint resolution"""

from typing import List, Sequence

import yaml

from .config_service import ConfigService
from ..api.exceptions import RegistryResolutionError
from ..constants import ERR_NO_REGISTRIES_CONFIGURED
from ..utils.async_utils import run_blocking


class RegistryResolver:
    """Resolves the ordered registry list from the configuration file"""

    def __init__(self, config_service: ConfigService):
        self.config_service = config_service

    async def resolve(self) -> List[str]:
        """
        Read registries once for a publish run

        Returns:
            Registry base URLs in upload order (may be empty)

        Raises:
            RegistryResolutionError: If no configuration exists or it cannot be read
        """
        path = self.config_service.config_path
        if not path.exists():
            raise RegistryResolutionError(ERR_NO_REGISTRIES_CONFIGURED.format(path=path))

        try:
            config = await run_blocking(self.config_service.load_config)
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            raise RegistryResolutionError(
                f"Failed to read registry configuration {path}: {e}"
            ) from e

        return list(config.registries)


class StaticRegistryResolver:
    """Resolver over a fixed registry list"""

    def __init__(self, registries: Sequence[str]):
        self.registries = list(registries)

    async def resolve(self) -> List[str]:
        return list(self.registries)
