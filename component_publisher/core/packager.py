# component_publisher/core/packager.py
"""Component packager"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from packaging.version import InvalidVersion, Version

from .path_resolver import PathResolver
from ..constants import (
    COMPONENT_NAME_PATTERN,
    PACKAGE_EXCLUDE_PATTERNS,
    VERSION_PATTERN,
)
from ..models.component import ComponentInfo
from ..utils.async_utils import run_blocking
from ..utils.file_utils import copy_tree, read_json, write_json

logger = logging.getLogger(__name__)


class Packager:
    """Turns a component source directory into a publish-ready package"""

    async def package(self, component_path: Path) -> ComponentInfo:
        """
        Package a component

        Args:
            component_path: Component source directory

        Returns:
            Name and version read back from the packaged manifest

        Raises:
            FileNotFoundError: If the directory or its manifest is missing
            ValueError: If the manifest is malformed
        """
        paths = PathResolver(component_path)

        if not paths.component_path.is_dir():
            raise FileNotFoundError(f"Component directory not found: {paths.component_path}")

        manifest_path = paths.get_manifest_path()
        if not manifest_path.exists():
            raise FileNotFoundError(f"Component manifest not found: {manifest_path}")

        manifest = await run_blocking(read_json, manifest_path)
        self._validate_manifest(manifest, manifest_path)

        package_dir = paths.get_package_dir()
        file_count = await run_blocking(
            copy_tree,
            paths.component_path,
            package_dir,
            PACKAGE_EXCLUDE_PATTERNS
        )
        logger.debug(f"Copied {file_count} files to {package_dir}")

        packaged = dict(manifest)
        packaged['packaged'] = {
            'date': datetime.now(timezone.utc).isoformat(),
            'files': file_count,
        }
        packaged_manifest_path = paths.get_packaged_manifest_path()
        await run_blocking(write_json, packaged_manifest_path, packaged)

        # Metadata always comes from the packaged copy
        return ComponentInfo.from_dict(await run_blocking(read_json, packaged_manifest_path))

    def _validate_manifest(self, manifest: Dict[str, Any], manifest_path: Path) -> None:
        """Validate component name and version"""
        name = manifest.get('name')
        if not name or not isinstance(name, str):
            raise ValueError(f"Missing component name in {manifest_path}")
        if not COMPONENT_NAME_PATTERN.match(name):
            raise ValueError(f"Invalid component name '{name}' in {manifest_path}")

        version = manifest.get('version')
        if not version or not isinstance(version, str):
            raise ValueError(f"Missing component version in {manifest_path}")
        if not self._is_valid_version(version):
            raise ValueError(f"Invalid component version '{version}' in {manifest_path}")

    @staticmethod
    def _is_valid_version(version: str) -> bool:
        if VERSION_PATTERN.match(version):
            return True
        try:
            Version(version)
            return True
        except InvalidVersion:
            return False
