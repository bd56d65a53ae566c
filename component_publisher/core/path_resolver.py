"""Path resolution for a component being published"""

from pathlib import Path
from typing import Union

from ..constants import (
    ARCHIVE_FILE_NAME,
    COMPONENT_MANIFEST_FILE,
    PACKAGE_DIR_NAME,
)


class PathResolver:
    """Resolves the conventional paths under a component directory"""

    def __init__(self, component_path: Union[str, Path]):
        """Initialize path resolver

        Args:
            component_path: Component source directory
        """
        self.component_path = Path(component_path).resolve()

    def get_manifest_path(self) -> Path:
        """Get the component's own manifest path

        Returns:
            Path to package.json in the component directory
        """
        return self.component_path / COMPONENT_MANIFEST_FILE

    def get_package_dir(self) -> Path:
        """Get package directory path

        Returns:
            Path to the _package directory
        """
        return self.component_path / PACKAGE_DIR_NAME

    def get_packaged_manifest_path(self) -> Path:
        """Get manifest path inside the package directory"""
        return self.get_package_dir() / COMPONENT_MANIFEST_FILE

    def get_archive_path(self) -> Path:
        """Get compressed artifact path

        Returns:
            Path to package.tar.gz in the component directory
        """
        return self.component_path / ARCHIVE_FILE_NAME
