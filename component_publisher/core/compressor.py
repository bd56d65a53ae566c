# component_publisher/core/compressor.py
"""Package compressor"""

import logging
import tarfile
from pathlib import Path

from ..constants import PACKAGE_DIR_NAME
from ..utils.async_utils import run_blocking
from ..utils.file_utils import format_size

logger = logging.getLogger(__name__)


class Compressor:
    """Archives a package directory into a single gzip tarball"""

    def __init__(self, compression_level: int = 6):
        """
        Initialize compressor

        Args:
            compression_level: gzip compression level (1-9)
        """
        self.compression_level = compression_level

    async def compress(self, package_dir: Path, dest_path: Path) -> Path:
        """
        Compress package directory

        Args:
            package_dir: Directory produced by the packager
            dest_path: Archive file to create

        Returns:
            Path of the created archive

        Raises:
            FileNotFoundError: If the package directory does not exist
            OSError: On filesystem errors
        """
        package_dir = Path(package_dir)
        dest_path = Path(dest_path)

        if not package_dir.is_dir():
            raise FileNotFoundError(f"Package directory not found: {package_dir}")

        await run_blocking(self._write_archive, package_dir, dest_path)
        logger.debug(f"Created archive {dest_path} ({format_size(dest_path.stat().st_size)})")
        return dest_path

    def _write_archive(self, package_dir: Path, dest_path: Path) -> None:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        with tarfile.open(dest_path, "w:gz", compresslevel=self.compression_level) as tar:
            tar.add(package_dir, arcname=PACKAGE_DIR_NAME)
