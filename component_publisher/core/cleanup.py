"""Artifact cleanup"""

import logging
from pathlib import Path

from ..api.exceptions import CleanupError
from ..utils.async_utils import run_blocking
from ..utils.file_utils import remove_file

logger = logging.getLogger(__name__)


class Cleanup:
    """Best-effort removal of the compressed artifact"""

    async def remove(self, path: Path) -> None:
        """
        Remove artifact file

        Args:
            path: File to remove; a missing file is not an error

        Raises:
            CleanupError: If the file exists but cannot be removed
        """
        try:
            removed = await run_blocking(remove_file, Path(path))
        except OSError as e:
            raise CleanupError(str(path), e) from e

        if removed:
            logger.debug(f"Removed {path}")
