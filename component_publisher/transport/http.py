# component_publisher/transport/http.py
"""HTTP registry transport"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import aiofiles
import httpx

from .base import RegistryTransport
from ..__version__ import __version__
from ..api.exceptions import (
    RegistryRejectionError,
    RegistryTransportError,
    UnauthorizedError,
)
from ..constants import (
    ARCHIVE_CONTENT_TYPE,
    ARCHIVE_FORM_FIELD,
    DEFAULT_TIMEOUT,
    USER_AGENT_TEMPLATE,
)
from ..models.request import Credentials

logger = logging.getLogger(__name__)


class HttpRegistryTransport(RegistryTransport):
    """Uploads artifacts with a multipart HTTP PUT"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize HTTP transport

        Args:
            config: Configuration including:
                - timeout: Request timeout in seconds (default 60)
                - headers: Extra request headers
        """
        super().__init__(config)
        self.timeout = float(self.config.get('timeout') or DEFAULT_TIMEOUT)
        self.headers = {
            'User-Agent': USER_AGENT_TEMPLATE.format(version=__version__),
            **self.config.get('headers', {})
        }
        self._client: Optional[httpx.AsyncClient] = None

    async def _do_initialize(self) -> None:
        """Create HTTP client"""
        self._client = httpx.AsyncClient(timeout=self.timeout, headers=self.headers)

    async def upload(self,
                     route: str,
                     artifact_path: Path,
                     credentials: Optional[Credentials] = None) -> None:
        """Upload artifact to registry route"""
        await self.initialize()

        artifact_path = Path(artifact_path)
        async with aiofiles.open(artifact_path, 'rb') as f:
            content = await f.read()

        files = {ARCHIVE_FORM_FIELD: (artifact_path.name, content, ARCHIVE_CONTENT_TYPE)}
        auth = httpx.BasicAuth(*credentials.as_auth()) if credentials else None

        logger.debug(f"PUT {route} ({len(content)} bytes, auth={'yes' if auth else 'no'})")

        try:
            response = await self._client.put(route, files=files, auth=auth)
        except httpx.TimeoutException as e:
            raise RegistryTransportError(
                f"Request to {route} timed out after {self.timeout:g}s"
            ) from e
        except httpx.HTTPError as e:
            raise RegistryTransportError(f"Request to {route} failed: {e}") from e

        if response.status_code == 401:
            raise UnauthorizedError(route)

        if response.is_success:
            return

        raise self._parse_error(response)

    @staticmethod
    def _parse_error(response: httpx.Response) -> Exception:
        """Build transport error from a failed response"""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get('code'):
            details = body.get('details')
            return RegistryRejectionError(
                code=str(body['code']),
                message=str(body.get('error') or body.get('message') or body['code']),
                details=details if isinstance(details, dict) else {},
                status_code=response.status_code
            )

        if isinstance(body, dict) and (body.get('error') or body.get('message')):
            text = str(body.get('error') or body.get('message'))
        else:
            text = response.text.strip() or response.reason_phrase

        return RegistryTransportError(
            f"HTTP {response.status_code}: {text}",
            status_code=response.status_code
        )

    async def _do_close(self) -> None:
        """Close HTTP client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
