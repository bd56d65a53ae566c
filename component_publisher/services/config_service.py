# component_publisher/services/config_service.py
"""Configuration management service"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import DEFAULT_CONFIG_FILE, ENV_CONFIG_PATH, REGISTRY_URL_PATTERN
from ..models.config import Config

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Get config file path from environment or home directory"""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / DEFAULT_CONFIG_FILE


def normalize_registry_url(url: str) -> str:
    """Validate a registry URL and give it exactly one trailing slash"""
    url = url.strip()
    if not REGISTRY_URL_PATTERN.match(url):
        raise ConfigError(f"Invalid registry URL: {url}. Use an http(s) URL")
    return url.rstrip("/") + "/"


class ConfigService:
    """Service for managing the publisher configuration file"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            config_path: Configuration file (defaults to env or ~/.component-publisher.yaml)
        """
        self.config_path = Path(config_path).expanduser() if config_path else default_config_path()
        self._config: Optional[Config] = None

    @property
    def exists(self) -> bool:
        """Check if the configuration file exists"""
        return self.config_path.exists()

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load, empty if no file)"""
        if self._config is None:
            if self.exists:
                self.load_config()
            else:
                self._config = Config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file

        Returns:
            Loaded configuration

        Raises:
            FileNotFoundError: If the file does not exist
            yaml.YAMLError: If the file is not valid YAML
            ValueError: If the content does not match the schema
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        data = yaml.safe_load(content) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping: {self.config_path}")

        self._config = Config.from_dict(data)
        return self._config

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file

        Args:
            config: Configuration to save (uses current if not provided)
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        if self.config_path.exists():
            backup_path = self.config_path.with_suffix(self.config_path.suffix + '.bak')
            shutil.copy2(self.config_path, backup_path)

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            yaml.dump(self._config.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to {self.config_path}")

    def add_registry(self, url: str) -> str:
        """Add a registry at the end of the upload order

        Args:
            url: Registry base URL

        Returns:
            Normalized URL that was stored

        Raises:
            ConfigError: If the URL is invalid or already configured
        """
        normalized = normalize_registry_url(url)
        config = self.config

        if config.has_registry(normalized):
            raise ConfigError(f"Registry already configured: {normalized}")

        config.add_registry(normalized)
        self.save_config()
        return normalized

    def remove_registry(self, url: str) -> None:
        """Remove a registry

        Raises:
            ConfigError: If the registry is not configured
        """
        if not self.config.remove_registry(url.strip()):
            raise ConfigError(f"Registry not configured: {url}")
        self.save_config()

    def list_registries(self):
        """Get configured registries in upload order"""
        return list(self.config.registries)
