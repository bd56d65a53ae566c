"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..constants import CONFIG_VERSION, DEFAULT_TIMEOUT


@dataclass
class Config:
    """Complete configuration"""

    version: str = CONFIG_VERSION
    registries: List[str] = field(default_factory=list)
    timeout: float = DEFAULT_TIMEOUT

    def has_registry(self, url: str) -> bool:
        """Check if registry is configured, ignoring a trailing slash"""
        wanted = url.rstrip("/")
        return any(r.rstrip("/") == wanted for r in self.registries)

    def add_registry(self, url: str) -> None:
        """Append a registry to the end of the upload order"""
        self.registries.append(url)

    def remove_registry(self, url: str) -> bool:
        """Remove a registry"""
        wanted = url.rstrip("/")
        remaining = [r for r in self.registries if r.rstrip("/") != wanted]
        removed = len(remaining) != len(self.registries)
        self.registries = remaining
        return removed

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary"""
        registries = data.get("registries") or []
        if not isinstance(registries, list):
            raise ValueError("'registries' must be a list of URLs")

        return cls(
            version=str(data.get("version", CONFIG_VERSION)),
            registries=[str(r) for r in registries],
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "version": self.version,
            "registries": list(self.registries),
            "timeout": self.timeout
        }
