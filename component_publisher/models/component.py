"""Component data models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class ComponentInfo:
    """Metadata read back from a packaged component"""

    name: str
    version: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentInfo':
        """Create from manifest dictionary"""
        return cls(name=str(data["name"]), version=str(data["version"]))

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass
class PackageArtifact:
    """Package directory and its compressed form"""

    package_dir: Path
    archive_path: Path
    component: ComponentInfo

    @property
    def name(self) -> str:
        return self.component.name

    @property
    def version(self) -> str:
        return self.component.version

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "name": self.name,
            "version": self.version,
            "package_dir": str(self.package_dir),
            "archive_path": str(self.archive_path),
        }
