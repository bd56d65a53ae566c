"""Publish request data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class Credentials:
    """Registry credentials, never persisted"""

    username: str
    password: str = field(repr=False)

    def as_auth(self):
        """Get (username, password) tuple for HTTP basic auth"""
        return self.username, self.password


@dataclass(frozen=True)
class PublishRequest:
    """Input of a publish run"""

    component_path: Path
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        """Normalize component path"""
        if isinstance(self.component_path, str):
            object.__setattr__(self, 'component_path', Path(self.component_path))

    @property
    def credentials(self) -> Optional[Credentials]:
        """Pre-supplied credentials, only when both parts are present"""
        if self.username and self.password:
            return Credentials(username=self.username, password=self.password)
        return None

    @classmethod
    def create(cls,
               component_path: Union[str, Path],
               username: Optional[str] = None,
               password: Optional[str] = None) -> 'PublishRequest':
        """Create request from loosely typed arguments"""
        return cls(component_path=Path(component_path), username=username, password=password)
