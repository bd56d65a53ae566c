"""CLI commands"""

from . import publish
from . import registry

__all__ = [
    "publish",
    "registry",
]
