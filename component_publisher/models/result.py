"""Result models for publish operations"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .component import PackageArtifact

if TYPE_CHECKING:
    from ..api.exceptions import PublishToolError


@dataclass
class EndpointPublishResult:
    """Outcome of publishing to a single registry endpoint"""

    registry: str
    route: str
    success: bool
    error: Optional['PublishToolError'] = None
    attempts: int = 0
    prompted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'registry': self.registry,
            'route': self.route,
            'success': self.success,
            'attempts': self.attempts,
        }

        if self.error:
            data['error'] = str(self.error)
            data['error_code'] = self.error.error_code
        if self.prompted:
            data['prompted'] = True

        return data


@dataclass
class PublishResult:
    """Result of a whole publish run"""

    success: bool
    registries: List[str] = field(default_factory=list)
    artifact: Optional[PackageArtifact] = None
    endpoints: List[EndpointPublishResult] = field(default_factory=list)
    error: Optional['PublishToolError'] = None
    cleanup_error: Optional['PublishToolError'] = None
    duration: float = 0.0

    @property
    def published(self) -> List[EndpointPublishResult]:
        """Endpoints that accepted the artifact"""
        return [e for e in self.endpoints if e.success]

    @property
    def failed_endpoint(self) -> Optional[EndpointPublishResult]:
        """The endpoint that stopped the run, if any"""
        for endpoint in self.endpoints:
            if not endpoint.success:
                return endpoint
        return None

    @property
    def skipped(self) -> List[str]:
        """Registries never attempted because of an earlier failure"""
        attempted = len(self.endpoints)
        if self.artifact is None:
            return list(self.registries)
        return list(self.registries[attempted:])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'success': self.success,
            'registries': self.registries,
            'endpoints': [e.to_dict() for e in self.endpoints],
            'duration': self.duration,
        }

        if self.artifact:
            data['artifact'] = self.artifact.to_dict()
        if self.error:
            data['error'] = str(self.error)
            data['error_code'] = self.error.error_code
        if self.cleanup_error:
            data['cleanup_error'] = str(self.cleanup_error)

        return data
