"""Core functionality for component-publisher"""

from .cleanup import Cleanup
from .compressor import Compressor
from .error_classifier import REJECTION_CLASSIFIERS, classify_upload_error
from .packager import Packager
from .path_resolver import PathResolver

__all__ = [
    "Cleanup",
    "Compressor",
    "Packager",
    "PathResolver",
    "REJECTION_CLASSIFIERS",
    "classify_upload_error",
]
