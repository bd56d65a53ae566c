"""Utility functions for component-publisher"""

from .async_utils import run_async, run_blocking
from .file_utils import (
    copy_tree,
    format_size,
    read_json,
    remove_file,
    write_json,
)

__all__ = [
    # Async utilities
    "run_async",
    "run_blocking",

    # File utilities
    "copy_tree",
    "format_size",
    "read_json",
    "remove_file",
    "write_json",
]
