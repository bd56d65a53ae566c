"""CLI utility functions"""

from .output import (
    console,
    progress_logger,
    format_publish_result,
    format_registry_list,
    print_error,
    print_success,
)
from .prompts import RichPrompter

__all__ = [
    # Output utilities
    'console',
    'progress_logger',
    'format_publish_result',
    'format_registry_list',
    'print_error',
    'print_success',

    # Prompts
    'RichPrompter',
]
