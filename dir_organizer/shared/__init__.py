"""
Shared utilities for dir-organizer.
"""

from .fs_utils import list_directory, setup_logging

__all__ = [
    "list_directory",
    "setup_logging",
]
