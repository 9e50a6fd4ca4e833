"""
Organization module for sorting files into category folders.

Classification by extension or modification date, concurrent moves with a
list-only preview mode, and the batch strategies that tie them together.
"""

from .classifier import (
    classify_by_date,
    classify_by_extension,
    get_file_extension,
    is_eligible_file,
    matches_specific_formats,
)
from .mover import (
    DirectoryCreationError,
    FileMover,
    MoveError,
    MoveOutcome,
    OrganizerError,
    make_directory,
)
from .organizer import BatchOrganizer, OrganizationResult, collect_results

__all__ = [
    "classify_by_date",
    "classify_by_extension",
    "get_file_extension",
    "is_eligible_file",
    "matches_specific_formats",
    "DirectoryCreationError",
    "FileMover",
    "MoveError",
    "MoveOutcome",
    "OrganizerError",
    "make_directory",
    "BatchOrganizer",
    "OrganizationResult",
    "collect_results",
]
