"""
File classification.

Decides which category folder a file belongs to, either from its
extension or from its modification date, and which directory entries
are eligible for organizing at all.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

import arrow

from ..formats import DEFAULT_CATEGORY, DEFAULT_FORMATS, FormatTable

logger = logging.getLogger(__name__)

DATE_FORMAT = "YYYY-MM-DD"


def get_file_extension(file_name: str) -> str:
    """
    Get the extension of a file name.

    Args:
        file_name: File name (not a path)

    Returns:
        Text after the last dot, or an empty string if there is no dot
    """
    index = file_name.rfind(".")
    return "" if index < 0 else file_name[index + 1 :]


def classify_by_extension(
    file_name: str,
    formats: Optional[FormatTable] = None,
    default_category: str = DEFAULT_CATEGORY,
) -> str:
    """
    Get the category of a file from its extension.

    Matching ignores letter case. Categories are checked in table order and
    the first one listing the extension wins.

    Args:
        file_name: File name
        formats: Category -> extensions table (built-in table if None)
        default_category: Category for extensions found in no list

    Returns:
        Category name
    """
    if formats is None:
        formats = DEFAULT_FORMATS

    extension = get_file_extension(file_name).upper()

    for category, extensions in formats.items():
        if extension in (ext.upper() for ext in extensions):
            return category

    return default_category


def matches_specific_formats(file_name: str, extensions: Iterable[str]) -> bool:
    """
    Check whether a file's extension is one of the given extensions.

    Unlike classify_by_extension this comparison is case-sensitive:
    "x.PNG" does not match ["png"].

    Args:
        file_name: File name
        extensions: Extensions as given by the caller, without dots

    Returns:
        True if the raw extension is in the list
    """
    return get_file_extension(file_name) in set(extensions)


def classify_by_date(file_path: Union[str, Path]) -> str:
    """
    Get the category of a file from its modification date.

    Args:
        file_path: Path to the file

    Returns:
        Local modification date as YYYY-MM-DD

    Raises:
        OSError: If the file cannot be stat'ed
    """
    mtime = os.stat(file_path).st_mtime
    return arrow.get(mtime).to("local").format(DATE_FORMAT)


def is_eligible_file(name: str, directory: Union[str, Path]) -> bool:
    """
    Check whether a directory entry should be organized.

    Hidden entries (leading dot) and directories are skipped.

    Args:
        name: Entry name
        directory: Directory containing the entry

    Returns:
        True if the entry is a visible, non-directory file
    """
    if name.startswith("."):
        return False
    return not (Path(directory) / name).is_dir()
