"""
Filesystem and logging helpers shared by the CLI and the organizer.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


def list_directory(directory: Union[str, Path]) -> List[str]:
    """
    List the entry names of a directory, sorted.

    Only the top level is listed; entries are not filtered, that is left to
    the organizer.

    Args:
        directory: Directory to list

    Returns:
        Sorted entry names

    Raises:
        NotADirectoryError: If the path is not a directory
        FileNotFoundError: If the path does not exist
    """
    names = sorted(os.listdir(directory))
    logger.debug(f"Found {len(names)} entries in {directory}")
    return names


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
