"""
File mover.

Creates category folders and relocates files into them. Each move runs on
a thread pool and is handed back to the caller as a future, so a batch can
dispatch every file before waiting on any of them.
"""

import logging
import os
import shutil
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from ..reporting import LoggingReporter, Reporter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class OrganizerError(Exception):
    """Base class for organizer errors."""


class DirectoryCreationError(OrganizerError):
    """A category or output directory could not be created."""

    def __init__(self, path: PathLike, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error occurred while creating directory {path}: {cause}")


class MoveError(OrganizerError):
    """A single file could not be moved."""

    def __init__(self, file_name: str, cause: BaseException):
        self.file_name = file_name
        self.cause = cause
        super().__init__(
            f"Couldn't move {file_name} because of following error: {cause}"
        )


class MoveOutcome(BaseModel):
    """Result of a move that succeeded or was only previewed."""

    file_name: str
    category: str
    source: Path
    destination: Path
    message: str
    dry_run: bool = False


def make_directory(path: PathLike) -> None:
    """
    Create a directory if it does not exist.

    A file already sitting at the path is not an error here; moving into it
    fails later, for that move alone.

    Args:
        path: Directory to create

    Raises:
        DirectoryCreationError: If creation fails for any reason other than
            the path already existing
    """
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except FileExistsError:
        logger.debug(f"{path} exists and is not a directory")
    except OSError as e:
        raise DirectoryCreationError(path, e) from e


class FileMover:
    """Move files into category folders on a thread pool."""

    def __init__(self, reporter: Optional[Reporter] = None, max_workers: int = 8):
        """
        Initialize the mover.

        Args:
            reporter: Sink for progress and error messages
            max_workers: Number of concurrent moves
        """
        self.reporter = reporter or LoggingReporter(logger)
        self.executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="file_mover"
        )

    def __enter__(self) -> "FileMover":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting moves; by default wait for the running ones."""
        self.executor.shutdown(wait=wait)

    def move(
        self,
        source_dir: PathLike,
        output_dir: PathLike,
        file_name: str,
        category: str,
        dry_run: bool = False,
    ) -> "Future[MoveOutcome]":
        """
        Move one file into output_dir/category.

        Directories are created before the move is dispatched, so a
        DirectoryCreationError is raised here rather than through the future.

        Args:
            source_dir: Directory holding the file
            output_dir: Root of the category folders
            file_name: Name of the file inside source_dir
            category: Destination folder name
            dry_run: If True, only report the move that would happen

        Returns:
            Future resolving to a MoveOutcome, or failing with MoveError

        Raises:
            DirectoryCreationError: If a destination directory cannot be made
        """
        # abspath, not resolve(): a symlink must be moved as the link itself
        output_path = Path(os.path.abspath(output_dir))
        category_dir = output_path / category
        source = Path(os.path.abspath(source_dir)) / file_name
        destination = category_dir / file_name

        if dry_run:
            message = f"mv {source} {destination}"
            self.reporter.info(message)
            future: "Future[MoveOutcome]" = Future()
            future.set_result(
                MoveOutcome(
                    file_name=file_name,
                    category=category,
                    source=source,
                    destination=destination,
                    message=message,
                    dry_run=True,
                )
            )
            return future

        make_directory(output_path)
        make_directory(category_dir)

        return self.executor.submit(
            self._relocate, source, destination, file_name, category
        )

    def _relocate(
        self, source: Path, destination: Path, file_name: str, category: str
    ) -> MoveOutcome:
        """Run on a worker thread: rename, or copy and delete across devices."""
        try:
            shutil.move(str(source), str(destination))
        except OSError as e:
            error = MoveError(file_name, e)
            self.reporter.warn(str(error))
            raise error from e

        message = f"Moved {file_name} to {category} folder"
        self.reporter.info(message)
        logger.debug(f"Moved {source} -> {destination}")

        return MoveOutcome(
            file_name=file_name,
            category=category,
            source=source,
            destination=destination,
            message=message,
        )
