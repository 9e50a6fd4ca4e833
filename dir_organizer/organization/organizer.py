"""
Batch organizer.

Runs one of three strategies over a list of file names from a source
directory and dispatches a move for every eligible file:

- defaults: category from the extension table, "Miscellaneous" otherwise
- specific file types: only listed extensions, all into one folder
- dates: one folder per modification date (YYYY-MM-DD)

Each strategy returns the list of pending move futures in input order
without waiting on them. collect_results() joins them.
"""

import logging
from concurrent.futures import Future, wait
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ..formats import DEFAULT_CATEGORY, FormatTable
from ..reporting import LoggingReporter, Reporter
from .classifier import (
    classify_by_date,
    classify_by_extension,
    is_eligible_file,
    matches_specific_formats,
)
from .mover import FileMover, MoveError, MoveOutcome, PathLike

logger = logging.getLogger(__name__)


class OrganizationResult(BaseModel):
    """Tally of a finished batch."""

    total_files: int = 0
    moved: int = 0
    previewed: int = 0
    failed: int = 0
    dry_run: bool = False
    errors: List[str] = Field(default_factory=list)
    outcomes: List[MoveOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.failed == 0


class BatchOrganizer:
    """Organize the files of a directory with a chosen strategy."""

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        formats: Optional[FormatTable] = None,
        default_category: str = DEFAULT_CATEGORY,
        max_workers: int = 8,
    ):
        """
        Initialize the organizer.

        Args:
            reporter: Sink for progress and error messages
            formats: Category -> extensions table (built-in table if None)
            default_category: Folder for files matching no category
            max_workers: Number of concurrent moves
        """
        self.reporter = reporter or LoggingReporter(logger)
        self.formats = formats
        self.default_category = default_category
        self.mover = FileMover(reporter=self.reporter, max_workers=max_workers)

    def __enter__(self) -> "BatchOrganizer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Wait for running moves and release the thread pool."""
        self.mover.shutdown()

    def _dispatch(
        self,
        file_name: str,
        category: str,
        source_dir: PathLike,
        output_dir: PathLike,
        dry_run: bool,
    ) -> "Future[MoveOutcome]":
        self.reporter.info(f"Moving file {file_name} to {category}")
        return self.mover.move(source_dir, output_dir, file_name, category, dry_run)

    def organize_by_defaults(
        self,
        files: Sequence[str],
        source_dir: PathLike,
        output_dir: PathLike,
        dry_run: bool = False,
    ) -> List["Future[MoveOutcome]"]:
        """
        Move each file into the folder of its extension's category.

        Args:
            files: File names inside source_dir
            source_dir: Directory holding the files
            output_dir: Root of the category folders
            dry_run: If True, only report the moves

        Returns:
            One pending move per eligible file, in input order

        Raises:
            DirectoryCreationError: If a category folder cannot be created
        """
        moves = []
        for file_name in files:
            if not is_eligible_file(file_name, source_dir):
                continue
            category = classify_by_extension(
                file_name, self.formats, self.default_category
            )
            moves.append(
                self._dispatch(file_name, category, source_dir, output_dir, dry_run)
            )
        return moves

    def organize_by_specific_file_types(
        self,
        extensions: Sequence[str],
        folder: str,
        files: Sequence[str],
        source_dir: PathLike,
        output_dir: PathLike,
        dry_run: bool = False,
    ) -> List["Future[MoveOutcome]"]:
        """
        Move files with one of the given extensions into a single folder.

        Extensions are compared exactly as given, so letter case matters
        here, unlike organize_by_defaults.

        Args:
            extensions: Extensions to pick, without dots
            folder: Destination folder name
            files: File names inside source_dir
            source_dir: Directory holding the files
            output_dir: Root of the destination folder
            dry_run: If True, only report the moves

        Returns:
            One pending move per matching file, in input order

        Raises:
            DirectoryCreationError: If the folder cannot be created
        """
        names = [
            name
            for name in files
            if is_eligible_file(name, source_dir)
            and matches_specific_formats(name, extensions)
        ]

        return [
            self._dispatch(name, folder, source_dir, output_dir, dry_run)
            for name in names
        ]

    def organize_by_dates(
        self,
        files: Sequence[str],
        source_dir: PathLike,
        output_dir: PathLike,
        dry_run: bool = False,
    ) -> List["Future[MoveOutcome]"]:
        """
        Move each file into a folder named after its modification date.

        A file that cannot be stat'ed gets a failed future instead of
        stopping the batch.

        Args:
            files: File names inside source_dir
            source_dir: Directory holding the files
            output_dir: Root of the date folders
            dry_run: If True, only report the moves

        Returns:
            One pending move per eligible file, in input order

        Raises:
            DirectoryCreationError: If a date folder cannot be created
        """
        moves: List["Future[MoveOutcome]"] = []
        for file_name in files:
            if not is_eligible_file(file_name, source_dir):
                continue

            try:
                category = classify_by_date(Path(source_dir) / file_name)
            except OSError as e:
                error = MoveError(file_name, e)
                self.reporter.warn(str(error))
                failed: "Future[MoveOutcome]" = Future()
                failed.set_exception(error)
                moves.append(failed)
                continue

            moves.append(
                self._dispatch(file_name, category, source_dir, output_dir, dry_run)
            )
        return moves


def collect_results(
    moves: Sequence["Future[MoveOutcome]"], dry_run: bool = False
) -> OrganizationResult:
    """
    Wait for every move of a batch and tally the outcomes.

    Args:
        moves: Futures returned by one of the organize_* methods
        dry_run: Whether the batch was a preview

    Returns:
        Organization result with counts, outcomes and error messages
    """
    wait(moves)

    result = OrganizationResult(total_files=len(moves), dry_run=dry_run)
    for move in moves:
        error = move.exception()
        if error is not None:
            result.failed += 1
            result.errors.append(str(error))
            continue

        outcome = move.result()
        result.outcomes.append(outcome)
        if outcome.dry_run:
            result.previewed += 1
        else:
            result.moved += 1

    logger.info(
        f"{'[DRY RUN] ' if dry_run else ''}Batch complete: "
        f"{result.moved} moved, {result.previewed} previewed, {result.failed} failed"
    )
    return result
