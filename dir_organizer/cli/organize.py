"""
CLI command for organizing a directory.

Sorts the files of a source directory into category folders by extension,
by a given list of formats, or by modification date.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import click
from rich.markup import escape

from .. import __version__
from ..config import Settings, load_format_table
from ..organization import BatchOrganizer, DirectoryCreationError, collect_results
from ..shared import list_directory
from .base import CLIDisplay, SpinnerReporter, common_options, init_logging


def _split_formats(values: Sequence[str]) -> List[str]:
    """Flatten repeated and comma separated --specific-formats values."""
    extensions = []
    for value in values:
        for part in value.split(","):
            part = part.strip().lstrip(".")
            if part:
                extensions.append(part)
    return extensions


def _choose_strategy(
    extensions: List[str], folder: Optional[str], by_date: bool
) -> str:
    if extensions and by_date:
        raise click.UsageError("--date cannot be combined with --specific-formats")
    if extensions and not folder:
        raise click.UsageError("--specific-folder is required with --specific-formats")
    if folder and not extensions:
        raise click.UsageError("--specific-folder requires --specific-formats")

    if extensions:
        return "specific"
    if by_date:
        return "date"
    return "defaults"


@click.command()
@click.option(
    "-s",
    "--source",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Directory whose files are organized",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=None,
    help="Directory receiving the category folders (default: source)",
)
@click.option(
    "-t",
    "--specific-formats",
    multiple=True,
    help=(
        "Only organize these extensions, case-sensitive "
        "(repeatable, comma separated)"
    ),
)
@click.option(
    "-f",
    "--specific-folder",
    default=None,
    help="Folder name for files picked by --specific-formats",
)
@click.option(
    "-d",
    "--date",
    "by_date",
    is_flag=True,
    help="Organize files into folders named after their modification date",
)
@click.option(
    "-l",
    "--list-only",
    is_flag=True,
    help="Only list the moves that would be made",
)
@click.option(
    "--formats-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of category -> extensions replacing the built-in table",
)
@click.version_option(__version__, prog_name="dir-organizer")
@common_options
@init_logging
def organize(
    source: str,
    output: Optional[str],
    specific_formats: Tuple[str, ...],
    specific_folder: Optional[str],
    by_date: bool,
    list_only: bool,
    formats_file: Optional[str],
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Organize the files of a directory into category folders.

    \b
    Examples:
        # Preview moves by extension category
        dir-organizer -s ~/Downloads -l

        # Sort by extension category into another directory
        dir-organizer -s ~/Downloads -o ~/Sorted

        # Move only .png and .jpg files into "Pics"
        dir-organizer -s ~/Downloads -t png,jpg -f Pics

        # One folder per modification date
        dir-organizer -s ~/Downloads --date

    Hidden files and directories are never moved. Extension matching ignores
    case for the built-in categories but is exact for --specific-formats.
    """
    display = CLIDisplay(quiet=quiet)

    extensions = _split_formats(specific_formats)
    strategy = _choose_strategy(extensions, specific_folder, by_date)

    try:
        settings = Settings()
        formats = load_format_table(formats_file or settings.formats_file)
    except (ValueError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    source_dir = Path(source).resolve()
    output_dir = Path(output).resolve() if output else source_dir

    display.print_header("Directory Organizer")
    config = {
        "Source directory": str(source_dir),
        "Output directory": str(output_dir),
        "Strategy": strategy,
        "List only": str(list_only),
    }
    if strategy == "specific":
        config["Formats"] = ", ".join(extensions)
        config["Folder"] = specific_folder
    display.print_config(config)

    files = list_directory(source_dir)

    failure: Optional[DirectoryCreationError] = None
    with display.spinner_progress() as progress:
        progress.add_task("Organizing files...", total=None)
        reporter = SpinnerReporter(progress.console, quiet=quiet)

        with BatchOrganizer(
            reporter=reporter,
            formats=formats,
            default_category=settings.default_category,
            max_workers=settings.max_workers,
        ) as organizer:
            try:
                if strategy == "specific":
                    moves = organizer.organize_by_specific_file_types(
                        extensions,
                        specific_folder,
                        files,
                        source_dir,
                        output_dir,
                        dry_run=list_only,
                    )
                elif strategy == "date":
                    moves = organizer.organize_by_dates(
                        files, source_dir, output_dir, dry_run=list_only
                    )
                else:
                    moves = organizer.organize_by_defaults(
                        files, source_dir, output_dir, dry_run=list_only
                    )
            except DirectoryCreationError as e:
                failure = e
            else:
                result = collect_results(moves, dry_run=list_only)

    if failure is not None:
        display.print_error(f"✗ {escape(str(failure))}")
        sys.exit(1)

    if list_only:
        display.print_warning("\nList only: no files were moved.")

    display.print_result(result)
    if result.failed:
        sys.exit(1)

    if not list_only:
        display.print_success("\n✓ Organization complete!")


if __name__ == "__main__":
    organize()
