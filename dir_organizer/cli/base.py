"""
Shared CLI helpers.

Common click options, logging setup from flags, rich display helpers and
the spinner-backed reporter the organizer writes its progress to.
"""

import logging
from functools import wraps
from typing import Callable, Dict, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..organization import OrganizationResult
from ..shared import setup_logging

logger = logging.getLogger(__name__)


def common_options(f: Callable) -> Callable:
    """Apply standard CLI options (verbose, quiet)."""
    decorators = [
        click.option(
            "-v",
            "--verbose",
            is_flag=True,
            help="Enable verbose logging",
        ),
        click.option(
            "-q",
            "--quiet",
            is_flag=True,
            help="Suppress all output except warnings and errors",
        ),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def init_logging(f: Callable) -> Callable:
    """Decorator to setup logging from verbose/quiet flags."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        verbose = kwargs.get("verbose", False)
        quiet = kwargs.get("quiet", False)
        setup_logging(verbose=verbose, quiet=quiet)
        return f(*args, **kwargs)

    return wrapper


class CLIDisplay:
    """Standardized CLI output helpers."""

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        """Initialize display helper.

        Args:
            console: Rich console instance (creates new if None)
            quiet: Suppress all output except warnings and errors
        """
        self.console = console or Console()
        self.quiet = quiet

    def print_header(self, title: str) -> None:
        if not self.quiet:
            self.console.print(f"\n[bold cyan]{title}[/bold cyan]\n")

    def print_config(self, config: Dict[str, str]) -> None:
        """Print a setting -> value table."""
        if self.quiet:
            return

        table = Table(show_header=False, box=None)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        for key, value in config.items():
            table.add_row(key, escape(str(value)))

        self.console.print(table)
        self.console.print()

    def print_result(self, result: OrganizationResult, max_errors: int = 10) -> None:
        """Print the batch tally, then the failed moves (even in quiet mode)."""
        if not self.quiet:
            table = Table(title="Organization Results", min_width=32)
            table.add_column("Files", style="cyan")
            table.add_column("Count", style="green", justify="right")
            table.add_row("Seen", f"{result.total_files:,}")
            if result.dry_run:
                table.add_row("Listed", f"{result.previewed:,}")
            else:
                table.add_row("Moved", f"{result.moved:,}")
            table.add_row("Failed", f"{result.failed:,}")
            self.console.print(table)

        if result.failed:
            self.print_error(f"\n{result.failed} file(s) could not be moved:")
            for error in result.errors[:max_errors]:
                self.print_error(f"  • {escape(error)}")
            hidden = len(result.errors) - max_errors
            if hidden > 0:
                self.print_error(f"  ... and {hidden} more")

    def print_success(self, message: str) -> None:
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def print_warning(self, message: str) -> None:
        """Print warning message (shown even in quiet mode)."""
        self.console.print(f"[yellow]{message}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print error message (shown even in quiet mode)."""
        self.console.print(f"[red]{message}[/red]")

    def spinner_progress(self) -> Progress:
        """Create an indeterminate spinner; use as a context manager."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            disable=self.quiet,
        )


class SpinnerReporter:
    """Print organizer progress above a running spinner.

    Messages arrive from mover threads; rich serializes console writes.
    """

    def __init__(self, console: Console, quiet: bool = False):
        self.console = console
        self.quiet = quiet

    def info(self, message: str) -> None:
        logger.debug(message)
        if not self.quiet:
            self.console.print(f"[blue]i[/blue] {escape(message)}")

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.console.print(f"[yellow]![/yellow] {escape(message)}")
