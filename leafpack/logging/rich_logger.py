"""Rich-based progress reporter implementation."""
from __future__ import annotations

import logging
import sys
import threading
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TimeRemainingColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
    TaskID,
)
from rich.table import Table
from rich.text import Text

from ..core.models import RunStats


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route library logging through Rich.

    Args:
        verbose: Show debug records instead of warnings and above.
        console: Console to write to (defaults to a new stderr console).
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


class RichProgressReporter:
    """Progress reporter using Rich for terminal output.

    Implements the ProgressReporter protocol. Message methods may be called
    from worker threads: the Console serialises writes, and the progress
    bar is only touched under a lock.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        console: Optional[Console] = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Enable verbose output.
            quiet: Suppress all non-essential output.
            console: Console to write to (defaults to stderr).
        """
        self._console = console or Console(stderr=True)
        self._verbose = verbose
        self._quiet = quiet
        self._progress: Optional[Progress] = None
        self._current_task_id: Optional[TaskID] = None
        self._lock = threading.Lock()

    @property
    def console(self) -> Console:
        return self._console

    # --- Phase Management ---

    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase with progress bar."""
        if self._quiet:
            return

        with self._lock:
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                BarColumn(bar_width=40),
                MofNCompleteColumn(),
                TextColumn("[cyan]•"),
                TimeElapsedColumn(),
                TextColumn("[cyan]•"),
                TimeRemainingColumn(),
                console=self._console,
                transient=False,
            )
            self._progress.start()
            self._current_task_id = self._progress.add_task(name, total=total)

    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase by amount."""
        with self._lock:
            if self._progress and self._current_task_id is not None:
                self._progress.advance(self._current_task_id, amount)

    def end_phase(self) -> None:
        """End the current phase."""
        with self._lock:
            if self._progress:
                self._progress.stop()
                self._progress = None
                self._current_task_id = None

    # --- Logging Methods ---

    def info(self, message: str) -> None:
        """Log an info message."""
        if not self._quiet:
            self._console.print(f"[blue]ℹ[/blue] {escape(message)}", highlight=False)

    def success(self, message: str) -> None:
        """Log a success message."""
        if not self._quiet:
            self._console.print(f"[green]✓[/green] {escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        """Log an error message."""
        self._console.print(f"[red]✗[/red] {escape(message)}", style="red", highlight=False)

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose:
            self._console.print(f"[dim]  {escape(message)}[/dim]", highlight=False)

    # --- Specialized Output ---

    def print_config(self, config_items: dict) -> None:
        """Print configuration as a table."""
        if self._quiet:
            return

        table = Table(title="Configuration", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        for key, value in config_items.items():
            table.add_row(key, Text(str(value)))

        self._console.print(table)

    def print_stats(self, stats: RunStats) -> None:
        """Print run statistics."""
        if self._quiet:
            return

        table = Table(title="Packing Complete", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Folders", str(stats.total))
        table.add_row("Archived", str(stats.archived))
        if stats.deleted:
            table.add_row("Deleted", str(stats.deleted))
        if stats.planned:
            table.add_row("Planned (dry run)", str(stats.planned))
        table.add_row("Failed", str(stats.failed))
        table.add_row("Files", str(stats.files))

        if stats.elapsed_seconds > 0:
            table.add_row("", "")
            table.add_row("Time Elapsed", f"{stats.elapsed_seconds:.1f}s")

        self._console.print(table)

    # --- Context Managers ---

    def __enter__(self) -> "RichProgressReporter":
        return self

    def __exit__(self, *args) -> None:
        self.end_phase()


class QuietProgressReporter:
    """Minimal progress reporter that only shows warnings and errors."""

    def __init__(self):
        self._lock = threading.Lock()

    def start_phase(self, name: str, total: int) -> None:
        pass

    def advance_phase(self, amount: int = 1) -> None:
        pass

    def end_phase(self) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        with self._lock:
            print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        with self._lock:
            print(f"ERROR: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        pass

    def print_config(self, config_items: dict) -> None:
        pass

    def print_stats(self, stats: RunStats) -> None:
        pass

    def __enter__(self) -> "QuietProgressReporter":
        return self

    def __exit__(self, *args) -> None:
        pass
