"""Tests for Rich progress reporter."""
import io
import logging
import threading

import pytest
from rich.console import Console

from leafpack.core.models import RunStats
from leafpack.logging.rich_logger import (
    QuietProgressReporter,
    RichProgressReporter,
    configure_logging,
)


def capture_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=200), buffer


class TestRichProgressReporter:
    """Tests for Rich progress reporter."""

    @pytest.fixture
    def reporter(self):
        """Create a reporter writing to a buffer."""
        console, _buffer = capture_console()
        return RichProgressReporter(console=console)

    def test_create_default(self):
        """Test default creation."""
        reporter = RichProgressReporter()
        assert reporter._verbose is False
        assert reporter._quiet is False

    def test_start_and_end_phase(self, reporter):
        """Test starting and ending a phase."""
        reporter.start_phase("Packing", 10)
        assert reporter._progress is not None
        assert reporter._current_task_id is not None

        reporter.advance_phase()
        reporter.end_phase()
        assert reporter._progress is None

    def test_quiet_has_no_phase(self):
        """Test quiet mode never starts a progress bar."""
        reporter = RichProgressReporter(quiet=True)
        reporter.start_phase("Packing", 10)
        assert reporter._progress is None

    def test_info_keeps_brackets(self, reporter):
        """Test folder names with brackets are printed literally."""
        reporter.info('[1 / 2] Starting "[Group] Title v01"...')
        assert '[1 / 2] Starting "[Group] Title v01"...' in reporter.console.file.getvalue()

    def test_error(self, reporter):
        """Test error lines are printed."""
        reporter.error("[1 / 1] missing doesn't exist")
        assert "missing doesn't exist" in reporter.console.file.getvalue()

    def test_debug_only_when_verbose(self):
        """Test debug output depends on verbose mode."""
        console, buffer = capture_console()
        RichProgressReporter(console=console).debug("hidden")
        RichProgressReporter(verbose=True, console=console).debug("shown")

        assert "hidden" not in buffer.getvalue()
        assert "shown" in buffer.getvalue()

    def test_concurrent_lines_not_interleaved(self, reporter):
        """Test messages from many threads come out as whole lines."""
        def worker(n):
            for i in range(20):
                reporter.info(f"worker-{n}-line-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = [line for line in reporter.console.file.getvalue().splitlines() if "worker-" in line]
        assert len(lines) == 160
        assert all(line.count("worker-") == 1 for line in lines)

    def test_print_stats(self, reporter):
        """Test stats table printing."""
        reporter.print_stats(RunStats(total=3, archived=2, failed=1, files=30, elapsed_seconds=1.5))
        output = reporter.console.file.getvalue()
        assert "Packing Complete" in output
        assert "Archived" in output

    def test_print_config(self, reporter):
        """Test config printing."""
        reporter.print_config({"Folders": "[Group] vol", "Workers": 4})
        assert "[Group] vol" in reporter.console.file.getvalue()

    def test_context_manager(self):
        """Test context manager ends the phase."""
        console, _ = capture_console()
        with RichProgressReporter(console=console) as reporter:
            reporter.start_phase("Packing", 1)
        assert reporter._progress is None


class TestQuietProgressReporter:
    """Tests for the quiet reporter."""

    def test_only_problems_printed(self, capsys):
        """Test info is dropped while warnings and errors go to stderr."""
        reporter = QuietProgressReporter()
        reporter.info("hello")
        reporter.success("done")
        reporter.warning("careful")
        reporter.error("broken")

        err = capsys.readouterr().err
        assert "hello" not in err
        assert "WARNING: careful" in err
        assert "ERROR: broken" in err


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_levels(self):
        """Test verbose selects DEBUG and default selects WARNING."""
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(verbose=False)
        assert logging.getLogger().level == logging.WARNING
