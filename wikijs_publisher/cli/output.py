"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output,
and the ConsoleReporter that lets the publisher show its notices through
it. Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Settings saved")
        >>> with handler.spinner("Publishing..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False, console: Optional[Console] = None):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
            console: Console to write to (a new one is created if None)
        """
        self.verbosity = verbosity
        self.console = console or Console(
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def notice(self, message: str, style: Optional[str] = None) -> None:
        """Display text verbatim (no Rich markup), e.g. server messages."""
        self.console.print(message, style=style, markup=False)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a network call is in flight.

        Example:
            >>> with handler.spinner("Publishing..."):
            ...     publisher.publish(doc)
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield


class ConsoleReporter:
    """Reporter that shows publisher notices on the terminal.

    Notices are printed verbatim; diagnostic lines are printed dimmed.
    """

    def __init__(self, output_handler: OutputHandler):
        self.output_handler = output_handler

    def notify(self, text: str) -> None:
        self.output_handler.notice(text)

    def log(self, text: str) -> None:
        self.output_handler.notice(text, style="dim")
