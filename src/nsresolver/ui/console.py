"""Rich-powered console output for the namespace resolver."""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.syntax import Syntax
from rich.table import Table


class Console:
    """Terminal output and prompts using Rich."""

    def __init__(self, console: RichConsole | None = None) -> None:
        self.console = console or RichConsole()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def status(self, message: str) -> None:
        """A short-lived status line."""
        self.console.print(f"[dim]{message}[/dim]")

    def code(self, text: str, language: str = "php") -> None:
        """Render syntax-highlighted code."""
        self.console.print(Syntax(text, language, theme="monokai", line_numbers=True))

    def show_candidates(self, options: list[str]) -> None:
        """Display the namespaces a class can be imported from."""
        table = Table(title="Candidate namespaces", border_style="cyan")
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Class", style="bold")
        for i, option in enumerate(options, start=1):
            table.add_row(str(i), option)
        self.console.print(table)

    def choose(self, options: list[str]) -> str | None:
        """Pick one of `options` by number; blank or invalid input cancels.

        Blocks on terminal input.
        """
        self.show_candidates(options)
        try:
            response = self.console.input("Pick a class [1-%d]: " % len(options)).strip()
        except (EOFError, KeyboardInterrupt):
            return None
        if response.isdigit() and 1 <= int(response) <= len(options):
            return options[int(response) - 1]
        return None

    def ask(self, placeholder: str) -> str | None:
        """Free-text prompt. An empty answer is returned as ''; EOF cancels.

        Blocks on terminal input.
        """
        try:
            return self.console.input(f"{placeholder}: ").strip()
        except (EOFError, KeyboardInterrupt):
            return None
