"""Rich-based terminal output for the scaffold run."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

BANNER = "Baton — AI Orchestration Protocol v3.1"


class ScaffoldReport:
    """Prints the banner, per-step results and next steps to stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(soft_wrap=True, highlight=False)

    def banner(self) -> None:
        self._console.print()
        self._console.print(f"  [bold]{BANNER}[/bold]")
        self._console.print()

    def setting_up(self) -> None:
        self._console.print()
        self._console.print("  Setting up Baton...")
        self._console.print()

    def results(self, messages: Iterable[str]) -> None:
        for message in messages:
            self._console.print(f"  [green]✓[/green] {escape(message)}")

    def next_steps(self) -> None:
        self._console.print()
        self._console.print("  Done! Next steps:")
        self._console.print("    1. Open this folder in your AI coding tool")
        self._console.print('    2. Tell the AI: "Read BATON_v3.1.md and begin"')
        self._console.print()
