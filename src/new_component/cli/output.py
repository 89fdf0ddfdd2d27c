"""Rich-based console output for the scaffold pipeline."""

from __future__ import annotations

import random
from pathlib import Path
from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from new_component.progress import ScaffoldProgress


class RichScaffoldProgress(ScaffoldProgress):
    """Renders pipeline events to the terminal with Rich.

    Progress goes to stdout; errors go to stderr.
    """

    _SIGN_OFFS: ClassVar[tuple[str, ...]] = (
        "Happy hacking!",
        "Go build something great.",
        "Time to make it pretty.",
        "Ship it!",
        "Have fun!",
    )

    def __init__(self, *, console: Console | None = None, error_console: Console | None = None) -> None:
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._error_console = error_console or Console(stderr=True, soft_wrap=True, highlight=False)

    def intro(self, name: str, directory: Path, lang: str) -> None:
        self._console.print()
        self._console.print(f"[bold]✨  Creating the [cyan]{escape(name)}[/cyan] component ✨[/bold]")
        self._console.print()
        self._console.print(f"Directory:  [cyan]{escape(str(directory))}[/cyan]")
        self._console.print(f"Language:   [cyan]{escape(lang)}[/cyan]")
        self._console.rule(style="dim")
        self._console.print()

    def item_done(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {escape(message)}")

    def conclusion(self) -> None:
        self._console.print()
        self._console.print(f"[bold green]Component created![/bold green] {random.choice(self._SIGN_OFFS)}")
        self._console.rule(style="dim")
        self._console.print()

    def error(self, message: str) -> None:
        self._error_console.print()
        self._error_console.print("[bold red]Error creating component.[/bold red]")
        self._error_console.print(f"[red]error: {escape(message)}[/red]")
        self._error_console.print()


__all__ = ["RichScaffoldProgress"]
