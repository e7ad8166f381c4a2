"""Console helpers: step tracking and interactive selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

STATUS_SYMBOLS = {
    "pending": "[green dim]○[/green dim]",
    "running": "[cyan]○[/cyan]",
    "done": "[green]●[/green]",
    "error": "[red]●[/red]",
    "skipped": "[yellow]○[/yellow]",
}


@dataclass
class Step:
    key: str
    label: str
    status: str = "pending"
    detail: str = ""


class StepTracker:
    """Track migration steps and render them as a Rich tree.

    Supports live auto-refresh via an attached refresh callback.
    """

    def __init__(self, title: str):
        self.title = title
        self.steps: List[Step] = []
        self._refresh_cb: Optional[Callable[[], None]] = None

    def attach_refresh(self, cb: Callable[[], None]) -> None:
        self._refresh_cb = cb

    def add(self, key: str, label: str):
        if self.get(key) is None:
            self.steps.append(Step(key=key, label=label))
            self._maybe_refresh()

    def start(self, key: str, detail: str = ""):
        self._update(key, status="running", detail=detail)

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = ""):
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def get(self, key: str) -> Optional[Step]:
        for step in self.steps:
            if step.key == key:
                return step
        return None

    def _update(self, key: str, status: str, detail: str):
        step = self.get(key)
        if step is None:
            step = Step(key=key, label=key)
            self.steps.append(step)
        step.status = status
        if detail:
            step.detail = detail
        self._maybe_refresh()

    def _maybe_refresh(self):
        if self._refresh_cb:
            self._refresh_cb()

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            symbol = STATUS_SYMBOLS.get(step.status, " ")
            detail = step.detail.strip()

            if step.status == "pending":
                text = f"{step.label} ({detail})" if detail else step.label
                tree.add(f"{symbol} [bright_black]{text}[/bright_black]")
            elif detail:
                tree.add(f"{symbol} [white]{step.label}[/white] [bright_black]({detail})[/bright_black]")
            else:
                tree.add(f"{symbol} [white]{step.label}[/white]")
        return tree


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key in (readchar.key.UP, readchar.key.CTRL_P):
        return "up"
    if key in (readchar.key.DOWN, readchar.key.CTRL_N):
        return "down"
    if key == readchar.key.ENTER:
        return "enter"
    if key in (readchar.key.ESC, "\x1b"):
        return "escape"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt

    return key


def select_with_arrows(
    options: Dict[str, str],
    prompt_text: str = "Select an option",
    default_key: str | None = None,
    console: Console | None = None,
) -> str:
    """Pick one key of *options* using the arrow keys.

    Raises:
        typer.Exit: If the user cancels with Esc or Ctrl+C.
    """
    console = console or Console()
    option_keys = list(options.keys())
    selected_index = option_keys.index(default_key) if default_key in option_keys else 0

    def build_panel() -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")

        for i, key in enumerate(option_keys):
            pointer = "▶" if i == selected_index else " "
            table.add_row(pointer, f"[cyan]{key}[/cyan] [dim]({options[key]})[/dim]")

        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")

        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )

    console.print()

    with Live(build_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)

            if key == "up":
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == "down":
                selected_index = (selected_index + 1) % len(option_keys)
            elif key == "enter":
                return option_keys[selected_index]
            elif key == "escape":
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)

            live.update(build_panel(), refresh=True)


__all__ = [
    "STATUS_SYMBOLS",
    "Step",
    "StepTracker",
    "get_key",
    "select_with_arrows",
]
