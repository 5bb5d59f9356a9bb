"""Rich display helpers — handle tables, scenario results, status lines."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import contextmanager

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.syntax import Syntax
from rich.table import Table
from rich.theme import Theme

# ── Colour palette ───────────────────────────────────────────────────────────
THEME = Theme(
    {
        "tulars.accent": "#4D8FFF",
        "tulars.silver": "#A4B4CC",
        "tulars.muted": "#5A6278",
        "tulars.ok": "#3d9e5a",
        "tulars.err": "#e05555",
    }
)

console = Console(theme=THEME, highlight=False)
err_console = Console(theme=THEME, stderr=True)


# ── Handles ──────────────────────────────────────────────────────────────────


def print_handles(rows: Iterable[tuple[str, str, str]]) -> None:
    """Print (path, token, selector) rows as a table."""
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 2))
    table.add_column("Path", style="tulars.accent", no_wrap=True)
    table.add_column("Token", style="tulars.silver", no_wrap=True)
    table.add_column("Selector", style="tulars.muted", overflow="fold")
    for path, token, selector in rows:
        table.add_row(escape(path), escape(token), escape(selector))
    console.print(table)


def print_source(source: str, lexer: str = "elm") -> None:
    console.print(Syntax(source, lexer, theme="monokai", line_numbers=False))


def print_diff(lines: list[str]) -> None:
    console.print(Syntax("\n".join(lines), "diff", theme="monokai", line_numbers=False))


# ── Scenario results ─────────────────────────────────────────────────────────


def print_scenario_result(result) -> None:
    """Print a ScenarioResult in a rich panel."""
    color = "tulars.ok" if result.passed else "tulars.err"
    icon = "✓" if result.passed else "✗"
    label = "PASSED" if result.passed else "FAILED"

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column(style="tulars.muted", no_wrap=True, width=14)
    table.add_column()
    table.add_row("Status", f"[{color}]{icon}  {label}[/{color}]")
    table.add_row("Scenario", f"[tulars.silver]{result.scenario}[/tulars.silver]")
    table.add_row("Steps", f"[tulars.accent]{result.steps_run}[/tulars.accent] / {result.total_steps}")
    table.add_row("Duration", f"[tulars.silver]{result.duration_ms:.0f} ms[/tulars.silver]")
    if result.failed_step:
        table.add_row("Failed at", f"[tulars.err]{escape(result.failed_step)}[/tulars.err]")
    if result.error:
        table.add_row("Error", f"[tulars.err]{escape(result.error)}[/tulars.err]")

    console.print(Panel(table, title=f"[{color}]Scenario Result[/{color}]", border_style=color, padding=(1, 2)))


# ── Spinners ─────────────────────────────────────────────────────────────────


@contextmanager
def spinner(message: str):
    """Context manager that shows a spinner while work is done."""
    with Progress(
        SpinnerColumn(style="tulars.accent"),
        TextColumn(f"[tulars.silver]{message}[/tulars.silver]"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as prog:
        prog.add_task("", total=None)
        yield prog


# ── Utility ──────────────────────────────────────────────────────────────────


def ok(message: str) -> None:
    console.print(f"  [tulars.ok]✓[/tulars.ok]  {message}")


def err(message: str) -> None:
    err_console.print(f"  [tulars.err]✗[/tulars.err]  [tulars.err]{escape(message)}[/tulars.err]")


def info(message: str) -> None:
    console.print(f"  [tulars.muted]·[/tulars.muted]  [tulars.silver]{message}[/tulars.silver]")
