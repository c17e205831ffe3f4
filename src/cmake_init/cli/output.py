"""Rich terminal output for scaffolding results."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from cmake_init.scaffold.init import ScaffoldResult


def render_success(result: ScaffoldResult, console: Console) -> None:
    """Print the success notice, the touched files and the next step.

    Paths are escaped since they carry the user-chosen project name.

    Args:
        result: Outcome of the scaffolding run.
        console: Rich Console for output.
    """
    console.print("[green][bold]Successfully generated![/bold][/green]")
    for path in result.created:
        console.print(f"  [green]✓[/green] {escape(path)}")
    for path in result.appended:
        console.print(f"  [green]✓[/green] {escape(path)} (updated)")
    for path in result.skipped:
        console.print(f"  [dim]- {escape(path)} (exists, left unchanged)[/dim]")
    if result.repository_initialized:
        console.print("  [green]✓[/green] initialized git repository")
    console.print(f"Run [bold]`{result.follow_up}`[/bold] to get started")
