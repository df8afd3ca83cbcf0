"""Rich display utilities for CLI output."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from islbridge.core.utils import format_duration
from islbridge.translation import GlossSequence, PlaybackPlan

console = Console()


def coverage_color(coverage: float) -> str:
    """Get color for a catalog coverage fraction."""
    if coverage >= 0.8:
        return "green"
    if coverage >= 0.5:
        return "yellow"
    return "red"


def print_translation(result: GlossSequence) -> None:
    """Print glosses, coverage and missing signs for a translation."""
    if result.is_empty:
        console.print("[dim]No glosses[/]")
        return

    console.print(f"[bold]Glosses:[/] {result.to_string()}", highlight=False)

    if result.report is None:
        return

    coverage = result.report.coverage
    console.print(f"[dim]Coverage:[/] [{coverage_color(coverage)}]{coverage:.0%}[/]")

    for gloss in result.report.missing:
        alternatives = result.suggestions.get(gloss) or []
        hint = f" (try: {', '.join(alternatives)})" if alternatives else ""
        console.print(f"[yellow]Missing sign:[/] {gloss}{hint}", highlight=False)


def print_playback_table(plan: PlaybackPlan) -> None:
    """Print a playback plan as a timeline table."""
    if not plan.steps:
        return

    table = Table(title=f"Playback ({plan.speed:g}x, {format_duration(plan.total_ms)})")
    table.add_column("#", justify="right")
    table.add_column("Gloss", style="bold")
    table.add_column("Clip")
    table.add_column("Start", justify="right")
    table.add_column("Duration", justify="right")

    for step in plan.steps:
        clip = Text(step.clip, style="dim" if step.is_fallback else "green")
        table.add_row(
            str(step.index + 1),
            step.gloss,
            clip,
            format_duration(step.start_ms),
            f"{step.duration_ms}ms",
        )

    console.print(table)


def print_sign_table(signs: list[str], title: str = "Signs") -> None:
    """Print a table of catalog signs."""
    if not signs:
        console.print(f"[dim]No {title.lower()} found[/]")
        return

    table = Table(title=f"{title} ({len(signs)})")
    table.add_column("#", justify="right")
    table.add_column("Gloss", style="bold")

    for position, gloss in enumerate(signs, start=1):
        table.add_row(str(position), gloss)

    console.print(table)
