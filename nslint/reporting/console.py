# Rich console output: format detected calls for terminal display.

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nslint.findings.models import DetectedCall

# Severity → Rich style
SEVERITY_STYLE = {
    "error": "bold red",
    "note": "bold blue",
}

DEFAULT_SEVERITY_STYLE = "bold white"


def _severity_style(severity: str) -> str:
    return SEVERITY_STYLE.get(severity.lower(), DEFAULT_SEVERITY_STYLE)


def print_calls(
    calls: Sequence[DetectedCall],
    analyzed_files: Sequence[Path] | None = None,
    console: Optional[Console] = None,
) -> None:
    """
    Print detected calls grouped by file, coloured by severity, with the
    offending source line under each table. If analyzed_files is provided,
    a per-file summary table (clean vs. violations) follows.
    """
    if console is None:
        console = Console()

    if not calls and not analyzed_files:
        console.print(
            Panel(
                "[green]No calls found.[/green]",
                title="NSLocalizedString Lint",
                border_style="green",
                box=box.ROUNDED,
            )
        )
        return

    by_file: dict[str, list[DetectedCall]] = {}
    for c in calls:
        by_file.setdefault(c.location.file, []).append(c)

    for name in sorted(by_file):
        file_calls = sorted(by_file[name], key=lambda x: (x.location.line, x.location.column))

        console.print()
        console.print(Panel(
            f"[bold cyan]{name}[/bold cyan]",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE,
            padding=(0, 1),
            expand=False,
        )
        table.add_column("Line", justify="right", style="dim", width=5)
        table.add_column("Col", justify="right", style="dim", width=4)
        table.add_column("Severity", width=8)
        table.add_column("Message", style="white")

        for c in file_calls:
            table.add_row(
                str(c.location.line),
                str(c.location.column),
                Text(c.severity.upper(), style=_severity_style(c.severity)),
                c.message,
            )
        console.print(table)

        for c in file_calls:
            if c.source_line.strip():
                console.print(Text(f"  |-- {c.source_line.strip()}", style="dim"))
        console.print()

    if analyzed_files:
        _print_file_summary_table(calls, analyzed_files, console)

    _print_summary(calls, console)


def _print_file_summary_table(
    calls: Sequence[DetectedCall],
    analyzed_files: Sequence[Path],
    console: Console,
) -> None:
    """Print a table of clean files vs. files with violations."""
    by_path: dict[str, int] = {}
    for c in calls:
        if c.is_violation:
            by_path[c.location.file] = by_path.get(c.location.file, 0) + 1

    table = Table(
        title="Files Summary",
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        padding=(0, 1),
    )
    table.add_column("File", style="white")
    table.add_column("Status", width=10)
    table.add_column("Violations", justify="right", width=10)

    for p in sorted(analyzed_files, key=lambda p: (str(p) not in by_path, str(p))):
        count = by_path.get(str(p), 0)
        status = Text("FAIL", style="bold red") if count else Text("OK", style="bold green")
        table.add_row(str(p), status, str(count))

    console.print()
    console.print(Panel(table, border_style="cyan", box=box.ROUNDED))


def _print_summary(calls: Sequence[DetectedCall], console: Console) -> None:
    """Print a compact summary: violation count plus a count per severity."""
    by_severity: dict[str, int] = {}
    for c in calls:
        by_severity[c.severity] = by_severity.get(c.severity, 0) + 1

    violations = sum(1 for c in calls if c.is_violation)
    summary_parts = [f"[bold]{violations} violation{'s' if violations != 1 else ''}[/bold]"]
    for sev in ("error", "note"):
        if sev in by_severity:
            summary_parts.append(f"[{_severity_style(sev)}]{by_severity[sev]} {sev}[/]")

    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title="Summary",
            border_style="yellow" if violations else "green",
            box=box.ROUNDED,
        )
    )
