"""Report rendering for the CLI.

Three formats are supported for ``check`` reports:

- ``table``: rich table plus a summary, for people.
- ``json``: the report as an indented JSON document.
- ``minimal``: one ``path:line:column text`` line per finding.
"""

from __future__ import annotations

import json
import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from emoji_linter.linter import FixReport, LintReport

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json", "minimal")

MAX_PATH_WIDTH = 40
MAX_CONTEXT_WIDTH = 60


def format_duration(seconds: float) -> str:
    """Format a duration as ``"12ms"`` below one second, else ``"1.50s"``."""
    if seconds < 1:
        return f"{round(seconds * 1000)}ms"
    return f"{seconds:.2f}s"


def _shorten(value: str, width: int, *, keep_end: bool = True) -> str:
    if len(value) <= width:
        return value
    if keep_end:
        return "..." + value[-(width - 3) :]
    return value[: width - 3] + "..."


def render_json(report: LintReport) -> str:
    """Serialize a report as indented JSON."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def render_minimal(report: LintReport) -> list[str]:
    """Return one ``path:line:column text`` line per finding."""
    return [
        f"{result.path}:{match.line}:{match.column_start} {match.text}"
        for result in report.files
        for match in result.matches
    ]


def build_table(report: LintReport, show_context: bool = True) -> Table:
    """Build the findings table for a report."""
    table = Table(title="Emoji Detection Results")
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    table.add_column("Emoji")
    table.add_column("Type", style="magenta")
    if show_context:
        table.add_column("Context", style="dim")

    for result in report.files_with_emojis:
        file_label = _shorten(str(result.path), MAX_PATH_WIDTH)
        for match in result.matches:
            row = [
                Text(file_label),
                str(match.line),
                str(match.column_start),
                Text(match.text),
                match.category.value,
            ]
            if show_context:
                context = result.context.get(match.line, "")
                row.append(Text(_shorten(context, MAX_CONTEXT_WIDTH, keep_end=False)))
            table.add_row(*row)
    return table


def print_summary(report: LintReport, console: Console) -> None:
    """Print the totals block shown under the table."""
    summary = report.summary
    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Files processed:   {summary.total_files}")
    console.print(f"  Files with emojis: {summary.files_with_emojis}")
    console.print(f"  Total emojis:      {summary.total_emojis}")
    if summary.by_category:
        console.print("  By type:")
        for category, count in sorted(summary.by_category.items()):
            console.print(f"    {category}: {count}")
    if summary.errors:
        console.print(f"  [red]Errors:            {summary.errors}[/red]")
    console.print(f"  [dim]Time: {format_duration(summary.processing_time)}[/dim]")


def print_errors(report: LintReport, console: Console) -> None:
    """Print one line per file that could not be scanned."""
    for result in report.files:
        if result.error is not None:
            console.print(
                f"[red]Error:[/red] {escape(str(result.path))}: {escape(result.error.message)}",
                emoji=False,
            )


def print_report(
    report: LintReport,
    output_format: str = "table",
    console: Console | None = None,
    show_context: bool = True,
) -> None:
    """Render a check report in the requested format.

    Args:
        report: Report from :meth:`EmojiLinter.check`.
        output_format: One of ``table``, ``json`` or ``minimal``.
        console: Console to print to. Defaults to a new stdout console.
        show_context: Include the source line column in table output.

    Raises:
        ValueError: If the format is unknown.
    """
    console = console or Console()

    if output_format == "json":
        console.out(render_json(report), highlight=False)
        return

    if output_format == "minimal":
        lines = render_minimal(report)
        console.out("\n".join(lines) if lines else "No emojis found.", highlight=False)
        return

    if output_format != "table":
        raise ValueError(f"Unknown output format: {output_format}")

    if report.has_emojis:
        console.print(build_table(report, show_context=show_context))
    else:
        console.print("[green]No emojis found in any files.[/green]")
    print_errors(report, console)
    print_summary(report, console)


def print_fix_report(report: FixReport, console: Console | None = None) -> None:
    """Render the outcome of a fix run."""
    console = console or Console()
    verb = "Would remove" if report.dry_run else "Removed"

    for fix in report.files:
        if fix.error is not None:
            console.print(
                f"[red]Error:[/red] {escape(str(fix.path))}: {escape(fix.error.message)}",
                emoji=False,
            )
        elif fix.removed:
            plural = "emoji" if fix.removed == 1 else "emojis"
            console.print(
                f"{verb} {fix.removed} {plural} from [cyan]{escape(str(fix.path))}[/cyan]",
                emoji=False,
            )
            if fix.backup_path is not None:
                console.print(f"  [dim]Backup: {escape(str(fix.backup_path))}[/dim]", emoji=False)

    if report.total_removed == 0 and not report.errors:
        console.print("[green]No emojis to remove.[/green]")
        return

    files = sum(1 for f in report.files if f.error is None and f.removed)
    console.print(
        f"\n[bold]{verb} {report.total_removed} emoji(s) from {files} file(s)[/bold] "
        f"[dim]({format_duration(report.processing_time)})[/dim]"
    )
