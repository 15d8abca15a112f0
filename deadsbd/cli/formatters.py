"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from deadsbd.models.config import ArchiveConfig
from deadsbd.models.stats import BatchReport, DownloadReport
from deadsbd.utils.formatting import format_duration, pluralize


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "NetworkError": [
            "• A network connection issue occurred.",
            "• archive.org might be temporarily unavailable.",
            "• Run `deadsbd diagnose` to check connectivity.",
        ],
        "NotFoundError": [
            "• Show names must match the titles printed by `deadsbd list`.",
            "• Quote names that contain spaces.",
        ],
        "DirectoryError": [
            "• The show may already be downloaded; remove or rename its directory.",
            "• Check write permissions on the output directory (-o).",
        ],
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `deadsbd init --force` to write a fresh default configuration.",
        ],
        "TimeoutError": [
            "• A request timed out, which may indicate network throttling.",
            "• Increase `request_timeout` in the configuration file.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config: ArchiveConfig, exists: bool = True):
    """Displays the effective configuration."""
    console = Console()
    content = "\n".join(
        f"{key} = {escape(str(value))}" for key, value in config.model_dump().items()
    )
    source = f"[dim]{config_path}[/dim]" if exists else "[dim]defaults[/dim]"
    console.print(
        Panel(content, title=f"Configuration ({source})", border_style="cyan")
    )


def print_show_report(report: DownloadReport, duration_s: float):
    """Displays the outcome of a single show download."""
    console = Console()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right", width=14)
    table.add_column()

    table.add_row("Show:", escape(report.show_name))
    table.add_row("Directory:", f"[dim]{escape(str(report.directory))}[/dim]")
    table.add_row("✓ Downloaded:", f"[bold green]{report.succeeded}[/bold green]")
    if report.failed:
        table.add_row("✗ Failed:", f"[bold red]{report.failed}[/bold red]")
    table.add_row("Duration:", format_duration(duration_s))

    border = "green" if not report.failed else "yellow"
    console.print(Panel(table, title="[bold]Download Summary[/bold]", border_style=border))

    if report.failures:
        failures = Table(title="Failed Tracks")
        failures.add_column("#", style="dim", justify="right")
        failures.add_column("Track", style="cyan")
        failures.add_column("Error", style="red")
        for failure in report.failures:
            failures.add_row(
                f"{failure.position:02}",
                escape(failure.display_name),
                escape(failure.error),
            )
        console.print(failures)


def print_batch_summary(batch: BatchReport, duration_s: float):
    """Displays per-show outcomes of an 'all' or 'slice' run."""
    console = Console()

    if not batch.outcomes:
        console.print("[yellow]No shows were downloaded.[/yellow]")
        return

    table = Table(title="Shows")
    table.add_column("Show", style="cyan")
    table.add_column("Tracks", justify="right", style="green")
    table.add_column("Failed", justify="right")
    table.add_column("Status")
    for outcome in batch.outcomes:
        if outcome.report:
            failed = outcome.report.failed
            table.add_row(
                escape(outcome.show_name),
                str(outcome.report.succeeded),
                f"[red]{failed}[/red]" if failed else "0",
                "[green]✓[/green]",
            )
        elif outcome.skipped:
            table.add_row(
                escape(outcome.show_name), "-", "-", "[yellow]↷ listed again[/yellow]"
            )
        else:
            table.add_row(
                escape(outcome.show_name),
                "-",
                "-",
                f"[red]✗ {escape(str(outcome.error))}[/red]",
            )
    console.print(table)

    console.print(
        f"\n[bold green]✓ {pluralize(batch.shows_downloaded, 'show')}[/bold green] "
        f"({pluralize(batch.tracks_downloaded, 'track')}) downloaded"
        + (
            f", [bold red]{pluralize(batch.shows_failed, 'show')} failed[/bold red]"
            if batch.shows_failed
            else ""
        )
        + (
            f", [red]{pluralize(batch.tracks_failed, 'track')} failed[/red]"
            if batch.tracks_failed
            else ""
        )
        + (
            f", [yellow]{batch.shows_skipped} skipped[/yellow]"
            if batch.shows_skipped
            else ""
        )
        + f" in {format_duration(duration_s)}."
    )
