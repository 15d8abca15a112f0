"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from deadsbd import __version__
from deadsbd.core.download_manager import DownloadManager
from deadsbd.core.show_lister import ShowLister
from deadsbd.exceptions import DeadSbdError
from deadsbd.models.config import ArchiveConfig
from deadsbd.storage.config_manager import ConfigManager
from deadsbd.utils.formatting import pluralize
from deadsbd.web.page_fetcher import PageFetcher

from .formatters import print_batch_summary, print_config, print_show_report

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("deadsbd")

app = typer.Typer(
    name="deadsbd",
    help=(
        "Download Grateful Dead soundboard recordings from archive.org. Use"
        " 'deadsbd <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)

USAGE = (
    "Valid options are `list`, `fetch <showname>`, `fetch all`, "
    "or `fetch slice <start> <end>`."
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "deadsbd"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


def _config_file(ctx: typer.Context) -> Path:
    if ctx.obj and ctx.obj.get("config_file"):
        return ctx.obj["config_file"]
    return CONFIG_FILE


def _load_config(ctx: typer.Context, cli_options: dict[str, Any]) -> ArchiveConfig:
    """Loads the config file with the non-empty CLI overrides applied."""
    overrides = {key: value for key, value in cli_options.items() if value is not None}
    return ConfigManager(_config_file(ctx)).load_config(overrides)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    config_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to the configuration file.",
        dir_okay=False,
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the effective configuration."
    ),
):
    """Grateful Dead Soundboard Downloader"""
    if version:
        console.print(f"[bold]deadsbd[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("deadsbd").setLevel(log_level)

    ctx.obj = {"config_file": config_file or CONFIG_FILE}

    if show_config:
        path = _config_file(ctx)
        try:
            config = ConfigManager(path).load_config()
        except DeadSbdError as e:
            console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
            raise typer.Exit(code=1) from e
        print_config(path, config, exists=path.is_file())
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(f"You need to specify something to do. {USAGE}")


@app.command(name="list")
def list_command(
    ctx: typer.Context,
    pages: int | None = typer.Option(
        None, "--pages", help="Number of listing pages to scan."
    ),
):
    """List all soundboard shows, oldest first."""
    config = _load_config(ctx, {"page_count": pages})

    async def _list_async() -> int:
        count = 0
        async with PageFetcher(config) as fetcher:
            async for show_name in ShowLister(config, fetcher).iter_shows():
                console.print(show_name, markup=False, highlight=False)
                count += 1
        return count

    console.print("[cyan]Fetching list of shows...[/cyan]")
    try:
        total = asyncio.run(_list_async())
    except DeadSbdError as e:
        console.print(
            f"[bold red]✗ Failed to list shows: {escape(str(e))}[/bold red]"
        )
        raise typer.Exit(code=1) from e
    console.print(f"\n[green]✓ Found {pluralize(total, 'show')}.[/green]")


@app.command(name="fetch")
def fetch_command(
    ctx: typer.Context,
    target: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="A show name as printed by `list`, `all`, or `slice <START> <END>`.",
        metavar="<SHOW> | all | slice <START> <END>",
    ),
    output_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "-o",
        "--output-dir",
        help="Directory in which show directories are created.",
        file_okay=False,
    ),
    pages: int | None = typer.Option(
        None, "--pages", help="Number of listing pages to scan for `all`/`slice`."
    ),
):
    """Download one show, all shows, or an inclusive slice of shows."""
    if not target:
        console.print(f"Please specify a show to fetch or `all`. {USAGE}")
        raise typer.Exit()

    if target == ["all"]:
        mode, description = "all", "all shows"
    elif target[0] == "slice":
        if len(target) != 3:
            console.print(f"`fetch slice` needs a start and an end show. {USAGE}")
            raise typer.Exit()
        start, end = escape(target[1]), escape(target[2])
        mode, description = "slice", f'shows "{start}" to "{end}"'
    elif len(target) == 1:
        mode, description = "show", f'show "{escape(target[0])}"'
    else:
        console.print(
            f"Invalid command. Quote show names that contain spaces. {USAGE}"
        )
        raise typer.Exit()

    config = _load_config(
        ctx,
        {
            "output_dir": str(output_dir) if output_dir else None,
            "page_count": pages,
        },
    )

    async def _fetch_async():
        async with PageFetcher(config) as fetcher:
            manager = DownloadManager(config, fetcher)
            if mode == "all":
                return await manager.fetch_all()
            if mode == "slice":
                return await manager.fetch_slice(target[1], target[2])
            return await manager.fetch_show(target[0])

    start_time = time.monotonic()
    try:
        result = asyncio.run(_fetch_async())
    except DeadSbdError as e:
        console.print(
            f"[bold red]✗ Failed to download {description}: {escape(str(e))}[/bold red]"
        )
        raise typer.Exit(code=1) from e
    duration = time.monotonic() - start_time

    if mode == "show":
        print_show_report(result, duration)
    else:
        print_batch_summary(result, duration)


@app.command()
def init(
    ctx: typer.Context,
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing file without asking."
    ),
):
    """Write a configuration file with the default settings."""
    path = _config_file(ctx)
    if (
        path.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    ConfigManager(path).save_new_config()
    console.print(f"[bold green]✓ Configuration saved to '{path}'[/bold green]")


@app.command()
def diagnose(ctx: typer.Context):
    """Check the configuration and that the archive listing can be scraped."""
    console.print("\n[bold cyan]Running diagnostics...[/bold cyan]\n")
    path = _config_file(ctx)
    if path.is_file():
        console.print(f"[green]✓[/] Config file exists at: [dim]{path}[/dim]")
    else:
        console.print(f"[yellow]○[/] No config file at [dim]{path}[/dim], using defaults.")

    try:
        config = ConfigManager(path).load_config()
        console.print("[green]✓[/] Configuration is valid.")
    except DeadSbdError as e:
        console.print(f"[red]✗ Configuration validation failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("\n[dim]Testing connectivity to archive.org...[/dim]")

    async def test_listing() -> bool:
        async with PageFetcher(config) as fetcher:
            lister = ShowLister(config, fetcher)
            try:
                document = await fetcher.fetch_document(lister.page_url(0))
            except DeadSbdError as e:
                console.print(f"[red]✗ Connection test failed: {e}[/red]")
                return False
        shows = lister.parse_page(document)
        if not shows:
            console.print(
                "[red]✗ Listing page was fetched but no shows were found.[/red] "
                "The page layout may have changed."
            )
            return False
        console.print(
            f"[green]✓[/] Listing page parsed ({pluralize(len(shows), 'show')})."
        )
        return True

    if not asyncio.run(test_listing()):
        console.print("\n[bold red]✗ Some issues were found.[/bold red]\n")
        raise typer.Exit(code=1)
    console.print("\n[bold green]✓ All checks passed![/bold green]\n")
