"""
Console entry point for deadsbd.

Click's standalone mode is turned off so that usage mistakes (unknown
commands or options) print the usage line and exit cleanly, while pipeline
failures keep exiting with a non-zero status.
"""

import asyncio
import logging
import os
import sys

import click
import typer
from rich.console import Console
from rich.markup import escape

from deadsbd.cli.app import USAGE, app
from deadsbd.cli.formatters import format_error_with_suggestions
from deadsbd.exceptions import DeadSbdError

log = logging.getLogger("deadsbd")


def main() -> None:
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    console = Console()

    try:
        exit_code = app(standalone_mode=False)
    except click.UsageError as e:
        console.print(f"[yellow]{escape(e.format_message())}[/yellow]")
        console.print(USAGE)
        sys.exit(0)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except (typer.Abort, KeyboardInterrupt, asyncio.CancelledError):
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        sys.exit(0)
    except DeadSbdError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)

    # Without standalone mode, typer.Exit codes are returned instead of raised.
    if isinstance(exit_code, int) and exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
