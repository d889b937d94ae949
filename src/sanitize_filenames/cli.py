"""sanitize_filenames CLI

Command line interface built with typer.
"""

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from sanitize_filenames.clipboard import ClipboardHandler
from sanitize_filenames.models import DEFAULT_REPLACEMENT, Config, RunSummary
from sanitize_filenames.reporter import ConsoleReporter, EventCollector
from sanitize_filenames.sanitizer import sanitized_filename
from sanitize_filenames.walker import run

EXAMPLES = """Examples:

Sanitize a single file in the current directory:
sanitize-filenames rename "My File.txt"

Preview changes without renaming:
sanitize-filenames rename --dry-run "My File.txt"

Sanitize recursively and use '-' as the separator:
sanitize-filenames rename --recursive --replacement - ~/Downloads

Sanitize a file whose name starts with a dash:
sanitize-filenames rename -- "--weird name.mp3"
"""

app = typer.Typer(
    name="sanitize-filenames",
    help="Rename files and directories to remove whitespace and special characters",
    epilog=EXAMPLES,
    no_args_is_help=True,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

ReplacementOption = Annotated[
    str,
    typer.Option(
        "-c",
        "--replacement",
        metavar="CHAR",
        envvar="SANITIZE_FILENAMES_REPLACEMENT",
        help="Replacement character to use",
    ),
]
FullSanitizeOption = Annotated[
    bool,
    typer.Option(
        "-F",
        "--full-sanitize",
        help="Replace everything except ASCII letters, digits, '_' and '-'",
    ),
]


def setup_logging(verbose: bool) -> None:
    """Send library logging to stderr through rich"""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def build_config(**options) -> Config:
    """Build a Config, exiting with status 1 on invalid options"""
    try:
        return Config(**options)
    except ValidationError as e:
        for error in e.errors():
            err_console.print(f"[red]{escape(str(error['msg']).removeprefix('Value error, '))}[/red]")
        raise typer.Exit(1)


def print_summary(summary: RunSummary, dry_run: bool) -> None:
    table = Table(title="Summary")
    table.add_column("Result")
    table.add_column("Count", justify="right")

    if dry_run:
        table.add_row("[cyan]Would rename[/cyan]", str(summary.would_rename))
    else:
        table.add_row("[green]Renamed[/green]", str(summary.renamed))
        table.add_row("[red]Failed[/red]", str(summary.failed))
    table.add_row("Unchanged", str(summary.unchanged))
    table.add_row("[yellow]Missing[/yellow]", str(summary.missing))
    table.add_row("[yellow]Collisions[/yellow]", str(summary.collisions))

    console.print(table)


@app.command()
def rename(
    targets: Annotated[
        list[str],
        typer.Argument(help="Files or directories to sanitize in place"),
    ],
    recursive: Annotated[
        bool,
        typer.Option(
            "-r", "--recursive", help="Recursively sanitize directories and their contents"
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("-n", "--dry-run", help="Show actions without renaming files"),
    ] = False,
    replacement: ReplacementOption = DEFAULT_REPLACEMENT,
    full_sanitize: FullSanitizeOption = False,
    summary: Annotated[
        bool,
        typer.Option("--summary/--no-summary", help="Print totals when done"),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show debug logging"),
    ] = False,
) -> None:
    """Sanitize file and directory names in place"""
    setup_logging(verbose)

    config = build_config(
        recursive=recursive,
        dry_run=dry_run,
        replacement=replacement,
        full_sanitize=full_sanitize,
        targets=targets,
    )

    if not config.targets:
        err_console.print("[red]No files or directories specified[/red]")
        raise typer.Exit(1)

    collector = EventCollector(forward=ConsoleReporter(console))
    try:
        run(config, collector)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    finally:
        if summary:
            print_summary(collector.summary(), config.dry_run)


@app.command()
def preview(
    names: Annotated[
        list[str],
        typer.Argument(help="Names or paths to show sanitized"),
    ],
    replacement: ReplacementOption = DEFAULT_REPLACEMENT,
    full_sanitize: FullSanitizeOption = False,
    copy: Annotated[
        bool,
        typer.Option("--copy", help="Copy the sanitized names to the clipboard"),
    ] = False,
) -> None:
    """Print sanitized names without renaming anything"""
    config = build_config(replacement=replacement, full_sanitize=full_sanitize)

    results = [sanitized_filename(name, config.replacement, config.mode) for name in names]
    for result in results:
        console.print(escape(result), soft_wrap=True)

    if copy:
        if ClipboardHandler.copy_names(results):
            err_console.print(f"[green]✓[/green] Copied {len(results)} names to the clipboard")
        else:
            err_console.print("[yellow]Clipboard is not available[/yellow]")


if __name__ == "__main__":
    app()
