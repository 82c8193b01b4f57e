# snibbets/main.py
"""
Snibbets Entry Point

Searches the snippets folder and prints the chosen snippet:
- Terminal mode: numbered menus on stderr, code on stdout
- Quiet mode (--quiet): no menus, first match wins
- LaunchBar mode (--output launchbar): JSON items for the LaunchBar action
"""

import os
import select
import stat
import sys
from pathlib import Path
from typing import List, Optional, Sequence
from urllib.parse import unquote_plus

import typer
from rich.console import Console

from snibbets import __version__
from snibbets.config import get_settings
from snibbets.core.constants import OutputFormat, SearchBackendType
from snibbets.core.exceptions import EmptyQueryError, SnibbetsException
from snibbets.core.models import SearchResult
from snibbets.output.formatter import format_file_list, format_launchbar, format_plain, to_json
from snibbets.search.locator import FileLocator, list_snippet_files
from snibbets.ui.cli.menu import MenuCancelled, select_from_menu
from snibbets.utils.logger import log_exception, logger, setup_logger

# Messages go to stderr, stdout carries snippets only
err_console = Console(stderr=True)

# CLI App
app = typer.Typer(
    name="snibbets",
    help="Snibbets - search your snippet collection",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"snibbets {__version__}")
        raise typer.Exit()


def stdin_has_data() -> bool:
    """
    Check, without blocking, whether stdin has something to read.

    Terminals never count. Regular files count when non-empty, pipes when
    data (or end of input) is waiting. Streams without a file descriptor
    are in-memory and safe to read.
    """
    try:
        fileno = sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        return True

    if os.isatty(fileno):
        return False

    info = os.fstat(fileno)
    if stat.S_ISREG(info.st_mode):
        return info.st_size > 0

    readable, _, _ = select.select([fileno], [], [], 0)
    return bool(readable)


def read_query(words: Sequence[str], from_stdin: bool = False) -> str:
    """
    Assemble the raw query.

    LaunchBar may pass the query on stdin; when it does, stdin wins over
    the command line words. An open but empty stdin is never waited on.
    """
    if from_stdin and stdin_has_data():
        piped = sys.stdin.read()
        if piped.strip():
            return piped
    return " ".join(words)


def decode_query(raw: str) -> str:
    """
    Percent-decode a query and reject blank ones.

    Raises:
        EmptyQueryError: If nothing is left to search for
    """
    query = unquote_plus(raw).strip()
    if not query:
        raise EmptyQueryError()
    return query


def print_snippets(results: List[SearchResult], output_format: OutputFormat, interactive: bool) -> None:
    """Pick a file and a snippet, then print it."""
    if not results:
        err_console.print("No results")
        return

    if len(results) == 1 or not interactive:
        chosen = results[0]
    else:
        chosen = select_from_menu(results, "Select a file")

    snippets = chosen.snippets
    if not snippets:
        err_console.print("No snippets found")
        return

    if len(snippets) == 1 or not interactive:
        typer.echo(format_plain(snippets, output_format))
    else:
        answer = select_from_menu(snippets, "Select snippet")
        typer.echo(answer.code)


def print_file_list(folder: Path, launchbar: bool) -> None:
    """Print every snippet file in the folder."""
    files = list_snippet_files(folder)
    if launchbar:
        typer.echo(to_json(format_file_list(files)))
    elif not files:
        err_console.print("No snippet files found")
    else:
        for snippet_file in files:
            typer.echo(snippet_file.title)


@app.command()
def main(
    ctx: typer.Context,
    query: Optional[List[str]] = typer.Argument(None, help="Words to search for"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip menus and display first match"),
    output: str = typer.Option("raw", "--output", "-o", help="Output format (raw, json, launchbar or lb)"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Snippets folder to search"),
    backend: Optional[SearchBackendType] = typer.Option(
        None, "--backend", "-b", case_sensitive=False, help="Search backend (find or spotlight)"
    ),
    list_files: bool = typer.Option(False, "--list", "-l", help="List all snippet files instead of searching"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """
    Search a folder of Markdown snippet files.

    \b
    Files are matched by name first and by content when no name matches.
    Each header in a matched file titles the code block below it.
    """
    settings = get_settings()

    # Setup logging
    setup_logger(
        level="DEBUG" if verbose else settings.logging.level,
        log_file=settings.log_file(),
        rotation=settings.logging.file.rotation,
        retention=settings.logging.file.retention,
    )

    output_format = OutputFormat.parse(output)
    if output_format is None:
        logger.warning(f"Unknown output format '{output}', using raw")
        output_format = OutputFormat.RAW

    launchbar = output_format is OutputFormat.LAUNCHBAR
    interactive = not (quiet or launchbar)
    folder = Path(source).expanduser().absolute() if source else settings.source_folder()

    try:
        if list_files:
            print_file_list(folder, launchbar)
            return

        search_query = decode_query(read_query(query or [], from_stdin=launchbar))
        locator = FileLocator.for_backend(backend or settings.backend)
        results = locator.search(search_query, folder)

        if launchbar:
            typer.echo(to_json(format_launchbar(results)))
        else:
            print_snippets(results, output_format, interactive)

    except EmptyQueryError as e:
        typer.echo(e.message)
        typer.echo(ctx.get_help())
        raise typer.Exit(1)
    except MenuCancelled:
        raise typer.Exit(0)
    except SnibbetsException as e:
        log_exception(e, e.context)
        err_console.print(f"✗ {e.message}", style="bold red", markup=False, highlight=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
