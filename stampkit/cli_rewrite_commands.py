"""File editing commands - rewrite, relpath."""
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from stampkit.cli_support import handle_cli_error, print_info, print_success
from stampkit.core.config import get_settings
from stampkit.templating.paths import relative_path_to
from stampkit.templating.splice import RewriteRequest, rewrite_file

# Module-level console instance (will be set by register function)
console: Console = Console()


def rewrite(
    file: str = typer.Argument(..., help="File to rewrite, relative to --path"),
    marker: str = typer.Option(..., "--marker", "-m", help="Text identifying the line to insert after"),
    lines: List[str] = typer.Option(..., "--line", "-l", help="Line to insert (repeatable, kept in order)"),
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Base directory (default: current directory)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show traceback on error"),
):
    """Insert lines after the last line containing a marker.

    The lines are indented like the marker line. Nothing changes if the
    lines are already present or no line contains the marker.

    Examples:
        stamp rewrite src/app.js -m "// routes" -l "app.use(users);"
    """
    try:
        request = RewriteRequest(marker=marker, splicable=lines, path=path, file=file)
        target = Path(request.path or ".") / file
        with open(target, encoding=get_settings().encoding, newline="") as f:
            before = f.read()
        after = rewrite_file(request)
    except Exception as e:
        handle_cli_error(e, console, verbose)

    if after == before:
        print_info(console, f"{file} unchanged")
    else:
        print_success(console, f"Updated {file} ({len(lines)} line(s) inserted)")


def relpath(
    from_file: str = typer.Argument(..., help="File containing the reference"),
    to_file: str = typer.Argument(..., help="File being referenced"),
    strip: bool = typer.Option(False, "--strip", help="Drop a trailing /index.js or .js"),
):
    """Print the relative path used to require TO_FILE from FROM_FILE."""
    console.print(relative_path_to(from_file, to_file, strip), highlight=False, markup=False, soft_wrap=True)


def register_rewrite_commands(app: typer.Typer, shared_console: Console):
    """Register file editing commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(rewrite)
    app.command()(relpath)
