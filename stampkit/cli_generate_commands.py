"""Template tree commands - generate, filters."""
from collections import Counter
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from stampkit.cli_support import (
    find_config,
    handle_cli_error,
    print_info,
    print_success,
    print_warning,
    setup_file_logging,
)
from stampkit.config.loader import ConfigLoader
from stampkit.models.template import FileAction
from stampkit.scaffold.core import DryRunGenerator, Generator
from stampkit.templating.directory import DirectoryProcessor
from stampkit.templating.filters import enabled_filters

# Module-level console instance (will be set by register function)
console: Console = Console()

_ACTION_STYLES = {
    FileAction.COPY: "blue",
    FileAction.TEMPLATE: "green",
    FileAction.SKIP: "dim",
}


def generate(
    source: str = typer.Argument(..., help="Template directory (relative to the templates dir unless absolute)"),
    destination: str = typer.Argument(..., help="Directory to write the generated files to"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name substituted for 'name' in file paths"),
    filter_tags: Optional[List[str]] = typer.Option(None, "--filter", "-f", help="Enable a filter tag (repeatable)"),
    templates_dir: Optional[Path] = typer.Option(None, "--templates-dir", "-t", help="Root for relative template sources"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Project config file path"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be written without writing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """Stamp a template directory into a destination.

    File names may carry filter tags like `(docker)Dockerfile`; tagged files are
    only written when every tag is enabled. A leading `_` is stripped from
    output names, and a leading `!` copies the file without rendering.

    Examples:
        stamp generate app ./my-app --name my-app
        stamp generate app ./my-app -f docker -f ci --dry-run
    """
    setup_file_logging(log_file, verbose)

    try:
        loader = ConfigLoader(find_config(config))
        generator_cls = DryRunGenerator if dry_run else Generator
        generator = generator_cls.from_config(
            loader,
            template_dir=templates_dir,
            name=name,
            extra_filters=filter_tags or [],
        )
        results = generator.process_directory(source, destination)
    except Exception as e:
        handle_cli_error(e, console, verbose)

    table = Table(title="Dry run" if dry_run else "Generated files", show_header=True)
    table.add_column("Action", style="bold")
    table.add_column("Template", style="cyan")
    table.add_column("Destination")
    for result in results:
        style = _ACTION_STYLES[result.action]
        table.add_row(
            f"[{style}]{result.action.value}[/{style}]",
            result.descriptor.raw_name,
            result.destination if result.written else "",
        )
    console.print(table)

    counts = Counter(result.action for result in results)
    summary = (
        f"{counts[FileAction.TEMPLATE]} rendered, "
        f"{counts[FileAction.COPY]} copied, "
        f"{counts[FileAction.SKIP]} skipped"
    )
    if dry_run:
        print_info(console, f"Dry run: {summary}")
    elif not results:
        print_warning(console, "No template files found")
    else:
        print_success(console, summary)


def filters(
    source: str = typer.Argument(..., help="Template directory"),
    templates_dir: Optional[Path] = typer.Option(None, "--templates-dir", "-t", help="Root for relative template sources"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Project config file path"),
):
    """List filter tags used by a template directory and whether they are enabled."""
    try:
        loader = ConfigLoader(find_config(config))
        generator = Generator.from_config(loader, template_dir=templates_dir)
        processor = DirectoryProcessor(generator, generator.filters)
        root = processor.resolve_root(source)
        files = generator.expand_files("**", dot=True, cwd=root)
    except Exception as e:
        handle_cli_error(e, console)

    usage: Counter = Counter()
    for f in files:
        usage.update(set(processor.describe(f).filters))

    if not usage:
        print_info(console, f"No filter tags in {root}")
        return

    enabled = enabled_filters(generator.filters)
    table = Table(title=f"Filters in {root}", show_header=True)
    table.add_column("Filter", style="cyan")
    table.add_column("Files", justify="right")
    table.add_column("Enabled")
    for tag in sorted(usage):
        state = "[green]yes[/green]" if tag in enabled else "[red]no[/red]"
        table.add_row(tag, str(usage[tag]), state)
    console.print(table)


def register_generate_commands(app: typer.Typer, shared_console: Console):
    """Register template tree commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(generate)
    app.command()(filters)
