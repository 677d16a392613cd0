"""Shared utilities for stampkit CLI modules."""
from __future__ import annotations

import os
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from stampkit.config.loader import DEFAULT_CONFIG_FILE

# Default config search paths (ordered by proximity to current run)
CONFIG_PATHS = [
    f"./{DEFAULT_CONFIG_FILE}",
    str(Path.home() / ".config" / "stampkit" / "stamp.yml"),
]


def find_config(config_path: Optional[str] = None) -> str:
    """Locate the active project configuration file."""
    if config_path:
        return config_path

    if env_config := os.environ.get("STAMP_CONFIG"):
        return env_config

    for path in CONFIG_PATHS:
        if Path(path).exists():
            return path

    return DEFAULT_CONFIG_FILE


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from stampkit.core.logger import set_verbose
    from stampkit.core.logger import setup_file_logging as _setup_file_logging

    if log_file:
        _setup_file_logging(log_file=log_file, verbose=verbose)
    set_verbose(verbose)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> NoReturn:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    print_error(console, str(e), prefix="Error:")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting."""
    console.print(f"[red]{prefix}[/red] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[cyan]{prefix}[/cyan] {message}")
