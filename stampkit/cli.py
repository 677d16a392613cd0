#!/usr/bin/env python3
"""stamp CLI - Stamp out project trees from template directories."""

import typer
from rich.console import Console

from stampkit.cli_generate_commands import register_generate_commands
from stampkit.cli_rewrite_commands import register_rewrite_commands
from stampkit.core.logger import get_logger

app = typer.Typer(
    name="stamp",
    help="""stamp - Project generator helpers

Template trees in, project trees out.

Quick start:
  stamp generate app ./my-app --name my-app   # Stamp a template tree
  stamp filters app                           # See which filters a tree uses
  stamp rewrite routes.js -m "// routes" -l "app.use(users);"
  stamp relpath src/a/index.js src/b/util.js --strip
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

# Attach modular subcommands
register_generate_commands(app, console)
register_rewrite_commands(app, console)

if __name__ == "__main__":
    app()
