"""gitlite add command.

Adds file contents to the index.

Execution Context:
    CLI command - invoked via `gitlite add <file>...`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - gitlite_core: Repository management

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from gitlite_cli.commands.utils import open_repo

console = Console()


# ---- Add Command --------------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Allow adding otherwise ignored files.",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
)
@click.pass_context
def add(
        ctx: click.Context,
        force: bool,
        files: tuple[str, ...],
) -> None:
    """Add file contents to the index.

    FILES are relative to the repository's working directory.
    Ignored files are skipped unless --force is given.

    Examples:
        gitlite add README.md
        gitlite add --force build/output.log
        gitlite --path ../other add src
    """
    try:
        with open_repo(ctx) as repo:
            staged = repo.add(list(files), force=force)

        if not staged:
            console.print("[yellow]Nothing added: all paths are ignored (use --force)[/yellow]")
            return

        for path in staged:
            console.print(f"[green]add[/green] '{escape(path)}'")

    except Exception as add_error:
        msg = f"Add failed: {add_error}"
        raise click.ClickException(msg) from add_error
