"""gitlite branch command.

Lists local or remote-tracking branches.

Execution Context:
    CLI command - invoked via `gitlite branch [--remotes]`

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


# ---- Branch Command -----------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--remotes",
    "-r",
    is_flag=True,
    help="List remote-tracking branches.",
)
@click.pass_context
def branch(
        ctx: click.Context,
        remotes: bool,
) -> None:
    """List branches.

    The current branch is marked with '*'. With --remotes, lists the
    remote-tracking branches instead.

    Examples:
        gitlite branch
        gitlite branch --remotes
    """
    try:
        with open_repo(ctx) as repo:
            entries = repo.list_branches(remotes=remotes)

        if not entries:
            console.print("[dim]No branches found[/dim]")
            return

        for entry in entries:
            if entry.is_current:
                console.print(f"[green]* {escape(entry.label)}[/green]")
            else:
                console.print(f"  {escape(entry.label)}")

    except Exception as branch_error:
        msg = f"Branch operation failed: {branch_error}"
        raise click.ClickException(msg) from branch_error
