"""gitlite push command.

Pushes local branches or tags to a configured remote.

Execution Context:
    CLI command - invoked via `gitlite push <remote> [<branch>...]`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - gitlite_core: Remote operations

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from gitlite_cli.commands.utils import open_repo
from gitlite_core.remote import push as push_refs

console = Console()


# ---- Push Command -------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "remote",
    required=True,
)
@click.argument(
    "branches",
    nargs=-1,
)
@click.pass_context
def push(
        ctx: click.Context,
        remote: str,
        branches: tuple[str, ...],
) -> None:
    """Push local commits to a remote.

    Each of BRANCHES may name a tag or a local branch; tags win when
    both exist. Without BRANCHES the current branch is pushed. HTTPS
    remotes authenticate with the GH_TOKEN environment variable.

    Examples:
        gitlite push origin
        gitlite push origin main v1.0.0
    """
    try:
        with open_repo(ctx) as repo:
            console.print(f"[dim]Pushing to {escape(remote)}...[/dim]")
            refs = push_refs(repo, remote, list(branches))

        for ref in refs:
            console.print(f"[green]Pushed {escape(ref)} to {escape(remote)}[/green]")

    except Exception as push_error:
        msg = f"Push failed: {push_error}"
        raise click.ClickException(msg) from push_error
