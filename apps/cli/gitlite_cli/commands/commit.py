"""gitlite commit command.

Records changes to the repository by creating a new commit from the
index.

Execution Context:
    CLI command - invoked via `gitlite commit <message>`

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
from gitlite_cli.commands.utils import short_id

console = Console()


# ---- Commit Command -----------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "message",
    required=True,
)
@click.pass_context
def commit(
        ctx: click.Context,
        message: str,
) -> None:
    """Record changes to the repository.

    Creates a new commit on HEAD with the current index content, using
    user.name and user.email from git config as author and committer.

    Examples:
        gitlite commit "Initial commit"
        gitlite --path ../other commit "Fix typo"
    """
    try:
        with open_repo(ctx) as repo:
            signature = repo.get_signature()
            commit_id = repo.commit(message, signature)
            current_branch = repo.get_current_branch()

        console.print(f"[green]Created commit {short_id(commit_id)}[/green]")
        console.print()
        console.print(f"  [bold]Message:[/bold] {escape(message)}")
        console.print(f"  [bold]Author:[/bold] {escape(str(signature))}")

        if current_branch:
            console.print()
            console.print(f"[dim]Branch '{escape(current_branch)}' updated to {short_id(commit_id)}[/dim]")

    except Exception as commit_error:
        msg = f"Commit failed: {commit_error}"
        raise click.ClickException(msg) from commit_error
