"""gitlite tag command.

Creates an annotated tag at HEAD.

Execution Context:
    CLI command - invoked via `gitlite tag <name> <message>`

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


# ---- Tag Command --------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "name",
    required=True,
)
@click.argument(
    "message",
    required=True,
)
@click.pass_context
def tag(
        ctx: click.Context,
        name: str,
        message: str,
) -> None:
    """Create an annotated tag.

    Tags HEAD as NAME with MESSAGE. The tagger is taken from user.name
    and user.email. Existing tags are never overwritten.

    Examples:
        gitlite tag v1.0.0 "First release"
    """
    try:
        with open_repo(ctx) as repo:
            signature = repo.get_signature()
            commit_id = repo.tag(name, message, signature)

        console.print(f"[green]Created tag '{escape(name)}'[/green]")
        console.print(f"  [bold]Commit:[/bold] {short_id(commit_id)}")
        console.print(f"  [bold]Message:[/bold] {escape(message)}")

    except Exception as tag_error:
        msg = f"Tag operation failed: {tag_error}"
        raise click.ClickException(msg) from tag_error
