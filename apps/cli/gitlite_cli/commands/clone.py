"""gitlite clone command.

Clones a repository into a new directory.

Execution Context:
    CLI command - invoked via `gitlite clone <url> [<dir>]`

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

from gitlite_core.remote import clone_repository

console = Console()


# ---- Clone Command ------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "url",
    required=True,
)
@click.argument(
    "directory",
    required=False,
)
def clone(
        url: str,
        directory: str | None,
) -> None:
    """Clone a repository.

    DIRECTORY defaults to the last path segment of URL without its
    extension. The target must not exist yet.

    Examples:
        gitlite clone https://github.com/org/project.git
        gitlite clone git@github.com:org/project.git my-project
    """
    try:
        console.print(f"[dim]Cloning {escape(url)}...[/dim]")
        target_dir = clone_repository(url, directory)

        console.print()
        console.print(f"[green]Cloned '{escape(url)}' into {escape(str(target_dir))}[/green]")
        console.print()
        console.print(f"[dim]cd {escape(target_dir.name)} && gitlite branch[/dim]")

    except Exception as clone_error:
        msg = f"Clone failed: {clone_error}"
        raise click.ClickException(msg) from clone_error
