"""gitlite CLI entry point.

Orchestrator for the gitlite command-line interface. Registers all
command modules, holds the global ``--path`` option and configures
logging.

Execution Context:
    CLI application - run via `python main.py` or `gitlite` command

Dependencies:
    - click: CLI framework
    - gitlite_core: Core library

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import logging
import os
import sys

import click

from gitlite_cli import __version__
from gitlite_cli.commands.add import add
from gitlite_cli.commands.branch import branch
from gitlite_cli.commands.clone import clone
from gitlite_cli.commands.commit import commit
from gitlite_cli.commands.push import push
from gitlite_cli.commands.tag import tag
from gitlite_cli.commands.utils import DEFAULT_PATH

LOG_ENV_VAR = "GITLITE_LOG"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


# ---- CLI Group ----------------------------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="gitlite")
@click.option(
    "--path",
    "-p",
    default=DEFAULT_PATH,
    show_default=True,
    help="Path to the repository's working directory.",
)
@click.pass_context
def cli(
        ctx: click.Context,
        path: str,
) -> None:
    """gitlite - Simple git commands on top of dulwich.

    Stages files, records commits and annotated tags, lists branches,
    pushes to remotes and clones repositories.
    """
    ctx.ensure_object(dict)
    ctx.obj["path"] = path


# ---- Register Commands --------------------------------------------------------------------------------------


cli.add_command(add)
cli.add_command(commit)
cli.add_command(tag)
cli.add_command(push)
cli.add_command(branch)
cli.add_command(clone)


# ---- Logging ------------------------------------------------------------------------------------------------


def configure_logging() -> int:
    """Configure stderr logging from the GITLITE_LOG environment variable.

    Returns:
        Effective log level.
    """
    level_name = os.environ.get(LOG_ENV_VAR, "WARNING").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )
    return level


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for gitlite CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    configure_logging()
    try:
        cli()
        return 0
    except Exception as cli_error:
        click.echo(f"Error: {cli_error}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
