"""Utility functions for gitlite CLI commands.

Execution Context:
    CLI command utilities - imported by command modules

Dependencies:
    - click: Context access
    - gitlite_core: Repository management

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import click

from gitlite_core.repository import Repository
from gitlite_core.repository import open_repository

DEFAULT_PATH = "."
SHORT_ID_LENGTH = 8


def get_repo_path(
        ctx: click.Context,
) -> str:
    """Get repository path from the global ``--path`` option.

    Args:
        ctx: Click context of the running command.

    Returns:
        Repository path (``.`` when ``--path`` was omitted).
    """
    obj = ctx.find_object(dict) or {}
    return obj.get("path") or DEFAULT_PATH


def open_repo(
        ctx: click.Context,
) -> Repository:
    """Open the repository selected by ``--path``."""
    return open_repository(get_repo_path(ctx))


def short_id(
        commit_id: str,
) -> str:
    """Abbreviate a commit ID for display."""
    return commit_id[:SHORT_ID_LENGTH]
