"""Remote operations module for gitlite.

Handles push and clone between a local repository and Git remotes.
Transport, pack negotiation and authentication callbacks are left to
dulwich; this module resolves names, URLs and target directories.

Execution Context:
    Library module - imported by CLI push/clone commands

Dependencies:
    - dulwich: Git transports (ssh, http(s), local)
    - gitlite_core.config: Transport credentials
    - gitlite_core.repository: Local repository access

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from dulwich import porcelain

from gitlite_core.config import get_credentials

if TYPE_CHECKING:
    from gitlite_core.repository import Repository

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


DEFAULT_REMOTE = "origin"


# ---- Push ---------------------------------------------------------------------------------------------------


def push(
        repo: Repository,
        remote_name: str,
        names: list[str] | tuple[str, ...] = (),
) -> list[str]:
    """Push tags or branches to a configured remote.

    Args:
        repo: Local repository.
        remote_name: Name of a configured remote.
        names: Tag or branch names. Defaults to the current branch.

    Returns:
        Full ref names that were pushed.

    Raises:
        ValueError: If the remote has no URL, a name does not match any
            tag or local branch, or HEAD is detached and no names are given.
    """
    remote_url = repo.get_remote_url(remote_name)

    if not names:
        current_branch = repo.get_current_branch()
        if not current_branch:
            msg = "HEAD is detached; specify a branch to push"
            raise ValueError(msg)
        names = [current_branch]

    refs = [repo.resolve_ref(name) for name in names]
    logger.debug("Pushing %s to %s (%s)", ", ".join(refs), remote_name, remote_url)

    porcelain.push(
        repo.repo,
        remote_url,
        [ref.encode("utf-8") for ref in refs],
        **get_credentials(remote_url),
    )
    return refs


# ---- Clone --------------------------------------------------------------------------------------------------


def derive_clone_directory(
        url: str,
) -> str:
    """Derive the default clone directory from a URL.

    Uses the last path segment with its extension removed, so
    ``https://example.com/org/project.git`` becomes ``project``.

    Args:
        url: Repository URL, scp-like address or local path.

    Returns:
        Directory name.

    Raises:
        ValueError: If the URL has no path.
    """
    parsed = urlparse(url)
    path = parsed.path if parsed.scheme and len(parsed.scheme) > 1 else url

    segments = [segment for segment in path.replace("\\", "/").split("/") if segment]
    if not segments:
        msg = "URL has no path. Can't extract target directory"
        raise ValueError(msg)

    # scp-like addresses (git@host:project.git) keep the host in the last segment
    last_segment = segments[-1].rsplit(":", 1)[-1]
    name = Path(last_segment).stem
    if not name:
        msg = "URL has no path. Can't extract target directory"
        raise ValueError(msg)
    return name


def clone_repository(
        url: str,
        directory: Path | str | None = None,
) -> Path:
    """Clone a remote repository into a new directory.

    Fetches all branches and tags, checks out the remote HEAD and
    configures ``origin`` to point at ``url``.

    Args:
        url: Repository URL to clone from.
        directory: Target directory (derived from the URL if omitted).

    Returns:
        Path to the new working directory.

    Raises:
        ValueError: If no directory is given and the URL has no path.
        FileExistsError: If the target path exists.
    """
    target = Path(directory) if directory else Path(derive_clone_directory(url))
    target = target.resolve()

    if target.exists():
        msg = "Target path exists."
        raise FileExistsError(msg)

    logger.debug("Cloning %s into %s", url, target)
    cloned = porcelain.clone(
        url,
        str(target),
        origin=DEFAULT_REMOTE,
        **get_credentials(url),
    )
    cloned.close()
    return target
