"""Local repository management for gitlite.

Wraps a dulwich repository and exposes the handful of operations the
CLI needs: staging files, committing, tagging, listing branches and
resolving refs for push.

Execution Context:
    Library module - imported by CLI commands and remote operations

Dependencies:
    - dulwich: Git object model, index, refs and configuration
    - gitlite_core.models: Data models

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from types import TracebackType

from dulwich import porcelain
from dulwich.errors import NotGitRepository
from dulwich.ignore import IgnoreFilterManager
from dulwich.repo import Repo

from gitlite_core.config import get_signature
from gitlite_core.models import Author
from gitlite_core.models import BranchEntry

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


HEAD_REF = b"HEAD"
SYMREF_PREFIX = b"ref: "
HEADS_PREFIX = b"refs/heads/"
TAGS_PREFIX = b"refs/tags/"
REMOTES_PREFIX = b"refs/remotes/"
CONTROL_DIR = ".git"
ABBREV_LENGTH = 8


# ---- Repository Class ---------------------------------------------------------------------------------------


class Repository:
    """Manages a local Git repository through dulwich.

    Attributes:
        root: Working directory of the repository.
        repo: Underlying dulwich ``Repo``.
    """

    def __init__(
            self,
            root: Path | str,
    ) -> None:
        """Open repository at given root path.

        Args:
            root: Working directory of an existing repository.

        Raises:
            RuntimeError: If root is not a Git repository.
        """
        self.root = Path(root).resolve()
        try:
            self.repo = Repo(str(self.root))
        except NotGitRepository as open_error:
            msg = f"Not a git repository: {self.root}"
            raise RuntimeError(msg) from open_error

    def __enter__(
            self,
    ) -> Repository:
        return self

    def __exit__(
            self,
            exc_type: type[BaseException] | None,
            exc_val: BaseException | None,
            exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(
            self,
    ) -> None:
        """Release the underlying repository."""
        self.repo.close()

    # ---- Configuration --------------------------------------------------------------------------------------

    def get_signature(
            self,
    ) -> Author:
        """Get commit identity from the repository config stack."""
        return get_signature(self.repo.get_config_stack())

    def get_remote_url(
            self,
            remote_name: str,
    ) -> str:
        """Get URL of a configured remote.

        Args:
            remote_name: Remote name (e.g. 'origin').

        Returns:
            Remote URL.

        Raises:
            ValueError: If the remote has no URL configured.
        """
        config = self.repo.get_config()
        try:
            url = config.get((b"remote", remote_name.encode("utf-8")), b"url")
        except KeyError:
            url = None

        if not url:
            msg = f"No remote URL found for '{remote_name}'"
            raise ValueError(msg)
        return url.decode("utf-8") if isinstance(url, bytes) else str(url)

    # ---- Ref Listing ----------------------------------------------------------------------------------------

    def _ref_names(
            self,
            prefix: bytes,
    ) -> list[bytes]:
        """Sorted ref names under ``prefix`` with the prefix stripped."""
        return sorted(
            ref[len(prefix):]
            for ref in self.repo.refs.allkeys()
            if ref.startswith(prefix)
        )

    # ---- HEAD Operations ------------------------------------------------------------------------------------

    def _read_head(
            self,
    ) -> bytes | None:
        """Raw HEAD contents: symbolic ``ref: ...`` or a commit ID."""
        return self.repo.refs.read_ref(HEAD_REF)

    def get_current_branch(
            self,
    ) -> str | None:
        """Get name of current branch.

        Returns:
            Branch name (possibly unborn) or None if HEAD is detached.
        """
        head = self._read_head()
        if head and head.startswith(SYMREF_PREFIX + HEADS_PREFIX):
            return head[len(SYMREF_PREFIX + HEADS_PREFIX):].decode("utf-8")
        return None

    def get_head_commit(
            self,
    ) -> str | None:
        """Get commit ID that HEAD points to.

        Returns:
            Commit ID or None if there are no commits yet.
        """
        try:
            return self.repo.head().decode("ascii")
        except KeyError:
            return None

    # ---- Index Operations -----------------------------------------------------------------------------------

    def _relative_path(
            self,
            path: Path | str,
    ) -> str:
        """Convert a path to a repository-relative POSIX path.

        Raises:
            ValueError: If the path lies outside the working directory.
        """
        candidate = Path(path)
        if candidate.is_absolute():
            candidate = candidate.resolve()
        else:
            candidate = Path(os.path.normpath(self.root / candidate))

        try:
            return candidate.relative_to(self.root).as_posix()
        except ValueError as outside_error:
            msg = f"'{path}' is outside repository"
            raise ValueError(msg) from outside_error

    def _expand_path(
            self,
            relpath: str,
    ) -> list[str]:
        """Expand a directory into the files below it."""
        full_path = self.root / relpath
        if not full_path.is_dir():
            return [relpath]

        expanded = []
        for dirpath, dirnames, filenames in os.walk(full_path):
            dirnames[:] = sorted(d for d in dirnames if d != CONTROL_DIR)
            for filename in sorted(filenames):
                expanded.append((Path(dirpath) / filename).relative_to(self.root).as_posix())
        return expanded

    def add(
            self,
            files: list[str],
            force: bool = False,
    ) -> list[str]:
        """Stage files in the index.

        Args:
            files: Paths relative to the repository root. Directories are
                staged recursively.
            force: Also stage paths matched by ignore rules.

        Returns:
            Repository-relative paths that were staged.

        Raises:
            FileNotFoundError: If a path does not exist.
            ValueError: If a path lies outside the working directory.
        """
        ignore_manager = IgnoreFilterManager.from_repo(self.repo)
        staged: list[str] = []

        for path in files:
            relpath = self._relative_path(path)
            if not (self.root / relpath).exists():
                msg = f"pathspec '{path}' did not match any files"
                raise FileNotFoundError(msg)

            for candidate in self._expand_path(relpath):
                if not force and ignore_manager.is_ignored(candidate):
                    logger.debug("Skipping ignored path %s", candidate)
                    continue
                staged.append(candidate)

        if staged:
            self.repo.get_worktree().stage(staged)
            logger.debug("Staged %d path(s): %s", len(staged), ", ".join(staged))
        return staged

    # ---- Commit Operations ----------------------------------------------------------------------------------

    def commit(
            self,
            message: str,
            author: Author,
    ) -> str:
        """Create a commit from the current index on HEAD.

        Args:
            message: Commit message.
            author: Author and committer identity.

        Returns:
            New commit ID.
        """
        commit_id = porcelain.commit(
            self.repo,
            message=message.encode("utf-8"),
            author=author.identity,
            committer=author.identity,
        )
        commit_id = commit_id.decode("ascii") if isinstance(commit_id, bytes) else str(commit_id)
        logger.debug("Created commit %s", commit_id)
        return commit_id

    # ---- Tag Operations -------------------------------------------------------------------------------------

    def list_tags(
            self,
    ) -> list[str]:
        """List all tag names."""
        return sorted(name.decode("utf-8") for name in self._ref_names(TAGS_PREFIX))

    def tag(
            self,
            name: str,
            message: str,
            tagger: Author,
    ) -> str:
        """Create an annotated tag pointing at HEAD.

        Args:
            name: Tag name.
            message: Tag message.
            tagger: Tagger identity.

        Returns:
            Commit ID the tag points to.

        Raises:
            ValueError: If the tag already exists.
            RuntimeError: If HEAD has no commits.
        """
        tag_ref = TAGS_PREFIX + name.encode("utf-8")
        if tag_ref in self.repo.refs:
            msg = f"Tag '{name}' already exists"
            raise ValueError(msg)

        head_commit = self.get_head_commit()
        if not head_commit:
            msg = "Cannot tag: HEAD does not point to a commit"
            raise RuntimeError(msg)

        porcelain.tag_create(
            self.repo,
            name.encode("utf-8"),
            author=tagger.identity,
            message=message.encode("utf-8"),
            annotated=True,
            objectish=HEAD_REF,
        )
        logger.debug("Created tag %s at %s", name, head_commit)
        return head_commit

    # ---- Branch Operations ----------------------------------------------------------------------------------

    def _is_symbolic(
            self,
            ref: bytes,
    ) -> bool:
        value = self.repo.refs.read_ref(ref)
        return bool(value) and value.startswith(SYMREF_PREFIX)

    def list_branches(
            self,
            remotes: bool = False,
    ) -> list[BranchEntry]:
        """List branches.

        In local mode the current branch (or detached HEAD) comes first,
        followed by the remaining local branches. In remote mode only
        remote-tracking branches are listed.

        Args:
            remotes: List remote-tracking branches instead of local ones.

        Returns:
            Branch entries in display order.
        """
        current = self.get_current_branch()
        entries: list[BranchEntry] = []

        if remotes:
            for name in self._ref_names(REMOTES_PREFIX):
                if self._is_symbolic(REMOTES_PREFIX + name):
                    continue
                entries.append(BranchEntry(name=name.decode("utf-8")))
            return entries

        if current is not None:
            entries.append(BranchEntry(name=current, is_current=True))
        else:
            head_commit = self.get_head_commit() or ""
            entries.append(BranchEntry(
                name="HEAD",
                is_current=True,
                detached_at=head_commit[:ABBREV_LENGTH],
            ))

        for name in self._ref_names(HEADS_PREFIX):
            branch_name = name.decode("utf-8")
            if branch_name != current:
                entries.append(BranchEntry(name=branch_name))

        return entries

    # ---- Ref Resolution -------------------------------------------------------------------------------------

    def resolve_ref(
            self,
            name: str,
    ) -> str:
        """Resolve a short name to a full tag or branch ref.

        Tags take precedence over branches of the same name.

        Args:
            name: Tag or local branch name.

        Returns:
            Full ref name (``refs/tags/...`` or ``refs/heads/...``).

        Raises:
            ValueError: If no tag or local branch matches.
        """
        encoded = name.encode("utf-8")
        for prefix in (TAGS_PREFIX, HEADS_PREFIX):
            if prefix + encoded in self.repo.refs:
                return (prefix + encoded).decode("utf-8")

        msg = f"Could not find matching tag or branch: '{name}'"
        raise ValueError(msg)


# ---- Module Functions ---------------------------------------------------------------------------------------


def open_repository(
        path: Path | str = ".",
) -> Repository:
    """Open the Git repository whose working directory is ``path``.

    Args:
        path: Repository working directory (defaults to cwd).

    Returns:
        Opened Repository.
    """
    return Repository(path)
