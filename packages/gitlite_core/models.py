"""Data models for gitlite.

Small value objects passed between the repository wrapper and the
CLI commands. Durable state lives in the Git repository itself.

Execution Context:
    Library module - imported by other gitlite_core modules

Dependencies:
    - dataclasses: Data class decorators

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

from dataclasses import dataclass


# ---- Data Model Classes -------------------------------------------------------------------------------------


@dataclass
class Author:
    """Identity used for commits and annotated tags.

    Attributes:
        name: Author name (``user.name``).
        email: Author email (``user.email``).
    """

    name: str
    email: str

    @property
    def identity(
            self,
    ) -> bytes:
        """Identity in the ``Name <email>`` form stored in Git objects."""
        return f"{self.name} <{self.email}>".encode("utf-8")

    def __str__(
            self,
    ) -> str:
        return f"{self.name} <{self.email}>"


@dataclass
class BranchEntry:
    """Single line of a branch listing.

    Attributes:
        name: Branch name (``origin/main`` for remote-tracking branches).
        is_current: Whether HEAD points at this entry.
        detached_at: Abbreviated commit ID when HEAD is detached.
    """

    name: str
    is_current: bool = False
    detached_at: str | None = None

    @property
    def label(
            self,
    ) -> str:
        """Display label for the entry."""
        if self.detached_at:
            return f"(HEAD detached at {self.detached_at})"
        return self.name

