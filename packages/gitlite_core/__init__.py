"""gitlite Core Library.

Thin layer over dulwich that provides the repository operations behind
the gitlite command-line interface: staging, committing, tagging,
branch listing, push and clone.

Execution Context:
    Library package - imported by the CLI application

Dependencies:
    - dulwich: Git implementation (objects, index, refs, transports)
    - python-dotenv: Credential loading from .env files

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

from gitlite_core.models import Author
from gitlite_core.models import BranchEntry
from gitlite_core.repository import Repository
from gitlite_core.repository import open_repository

__version__ = "0.1.0"

__all__ = [
    "Author",
    "BranchEntry",
    "Repository",
    "open_repository",
    "__version__",
]
