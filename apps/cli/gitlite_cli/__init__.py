"""gitlite CLI Application.

Command-line interface exposing a small set of Git operations
(add, commit, tag, push, branch, clone) on top of gitlite_core.

Execution Context:
    CLI application - invoked from terminal

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - gitlite_core: Core library

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

__version__ = "0.1.0"
