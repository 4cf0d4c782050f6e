"""Identity and credential configuration module.

Resolves the commit identity from the git configuration stack and
the transport credentials used for pushing and cloning over HTTP(S).

Execution Context:
    Library module - imported by repository and remote operations

Dependencies:
    - dulwich: Git configuration stack
    - python-dotenv: Load environment variables from .env file

Metadata:
    Version: 0.1.0
    Author: gitlite Team
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None

from gitlite_core.models import Author

if TYPE_CHECKING:
    from dulwich.config import Config

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


TOKEN_ENV_VAR = "GH_TOKEN"
AUTHOR_NAME_ENV_VAR = "GIT_AUTHOR_NAME"
AUTHOR_EMAIL_ENV_VAR = "GIT_AUTHOR_EMAIL"
HTTP_SCHEMES = ("http", "https")


# ---- Environment Loading ---------------------------------------------------------------------------------------


def _load_env_file() -> None:
    """Load environment variables from .env file.

    Searches for .env file in:
    1. Current working directory
    2. Parent directories (up to 3 levels)
    """
    if load_dotenv is None:
        return

    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(cwd_env, override=True)
        return

    current = Path.cwd()
    for _ in range(3):
        parent = current.parent
        parent_env = parent / ".env"
        if parent_env.exists():
            load_dotenv(parent_env, override=True)
            return
        current = parent


# ---- Identity -----------------------------------------------------------------------------------------------


def _config_value(
        config: Config,
        key: bytes,
) -> str | None:
    """Read a ``user.*`` value from a git config, or None if unset."""
    try:
        value = config.get((b"user",), key)
    except KeyError:
        return None
    if not value:
        return None
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


def get_signature(
        config: Config,
) -> Author:
    """Get the commit identity.

    ``GIT_AUTHOR_NAME`` and ``GIT_AUTHOR_EMAIL`` take precedence over
    ``user.name`` and ``user.email`` from the configuration.

    Args:
        config: Git configuration (usually the repository config stack).

    Returns:
        Author with name and email.

    Raises:
        RuntimeError: If name or email is not configured.
    """
    name = os.environ.get(AUTHOR_NAME_ENV_VAR) or _config_value(config, b"name")
    email = os.environ.get(AUTHOR_EMAIL_ENV_VAR) or _config_value(config, b"email")

    if not name:
        msg = "user.name is not set in git config"
        raise RuntimeError(msg)
    if not email:
        msg = "user.email is not set in git config"
        raise RuntimeError(msg)

    return Author(name=name, email=email)


# ---- Credentials --------------------------------------------------------------------------------------------


def get_credentials(
        url: str,
) -> dict[str, str]:
    """Get transport credentials for a remote URL.

    Only HTTP(S) remotes receive explicit credentials: a ``GH_TOKEN``
    token is sent as the username with an empty password, unless the URL
    already carries userinfo, which dulwich then uses as is. No git
    credential helper is run. SSH remotes authenticate through the
    system ssh client and agent.

    Args:
        url: Remote URL.

    Returns:
        Keyword arguments for dulwich transports (may be empty).
    """
    parsed = urlparse(url)
    if parsed.scheme not in HTTP_SCHEMES:
        return {}
    if parsed.username:
        logger.debug("Using credentials embedded in %s", parsed.hostname)
        return {}

    _load_env_file()
    token = os.environ.get(TOKEN_ENV_VAR)
    if not token:
        return {}

    logger.debug("Using %s for %s", TOKEN_ENV_VAR, url)
    return {"username": token, "password": ""}
