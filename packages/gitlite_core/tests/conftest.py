"""Shared test configuration and fixtures for gitlite_core tests.

Provides:
- Isolation from the developer's git configuration and environment
  (HOME, XDG config, identity and token variables).
- Real dulwich repositories created in temporary directories.
"""
from __future__ import annotations

from pathlib import Path

import pytest
from dulwich.repo import Repo

from gitlite_core.repository import Repository

TEST_USER = "Test User"
TEST_EMAIL = "test@example.com"


# ---- Environment Isolation ----------------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep global git config and identity variables out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in ("GIT_AUTHOR_NAME", "GIT_AUTHOR_EMAIL", "GH_TOKEN"):
        monkeypatch.delenv(name, raising=False)


# ---- Repository Fixtures ------------------------------------------------------------------------------------


def make_git_repo(
        path: Path,
        with_identity: bool = True,
) -> Path:
    """Initialize a non-bare repository on branch 'main'."""
    path.mkdir(parents=True, exist_ok=True)
    repo = Repo.init(str(path))
    try:
        repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")
        if with_identity:
            config = repo.get_config()
            config.set((b"user",), b"name", TEST_USER.encode("utf-8"))
            config.set((b"user",), b"email", TEST_EMAIL.encode("utf-8"))
            config.write_to_path()
    finally:
        repo.close()
    return path


@pytest.fixture
def git_repo_factory():
    """Factory for extra repositories (clone sources, push targets)."""
    return make_git_repo


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """Empty repository directory with identity configured."""
    return make_git_repo(tmp_path / "work")


@pytest.fixture
def repo(repo_dir: Path) -> Repository:
    """Opened Repository without commits."""
    repository = Repository(repo_dir)
    yield repository
    repository.close()


@pytest.fixture
def repo_with_commit(repo: Repository) -> Repository:
    """Repository with README.md committed on 'main'."""
    (repo.root / "README.md").write_text("# Test\n")
    repo.add(["README.md"])
    repo.commit("Initial commit", repo.get_signature())
    return repo
