"""Shared fixtures for aiovcs tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from dulwich import porcelain
from dulwich.repo import Repo

_AUTHOR = b"Test <test@example.com>"

CommitFiles = Callable[..., bytes]


def _commit_files(repo: Repo, files: dict[str, str], message: str = "commit") -> bytes:
    """Write *files* into the working tree of *repo*, stage and commit them."""
    root = Path(repo.path)
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    porcelain.add(str(root), paths=[str(root / name) for name in files])
    return porcelain.commit(
        str(root),
        message=message.encode("utf-8"),
        author=_AUTHOR,
        committer=_AUTHOR,
    )


@pytest.fixture
def commit_files() -> CommitFiles:
    """Helper that writes, stages and commits files in a repository."""
    return _commit_files


@pytest.fixture
def empty_repo(tmp_path: Path) -> Repo:
    """A freshly initialised repository without any commits."""
    root = tmp_path / "repo"
    root.mkdir()
    repo = Repo.init(str(root))
    # Commits land on master; main only exists where a fixture creates it
    repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/master")
    return repo


@pytest.fixture
def main_repo(empty_repo: Repo) -> Repo:
    """Repository with one commit reachable from ``refs/heads/main``."""
    head = _commit_files(empty_repo, {"a.txt": "alpha\n", "src/b.txt": "beta\n"}, "initial")
    empty_repo.refs[b"refs/heads/main"] = head
    return empty_repo
