"""Backend-independent VCS client interface."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import UnimplementedError
from ..process import DEFAULT_TIMEOUT, ProcessRunner


class VCSClient:
    """Read-only queries against a working copy rooted at *root*.

    Concrete backends override the three query coroutines; on this base
    class they raise :class:`UnimplementedError`.
    """

    def __init__(
        self,
        root: Path,
        *,
        runner: ProcessRunner | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._root = Path(root).resolve()
        self.runner = runner or ProcessRunner(self._root, timeout=timeout)

    @property
    def root(self) -> Path:
        return self._root

    async def get_default_branch(self) -> str:
        """Return the name of the repository's primary branch."""
        raise UnimplementedError(f"{type(self).__name__}.get_default_branch")

    async def get_modified_files(self, branch: str) -> list[str]:
        """Return paths that differ between the working tree and *branch*."""
        raise UnimplementedError(f"{type(self).__name__}.get_modified_files")

    async def get_uncommitted_files(self) -> list[str]:
        """Return paths with staged, unstaged or untracked changes."""
        raise UnimplementedError(f"{type(self).__name__}.get_uncommitted_files")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._root)!r})"
