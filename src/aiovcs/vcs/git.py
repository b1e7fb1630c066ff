"""Git backend that shells out to the ``git`` binary and parses its output."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..process import DEFAULT_TIMEOUT, ProcessRunner
from .base import VCSClient

logger = logging.getLogger(__name__)

# Added, modified or untracked, then whitespace, then the path
_FILE_LINE = re.compile(r"^(?:[AM]|\?\?)\s+(.*?)$")


def extract_file_list(output: str) -> list[str]:
    """Return the paths listed in ``git status --short`` or ``--name-status`` output.

    Only added (``A``), modified (``M``) and untracked (``??``) entries are
    kept.  Renames, deletions, two-letter codes and blank lines are dropped.
    Paths are returned verbatim in output order.
    """
    files: list[str] = []
    for line in output.strip().split("\n"):
        match = _FILE_LINE.match(line.strip())
        if match is not None:
            files.append(match.group(1))
    return files


class GitVCSClient(VCSClient):
    """VCS client for a git working tree."""

    def __init__(
        self,
        root: Path,
        *,
        runner: ProcessRunner | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        git_binary: str = "git",
    ) -> None:
        super().__init__(root, runner=runner, timeout=timeout)
        self.git_binary = git_binary

    async def get_default_branch(self) -> str:
        """Return ``"main"`` if ``refs/heads/main`` exists, else ``"master"``."""
        result = await self.runner.execute(
            self.git_binary, ["show-ref", "--verify", "--quiet", "refs/heads/main"]
        )
        if result.ok:
            return "main"
        logger.debug("No refs/heads/main in %s, assuming master", self.root)
        return "master"

    async def get_uncommitted_files(self) -> list[str]:
        result = await self.runner.run(self.git_binary, ["status", "--short"])
        return extract_file_list(result.stdout)

    async def get_modified_files(self, branch: str) -> list[str]:
        result = await self.runner.run(
            self.git_binary, ["diff", "--name-status", branch]
        )
        return extract_file_list(result.stdout)
