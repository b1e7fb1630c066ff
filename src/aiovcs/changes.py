"""Host-facing summary of what changed in a working copy.

Wraps the VCS client queries so that a missing repository or a failing
``git`` degrades to an empty :class:`ChangedFiles` instead of an exception.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from .exceptions import VCSError
from .models.vcs import ChangedFiles
from .vcs import VCSClient, get_vcs_client

logger = logging.getLogger(__name__)


async def _query_files(client: VCSClient, branch: str) -> tuple[list[str], list[str]]:
    """Run both file queries concurrently; the first failure cancels the other."""
    try:
        async with asyncio.TaskGroup() as tg:
            uncommitted = tg.create_task(client.get_uncommitted_files())
            modified = tg.create_task(client.get_modified_files(branch))
    except ExceptionGroup as group:
        errors = [exc for exc in group.exceptions if isinstance(exc, VCSError)]
        if len(errors) != len(group.exceptions):
            raise
        raise errors[0] from None
    return uncommitted.result(), modified.result()


async def get_changed_files(
    root: Path,
    branch: str | None = None,
    **options: Any,
) -> ChangedFiles:
    """Return uncommitted files and files modified relative to *branch*.

    When *branch* is ``None`` the repository's default branch is used.
    Errors from the underlying VCS are logged and reported in
    :attr:`ChangedFiles.error`; this coroutine never raises :class:`VCSError`.
    """
    client = await get_vcs_client(root, **options)
    if client is None:
        return ChangedFiles(vcs_detected=False)

    try:
        if branch is None:
            branch = await client.get_default_branch()
        uncommitted, modified = await _query_files(client, branch)
    except VCSError as exc:
        logger.warning("Could not determine changed files in %s: %s", client.root, exc)
        return ChangedFiles(vcs_detected=True, branch=branch, error=str(exc))

    return ChangedFiles(
        vcs_detected=True,
        branch=branch,
        uncommitted_files=uncommitted,
        modified_files=modified,
    )
