"""VCS detection and clients."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import aiofiles.os

from .base import VCSClient
from .git import GitVCSClient, extract_file_list

logger = logging.getLogger(__name__)


async def get_vcs_client(root: Path, **options: Any) -> VCSClient | None:
    """Return a client for the working copy at *root*, or ``None`` if there is none.

    A ``.git`` entry directly under *root* (directory, or file for worktrees
    and submodules) selects :class:`GitVCSClient`.  *options* are passed to
    the client constructor.
    """
    root = Path(root)
    if await aiofiles.os.path.exists(root / ".git"):
        logger.debug("Git working tree detected at %s", root)
        return GitVCSClient(root, **options)

    logger.debug("No VCS detected at %s", root)
    return None


__all__ = [
    "GitVCSClient",
    "VCSClient",
    "extract_file_list",
    "get_vcs_client",
]
