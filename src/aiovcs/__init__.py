"""aiovcs: async Python library for querying version-control working copies."""

from ._version import __version__
from .changes import get_changed_files
from .exceptions import (
    ProcessError,
    ProcessExitError,
    ProcessSpawnError,
    ProcessTimeoutError,
    UnimplementedError,
    VCSError,
)
from .models import ChangedFiles, CommandResult
from .process import DEFAULT_TIMEOUT, ProcessRunner
from .vcs import GitVCSClient, VCSClient, extract_file_list, get_vcs_client

__all__ = [
    "DEFAULT_TIMEOUT",
    "ChangedFiles",
    "CommandResult",
    "GitVCSClient",
    "ProcessError",
    "ProcessExitError",
    "ProcessRunner",
    "ProcessSpawnError",
    "ProcessTimeoutError",
    "UnimplementedError",
    "VCSClient",
    "VCSError",
    "__version__",
    "extract_file_list",
    "get_changed_files",
    "get_vcs_client",
]
