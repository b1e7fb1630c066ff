"""Pydantic models for aiovcs."""

from .process import CommandResult
from .vcs import ChangedFiles

__all__ = [
    "ChangedFiles",
    "CommandResult",
]
