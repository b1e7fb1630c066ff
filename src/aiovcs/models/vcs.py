"""VCS query models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChangedFiles(BaseModel):
    """Uncommitted files plus files that differ from a baseline branch."""

    vcs_detected: bool = False
    branch: str | None = None
    uncommitted_files: list[str] = Field(default_factory=list)
    modified_files: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def has_changes(self) -> bool:
        return bool(self.uncommitted_files or self.modified_files)
