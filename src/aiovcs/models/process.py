"""Process-related models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Captured outcome of a single external command."""

    command: str
    args: list[str] = Field(default_factory=list)
    stdout: str = ""
    stderr: str = ""
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def command_line(self) -> str:
        return " ".join([self.command, *self.args])
