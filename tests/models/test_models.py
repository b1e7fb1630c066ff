"""Tests for Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from aiovcs.models import ChangedFiles, CommandResult


class TestCommandResult:
    def test_success(self) -> None:
        r = CommandResult(command="git", args=["status", "--short"], stdout="M  a\n", exit_code=0)
        assert r.ok is True
        assert r.stderr == ""
        assert r.command_line == "git status --short"

    def test_failure(self) -> None:
        r = CommandResult(command="git", exit_code=128, stderr="fatal")
        assert r.ok is False
        assert r.args == []
        assert r.command_line == "git"

    def test_exit_code_required(self) -> None:
        with pytest.raises(ValidationError):
            CommandResult(command="git")

    def test_serialization(self) -> None:
        r = CommandResult(command="git", args=["diff"], exit_code=1)
        assert r.model_dump() == {
            "command": "git",
            "args": ["diff"],
            "stdout": "",
            "stderr": "",
            "exit_code": 1,
        }


class TestChangedFiles:
    def test_defaults(self) -> None:
        c = ChangedFiles()
        assert c.vcs_detected is False
        assert c.branch is None
        assert c.uncommitted_files == []
        assert c.modified_files == []
        assert c.has_changes is False
        assert c.error is None

    def test_has_changes(self) -> None:
        assert ChangedFiles(vcs_detected=True, uncommitted_files=["a.py"]).has_changes
        assert ChangedFiles(vcs_detected=True, modified_files=["b.py"]).has_changes

    def test_lists_not_shared(self) -> None:
        a = ChangedFiles()
        b = ChangedFiles()
        a.uncommitted_files.append("x")
        assert b.uncommitted_files == []

    def test_round_trip(self) -> None:
        c = ChangedFiles(vcs_detected=True, branch="main", modified_files=["x.go"])
        assert ChangedFiles.model_validate(c.model_dump()) == c
