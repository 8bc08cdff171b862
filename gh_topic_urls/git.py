"""Thin wrappers around git CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from .exceptions import GitCommandError, NoCurrentBranch
from .process import Deadline, run_command


class GitClient(Protocol):
    """The git operations the selector and resolver rely on."""

    def remote_url(self, remote: str = "origin") -> str:
        ...

    def current_branch(self) -> str:
        """Return the checked out branch or raise NoCurrentBranch."""
        ...

    def ref_exists(self, ref: str) -> bool:
        """Return whether a fully qualified ref exists. Missing is not an error."""
        ...

    def list_branches(self) -> list[str]:
        """Return raw ``git branch -a`` lines, most recently committed first."""
        ...


class GitCli:
    """GitClient backed by the git executable."""

    def __init__(self, deadline: Deadline, repo: Path | None = None):
        self.deadline = deadline
        self.repo = repo

    def run(self, args: Sequence[str], *, ok_codes: Sequence[int] = (0,)):
        command = ["git", *args]
        if self.repo is not None:
            command[1:1] = ["-C", str(self.repo)]
        result = run_command(command, deadline=self.deadline)
        if result.returncode not in ok_codes:
            raise GitCommandError(command, result.returncode, result.stderr)
        return result

    def remote_url(self, remote: str = "origin") -> str:
        return self.run(["remote", "get-url", remote]).stdout.strip()

    def current_branch(self) -> str:
        # Empty output when in detached HEAD state.
        branch = self.run(["branch", "--show-current"]).stdout.strip()
        if not branch:
            raise NoCurrentBranch("could not determine current branch (detached HEAD?)")
        return branch

    def ref_exists(self, ref: str) -> bool:
        result = self.run(["show-ref", "--verify", "--quiet", ref], ok_codes=(0, 1))
        return result.returncode == 0

    def list_branches(self) -> list[str]:
        result = self.run(["branch", "-a", "--sort=-committerdate"])
        return result.stdout.splitlines()


__all__ = ["GitClient", "GitCli"]
