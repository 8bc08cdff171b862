"""Decide which branch the pull request query targets."""

from __future__ import annotations

import enum
from typing import Callable, Sequence

from .exceptions import (
    BranchNotFound,
    ExistenceCheckFailed,
    GitCommandError,
    MissingBinary,
    NoBranches,
)
from .git import GitClient

REMOTES_NAMESPACE = "remotes/"
REMOTE_PREFIX = "origin/"
CURRENT_MARKER = "* "
WORKTREE_MARKER = "+ "
SYMBOLIC_MARKER = "HEAD ->"

Chooser = Callable[[Sequence[str]], str]


class SelectionMode(enum.Enum):
    EXPLICIT = "explicit"
    DEFAULT = "default"
    INTERACTIVE = "interactive"


def selection_mode(branch: str | None, interactive: bool) -> SelectionMode:
    if interactive:
        return SelectionMode.INTERACTIVE
    if branch is None:
        return SelectionMode.DEFAULT
    return SelectionMode.EXPLICIT


def normalize_branch_line(line: str) -> str:
    """Clean one line of ``git branch -a`` output.

    Returns an empty string for lines that should be dropped: blanks and
    symbolic pointers such as ``remotes/origin/HEAD -> origin/main``.
    """

    line = line.strip()
    if not line or SYMBOLIC_MARKER in line:
        return ""
    for marker in (CURRENT_MARKER, WORKTREE_MARKER):
        if line.startswith(marker):
            line = line[len(marker):]
    if line.startswith("("):
        # "(HEAD detached at 1a2b3c4)"
        return ""
    if line.startswith(REMOTES_NAMESPACE):
        line = line[len(REMOTES_NAMESPACE):]
    if line.startswith(REMOTE_PREFIX):
        line = line[len(REMOTE_PREFIX):]
    return line.strip()


def all_branches(git: GitClient) -> list[str]:
    """Local and origin branches, most recently committed first.

    A branch that exists both locally and on origin is listed twice.
    """

    branches = []
    for raw in git.list_branches():
        name = normalize_branch_line(raw)
        if name:
            branches.append(name)
    return branches


def branch_exists(git: GitClient, name: str) -> bool:
    try:
        if git.ref_exists(f"refs/heads/{name}"):
            return True
        return git.ref_exists(f"refs/remotes/{REMOTE_PREFIX}{name}")
    except (GitCommandError, MissingBinary) as exc:
        raise ExistenceCheckFailed(f"failed to check branch existence: {exc}") from exc


def select_branch(
    git: GitClient,
    branch: str | None,
    *,
    interactive: bool,
    chooser: Chooser,
) -> str:
    mode = selection_mode(branch, interactive)
    if mode is SelectionMode.INTERACTIVE:
        branches = all_branches(git)
        if not branches:
            raise NoBranches("no branches found")
        return chooser(branches)

    if branch is None:
        return git.current_branch()

    if not branch_exists(git, branch):
        raise BranchNotFound(branch)
    return branch


def complete_branches(git: GitClient, incomplete: str) -> list[str]:
    return [name for name in all_branches(git) if name.startswith(incomplete)]


__all__ = [
    "SelectionMode",
    "selection_mode",
    "normalize_branch_line",
    "all_branches",
    "branch_exists",
    "select_branch",
    "complete_branches",
]
