"""Main application orchestration."""

from __future__ import annotations

import logging
from typing import Protocol

import typer
from rich.markup import escape

from . import render
from .branches import Chooser, select_branch, selection_mode
from .exceptions import ClipboardWriteFailed
from .git import GitClient
from .process import Deadline
from .remote import current_repo

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Returns the filtered `- url` lines for the pull requests based on a branch."""

    def __call__(self, repo: str, branch: str, *, deadline: Deadline) -> str:
        ...


class Copier(Protocol):
    def __call__(self, text: str, *, deadline: Deadline) -> bool:
        ...


def resolve_branch(
    git: GitClient,
    branch: str | None,
    *,
    interactive: bool,
    chooser: Chooser,
) -> str:
    """Pick the target branch and tell the user which one was picked."""
    target = select_branch(git, branch, interactive=interactive, chooser=chooser)
    render.show_branch(selection_mode(branch, interactive), target)
    return target


def publish_links(
    git: GitClient,
    branch: str,
    *,
    deadline: Deadline,
    fetch: Fetcher,
    copy: Copier,
) -> str | None:
    """Print the pull request links for ``branch`` and copy them.

    Returns the copied text, or None when the branch has no pull requests.
    """

    repo = current_repo(git)
    logger.debug("Resolved repository %s", repo)
    links = fetch(repo, branch, deadline=deadline)
    if not links.strip():
        render.info(f"No pull requests found for branch '{escape(branch)}'")
        return None

    typer.echo(links, nl=not links.endswith("\n"))
    if not copy(links, deadline=deadline):
        raise ClipboardWriteFailed(
            "clipboard copy failed: no clipboard helper accepted the text"
        )
    render.success("Copied to clipboard")
    return links


__all__ = ["resolve_branch", "publish_links"]
