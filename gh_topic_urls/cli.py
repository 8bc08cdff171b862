"""Typer CLI entrypoint for gh-topic-urls."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer

from . import __version__, render
from .app import publish_links, resolve_branch
from .branches import complete_branches
from .clipboard import copy_to_clipboard
from .completion import PROG_NAME, completion_request
from .config import load_config
from .exceptions import TopicUrlsError
from .git import GitCli
from .interactive import prompt_branch
from .process import Deadline
from .pulls import fetch_pull_request_links

logger = logging.getLogger(__name__)

USAGE_HINT = f"usage: {PROG_NAME} [BRANCH-NAME] or {PROG_NAME} -i"

app = typer.Typer(
    help="Copy links to the pull requests merged into a branch.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def complete_branch_name(incomplete: str) -> list[str]:
    """Shell completion for the branch argument. Failures give no suggestions."""
    try:
        deadline = Deadline(load_config().completion_timeout)
        return complete_branches(GitCli(deadline), incomplete)
    except TopicUrlsError as exc:
        logger.debug("Branch completion failed: %s", exc)
        return []


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gh-topic-urls {__version__}")
        raise typer.Exit()


@app.command()
def main(
    branch: Optional[str] = typer.Argument(
        None,
        metavar="[BRANCH-NAME]",
        help="Base branch of the pull requests (defaults to the current branch).",
        autocompletion=complete_branch_name,
        show_default=False,
    ),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Pick the branch from a list (ignores BRANCH-NAME)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the gh-topic-urls version and exit.",
    ),
) -> None:
    """List the pull requests based on a branch and copy their links to the clipboard."""

    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        config = load_config()
    except TopicUrlsError as exc:
        _fail(str(exc))

    deadline = Deadline(config.command_timeout)
    git = GitCli(deadline)

    try:
        target = resolve_branch(git, branch, interactive=interactive, chooser=prompt_branch)
    except TopicUrlsError as exc:
        if interactive:
            _fail(f"Branch selection failed: {exc}")
        _fail(f"Failed to get branch: {exc} ({USAGE_HINT})")

    try:
        publish_links(
            git,
            target,
            deadline=deadline,
            fetch=fetch_pull_request_links,
            copy=copy_to_clipboard,
        )
    except TopicUrlsError as exc:
        _fail(f"Failed to get pull requests: {exc}")


def _fail(message: str, code: int = 1) -> NoReturn:
    render.error(message)
    raise typer.Exit(code)


def run() -> None:
    """Console script entrypoint: serve shell completion, otherwise run the command."""
    try:
        response = completion_request(app)
    except TopicUrlsError as exc:
        render.error(str(exc))
        raise SystemExit(1) from exc
    if response is None:
        app(prog_name=PROG_NAME)
        return
    if response:
        typer.echo(response)


if __name__ == "__main__":
    run()
