"""Query GitHub for pull requests through the gh and jq CLIs."""

from __future__ import annotations

from urllib.parse import quote

from .process import Deadline, require_binary, run_pipeline

GITHUB_HEADERS = (
    "Accept: application/vnd.github+json",
    "X-GitHub-Api-Version: 2022-11-28",
)
LINK_FILTER = '"- " + .[].html_url'
PAGE_SIZE = 100


def build_api_path(repo: str, branch: str) -> str:
    """REST path listing every pull request based on ``branch``, oldest first."""
    return (
        f"/repos/{repo}/pulls"
        f"?state=all&base={quote(branch, safe='')}&sort=created&direction=asc&per_page={PAGE_SIZE}"
    )


def gh_command(repo: str, branch: str) -> list[str]:
    cmd = ["gh", "api", "--paginate"]
    for header in GITHUB_HEADERS:
        cmd.extend(["-H", header])
    cmd.append(build_api_path(repo, branch))
    return cmd


def jq_command() -> list[str]:
    return ["jq", "-r", LINK_FILTER]


def fetch_pull_request_links(repo: str, branch: str, *, deadline: Deadline) -> str:
    """Return ``- <url>`` lines for each pull request, or an empty string."""
    for binary in ("gh", "jq"):
        require_binary(binary)
    return run_pipeline(gh_command(repo, branch), jq_command(), deadline=deadline)


__all__ = ["build_api_path", "fetch_pull_request_links"]
