"""Resolve the owner/repo identifier from the origin remote."""

from __future__ import annotations

from .exceptions import InvalidFormat, UnsupportedFormat
from .git import GitClient

SSH_PREFIX = "git@"
HTTPS_PREFIX = "https://"


def parse_repo_from_url(remote_url: str) -> str:
    """Return ``owner/repo`` for an SSH or HTTPS remote URL.

    ``git@github.com:owner/repo.git`` and ``https://github.com/owner/repo.git``
    both give ``owner/repo``; the ``.git`` suffix is optional.
    """

    if remote_url.startswith(SSH_PREFIX):
        parts = remote_url.split(":")
        if len(parts) < 2:
            raise InvalidFormat(remote_url, "expected host:owner/repo")
        path = _strip_git_suffix(parts[-1])
        if not path:
            raise InvalidFormat(remote_url, "repository path is empty")
        return path

    if remote_url.startswith(HTTPS_PREFIX):
        parts = remote_url.split("/")
        if len(parts) < 5:
            raise InvalidFormat(remote_url, "expected https://host/owner/repo")
        owner = parts[-2]
        repo = _strip_git_suffix(parts[-1])
        if not owner or not repo:
            raise InvalidFormat(remote_url, "owner and repository must not be empty")
        return f"{owner}/{repo}"

    raise UnsupportedFormat(remote_url)


def current_repo(git: GitClient) -> str:
    return parse_repo_from_url(git.remote_url("origin").strip())


def _strip_git_suffix(value: str) -> str:
    if value.endswith(".git"):
        return value[: -len(".git")]
    return value


__all__ = ["parse_repo_from_url", "current_repo"]
