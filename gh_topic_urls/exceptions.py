"""Custom error hierarchy for gh-topic-urls."""

from __future__ import annotations


class TopicUrlsError(RuntimeError):
    """Base error for the CLI."""


class ConfigError(TopicUrlsError):
    """Raised when an environment override cannot be parsed."""


class RemoteUrlError(TopicUrlsError):
    """Raised when the origin URL cannot be turned into owner/repo."""


class UnsupportedFormat(RemoteUrlError):
    def __init__(self, remote_url: str):
        self.remote_url = remote_url
        super().__init__(f"unsupported remote URL format: {remote_url}")


class InvalidFormat(RemoteUrlError):
    def __init__(self, remote_url: str, reason: str):
        self.remote_url = remote_url
        super().__init__(f"invalid remote URL {remote_url!r}: {reason}")


class GitCommandError(TopicUrlsError):
    """Raised when an underlying git command fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        details = self.stderr.strip().splitlines()
        if details:
            message = f"{message}: {details[-1]}"
        super().__init__(message)


class CommandTimeout(TopicUrlsError):
    """Raised when the time budget of a run is exhausted."""


class MissingBinary(TopicUrlsError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Required binary not found in PATH: {name}")


class NoCurrentBranch(TopicUrlsError):
    """Raised when HEAD is detached or the branch is unborn."""


class BranchNotFound(TopicUrlsError):
    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"branch '{branch}' does not exist")


class ExistenceCheckFailed(TopicUrlsError):
    """Raised when git could not answer whether a branch exists."""


class NoBranches(TopicUrlsError):
    """Raised when the branch listing is empty."""


class ValidationError(TopicUrlsError):
    """Raised when the environment cannot support the requested mode."""


class UserAbort(TopicUrlsError):
    """Raised when the user cancels an interactive flow."""


class SelectionCancelled(UserAbort):
    """Raised when the branch picker is dismissed."""


class QueryFailed(TopicUrlsError):
    """Raised when the gh or jq stage of the query fails."""


class ClipboardWriteFailed(TopicUrlsError):
    """Raised when no clipboard helper accepted the text."""


__all__ = [
    "TopicUrlsError",
    "ConfigError",
    "RemoteUrlError",
    "UnsupportedFormat",
    "InvalidFormat",
    "GitCommandError",
    "CommandTimeout",
    "MissingBinary",
    "NoCurrentBranch",
    "BranchNotFound",
    "ExistenceCheckFailed",
    "NoBranches",
    "ValidationError",
    "UserAbort",
    "SelectionCancelled",
    "QueryFailed",
    "ClipboardWriteFailed",
]
