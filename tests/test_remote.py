"""Tests for turning remote URLs into owner/repo identifiers."""

from __future__ import annotations

import unittest

from fakes import FakeGit

from gh_topic_urls.exceptions import InvalidFormat, RemoteUrlError, UnsupportedFormat
from gh_topic_urls.remote import current_repo, parse_repo_from_url


class ParseRepoFromUrlTests(unittest.TestCase):
    def test_ssh_url(self) -> None:
        self.assertEqual(parse_repo_from_url("git@github.com:owner/repo.git"), "owner/repo")

    def test_ssh_url_without_git_suffix(self) -> None:
        self.assertEqual(parse_repo_from_url("git@github.com:owner/repo"), "owner/repo")

    def test_https_url(self) -> None:
        self.assertEqual(
            parse_repo_from_url("https://github.com/my-org/my-awesome-project.git"),
            "my-org/my-awesome-project",
        )

    def test_https_url_without_git_suffix(self) -> None:
        self.assertEqual(parse_repo_from_url("https://github.example.com/owner/repo"), "owner/repo")

    def test_https_host_only_is_invalid(self) -> None:
        with self.assertRaises(InvalidFormat):
            parse_repo_from_url("https://github.com/")

    def test_https_empty_repo_is_invalid(self) -> None:
        with self.assertRaises(InvalidFormat):
            parse_repo_from_url("https://github.com/owner/")

    def test_https_repo_that_is_only_suffix_is_invalid(self) -> None:
        with self.assertRaises(InvalidFormat):
            parse_repo_from_url("https://github.com/owner/.git")

    def test_ssh_without_colon_is_invalid(self) -> None:
        with self.assertRaises(InvalidFormat):
            parse_repo_from_url("git@github.com")

    def test_ssh_with_empty_path_is_invalid(self) -> None:
        with self.assertRaises(InvalidFormat):
            parse_repo_from_url("git@github.com:.git")

    def test_unsupported_scheme_cites_input(self) -> None:
        with self.assertRaises(UnsupportedFormat) as ctx:
            parse_repo_from_url("unsupported://example.com/repo")
        self.assertIn("unsupported://example.com/repo", str(ctx.exception))

    def test_empty_string_is_unsupported(self) -> None:
        with self.assertRaises(UnsupportedFormat):
            parse_repo_from_url("")

    def test_output_is_not_reparseable(self) -> None:
        with self.assertRaises(RemoteUrlError):
            parse_repo_from_url(parse_repo_from_url("git@github.com:owner/repo.git"))


class CurrentRepoTests(unittest.TestCase):
    def test_reads_origin_and_strips_whitespace(self) -> None:
        git = FakeGit(remote="https://github.com/owner/repo.git\n")

        self.assertEqual(current_repo(git), "owner/repo")
        self.assertIn(("remote_url", "origin"), git.calls)

    def test_blank_remote_is_unsupported(self) -> None:
        with self.assertRaises(UnsupportedFormat):
            current_repo(FakeGit(remote="\n"))


if __name__ == "__main__":
    unittest.main()
