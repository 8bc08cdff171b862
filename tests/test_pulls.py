"""Tests for the gh | jq pull request query."""

from __future__ import annotations

import unittest
from unittest import mock

from gh_topic_urls import process, pulls
from gh_topic_urls.exceptions import MissingBinary
from gh_topic_urls.process import Deadline


class BuildApiPathTests(unittest.TestCase):
    def test_scopes_to_base_branch_oldest_first(self) -> None:
        self.assertEqual(
            pulls.build_api_path("owner/repo", "main"),
            "/repos/owner/repo/pulls?state=all&base=main&sort=created&direction=asc&per_page=100",
        )

    def test_quotes_branch(self) -> None:
        path = pulls.build_api_path("owner/repo", "feature/a&b")

        self.assertIn("base=feature%2Fa%26b&", path)


class FetchPullRequestLinksTests(unittest.TestCase):
    def test_pipes_gh_into_jq(self) -> None:
        deadline = Deadline(30)
        with mock.patch.object(pulls, "require_binary") as require, \
                mock.patch.object(pulls, "run_pipeline", return_value="- https://x/1\n") as pipeline:
            output = pulls.fetch_pull_request_links("owner/repo", "main", deadline=deadline)

        self.assertEqual(output, "- https://x/1\n")
        self.assertEqual([c.args[0] for c in require.call_args_list], ["gh", "jq"])
        producer, consumer = pipeline.call_args.args
        self.assertEqual(producer[:3], ["gh", "api", "--paginate"])
        self.assertIn("X-GitHub-Api-Version: 2022-11-28", producer)
        self.assertEqual(producer[-1], pulls.build_api_path("owner/repo", "main"))
        self.assertEqual(consumer, ["jq", "-r", '"- " + .[].html_url'])
        self.assertIs(pipeline.call_args.kwargs["deadline"], deadline)

    def test_missing_jq(self) -> None:
        with mock.patch.object(process.shutil, "which", side_effect=lambda name: None if name == "jq" else "/bin/x"):
            with self.assertRaises(MissingBinary):
                pulls.fetch_pull_request_links("owner/repo", "main", deadline=Deadline(30))


if __name__ == "__main__":
    unittest.main()
