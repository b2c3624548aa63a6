"""Tests for GitHub URL parsing."""

import pytest

from repo_evaluator.errors import InvalidRepositoryUrlError, SnapshotError
from repo_evaluator.scrapers.url import RepositoryRef, parse_repository_url


class TestParseRepositoryUrl:
    """Tests for parse_repository_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/octocat/hello-world",
            "https://github.com/octocat/hello-world/",
            "https://github.com/octocat/hello-world.git",
            "http://www.github.com/octocat/hello-world",
            "github.com/octocat/hello-world",
            "git@github.com:octocat/hello-world.git",
            "https://github.com/octocat/hello-world/tree/main/src",
            "https://github.com/octocat/hello-world#readme",
            "https://github.com/octocat/hello-world?tab=readme",
            "  https://GitHub.com/octocat/hello-world  ",
        ],
    )
    def test_valid_urls(self, url: str) -> None:
        assert parse_repository_url(url) == RepositoryRef(owner="octocat", name="hello-world")

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "https://gitlab.com/octocat/hello-world",
            "https://github.com/octocat",
            "https://github.com/",
        ],
    )
    def test_invalid_urls(self, url: str) -> None:
        with pytest.raises(InvalidRepositoryUrlError):
            parse_repository_url(url)

    def test_invalid_url_is_snapshot_error(self) -> None:
        with pytest.raises(SnapshotError):
            parse_repository_url("https://example.com")

    def test_full_name(self) -> None:
        assert RepositoryRef(owner="octocat", name="hello-world").full_name == "octocat/hello-world"
