"""Tests for the GitHub snapshot provider."""

import base64
from collections.abc import Callable
from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from repo_evaluator.errors import (
    AccessDeniedError,
    RepositoryNotFoundError,
    SnapshotFetchError,
)
from repo_evaluator.scrapers.github.github import (
    GitHubSnapshotProvider,
    _decode_readme,
    _parse_commit,
    _parse_metadata,
)
from repo_evaluator.scrapers.github.rate_limiter import RateLimiter
from repo_evaluator.scrapers.url import RepositoryRef

REF = RepositoryRef(owner="octocat", name="hello-world")
REPO_PATH = "/repos/octocat/hello-world"

README_TEXT = "# Hello\n\n## Install\n\npip install hello\n"

REPO_PAYLOAD = {
    "name": "hello-world",
    "html_url": "https://github.com/octocat/hello-world",
    "stargazers_count": 120,
    "forks_count": 15,
    "watchers_count": 120,
    "open_issues_count": 2,
    "description": "My first repository on GitHub",
    "license": {"key": "mit"},
    "language": "Python",
    "size": 108,
}

ROUTES: dict[str, object] = {
    REPO_PATH: REPO_PAYLOAD,
    f"{REPO_PATH}/contents/": [
        {"name": "src", "type": "dir"},
        {"name": "tests", "type": "dir"},
        {"name": "README.md", "type": "file"},
    ],
    f"{REPO_PATH}/commits": [
        {"commit": {"message": "Add greeting", "author": {"date": "2024-05-30T10:00:00Z"}}},
        {"commit": {"message": "Initial commit", "author": {"date": "2024-01-01T00:00:00Z"}}},
    ],
    f"{REPO_PATH}/languages": {"Python": 9000, "Shell": 1000},
    f"{REPO_PATH}/readme": {
        "content": base64.b64encode(README_TEXT.encode()).decode(),
        "encoding": "base64",
        "size": len(README_TEXT),
    },
    f"{REPO_PATH}/releases": [{"tag_name": "v1.0.0"}, {"tag_name": "v1.1.0"}],
}


def make_provider(
    handler: Callable[[httpx.Request], httpx.Response], **kwargs
) -> GitHubSnapshotProvider:
    return GitHubSnapshotProvider(transport=httpx.MockTransport(handler), **kwargs)


def route_handler(
    overrides: dict[str, httpx.Response] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Serve ROUTES, with per-path response overrides."""
    overrides = overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in overrides:
            return overrides[path]
        if path in ROUTES:
            return httpx.Response(200, json=ROUTES[path])
        return httpx.Response(404, json={"message": "Not Found"})

    return handler


class TestRateLimiter:
    """Tests for the RateLimiter class."""

    def test_initial_state(self) -> None:
        limiter = RateLimiter(initial_delay=1.0, max_delay=60.0)
        assert limiter._delay == 1.0
        assert limiter._attempts == 0
        assert not limiter.exhausted

    def test_backoff_increases_delay(self) -> None:
        limiter = RateLimiter(initial_delay=1.0, backoff_factor=2.0, jitter_factor=0.0)
        assert limiter.backoff() == 2.0
        assert limiter.backoff() == 4.0
        assert limiter.backoff() == 8.0

    def test_backoff_respects_max_delay(self) -> None:
        limiter = RateLimiter(
            initial_delay=1.0, max_delay=5.0, backoff_factor=2.0, jitter_factor=0.0, max_retries=20
        )
        for _ in range(10):
            limiter.backoff()
        assert limiter._delay == 5.0

    def test_retry_after_is_a_floor(self) -> None:
        limiter = RateLimiter(initial_delay=1.0, jitter_factor=0.0)
        assert limiter.backoff(retry_after=10.0) == 10.0
        assert limiter.backoff(retry_after=1000.0) == 60.0

    def test_exhausted_after_max_retries(self) -> None:
        limiter = RateLimiter(max_retries=2)
        limiter.backoff()
        assert not limiter.exhausted
        limiter.backoff()
        assert limiter.exhausted


class TestParsing:
    """Tests for payload mapping helpers."""

    def test_parse_metadata(self) -> None:
        metadata = _parse_metadata(REPO_PAYLOAD)
        assert metadata.name == "hello-world"
        assert metadata.stars == 120
        assert metadata.watchers == 120
        assert metadata.has_license is True
        assert metadata.language == "Python"

    def test_parse_metadata_nulls(self) -> None:
        metadata = _parse_metadata(
            {"name": "x", "html_url": "u", "description": None, "license": None, "language": None}
        )
        assert metadata.description == ""
        assert metadata.has_license is False
        assert metadata.language is None
        assert metadata.stars == 0

    def test_parse_commit(self) -> None:
        commit = _parse_commit(
            {"commit": {"message": "Fix bug", "author": {"date": "2024-05-30T10:00:00Z"}}}
        )
        assert commit is not None
        assert commit.authored_at == datetime(2024, 5, 30, 10, tzinfo=UTC)

    def test_parse_commit_without_date(self) -> None:
        assert _parse_commit({"commit": {"message": "Fix bug", "author": None}}) is None

    @pytest.mark.parametrize("date", ["yesterday", "2024-13-45T00:00:00Z", 1717200000])
    def test_parse_commit_with_bad_date(self, date: object) -> None:
        item = {"commit": {"message": "Fix bug in parser", "author": {"date": date}}}
        assert _parse_commit(item) is None

    def test_decode_readme(self) -> None:
        readme = _decode_readme(ROUTES[f"{REPO_PATH}/readme"])  # type: ignore[arg-type]
        assert readme.content == README_TEXT
        assert readme.size == len(README_TEXT)

    def test_decode_readme_with_line_breaks(self) -> None:
        encoded = base64.b64encode(README_TEXT.encode()).decode()
        wrapped = "\n".join(encoded[i : i + 20] for i in range(0, len(encoded), 20))
        readme = _decode_readme({"content": wrapped})
        assert readme.content == README_TEXT


class TestGitHubSnapshotProvider:
    """Tests for GitHubSnapshotProvider."""

    def test_source_name(self) -> None:
        assert GitHubSnapshotProvider().source_name == "github"

    def test_token_header(self) -> None:
        assert GitHubSnapshotProvider(token="abc")._headers()["Authorization"] == "token abc"
        assert "Authorization" not in GitHubSnapshotProvider()._headers()

    @pytest.mark.asyncio
    async def test_fetch_snapshot(self) -> None:
        async with make_provider(route_handler()) as provider:
            snapshot = await provider.fetch_snapshot(REF)

        assert snapshot.metadata is not None
        assert snapshot.metadata.name == "hello-world"
        assert snapshot.contents == ("src", "tests", "README.md")
        assert [c.message for c in snapshot.commits] == ["Add greeting", "Initial commit"]
        assert snapshot.languages == {"Python": 9000, "Shell": 1000}
        assert snapshot.readme is not None
        assert snapshot.readme.content == README_TEXT
        assert [r.tag_name for r in snapshot.releases] == ["v1.0.0", "v1.1.0"]
        assert snapshot.captured_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_request_sends_token_and_page_size(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return route_handler()(request)

        async with make_provider(handler, token="secret", commits_per_page=50) as provider:
            await provider.fetch_snapshot(REF)

        assert all(r.headers["Authorization"] == "token secret" for r in seen)
        commits_request = next(r for r in seen if r.url.path.endswith("/commits"))
        assert commits_request.url.params["per_page"] == "50"

    @pytest.mark.asyncio
    async def test_optional_reads_degrade(self) -> None:
        failing = {
            f"{REPO_PATH}/contents/": httpx.Response(404, json={}),
            f"{REPO_PATH}/commits": httpx.Response(409, json={"message": "Git Repository is empty."}),
            f"{REPO_PATH}/languages": httpx.Response(403, json={}),
            f"{REPO_PATH}/readme": httpx.Response(404, json={}),
            f"{REPO_PATH}/releases": httpx.Response(200, text="not json"),
        }
        async with make_provider(route_handler(failing)) as provider:
            snapshot = await provider.fetch_snapshot(REF)

        assert snapshot.metadata is not None
        assert snapshot.contents is None
        assert snapshot.commits == ()
        assert snapshot.languages == {}
        assert snapshot.readme is None
        assert snapshot.releases == ()

    @pytest.mark.asyncio
    async def test_unparsable_commit_dates_are_skipped(self) -> None:
        commits = [
            {"commit": {"message": "x" * 20, "author": {"date": "yesterday"}}},
            {"commit": {"message": "Add greeting", "author": {"date": "2024-05-30T10:00:00Z"}}},
        ]
        overrides = {f"{REPO_PATH}/commits": httpx.Response(200, json=commits)}
        async with make_provider(route_handler(overrides)) as provider:
            snapshot = await provider.fetch_snapshot(REF)

        assert snapshot.metadata is not None
        assert [c.message for c in snapshot.commits] == ["Add greeting"]

    @pytest.mark.asyncio
    async def test_contents_for_file_path_is_unknown(self) -> None:
        overrides = {f"{REPO_PATH}/contents/": httpx.Response(200, json={"name": "README.md"})}
        async with make_provider(route_handler(overrides)) as provider:
            snapshot = await provider.fetch_snapshot(REF)
        assert snapshot.contents is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,error",
        [
            (404, RepositoryNotFoundError),
            (401, AccessDeniedError),
            (403, AccessDeniedError),
            (422, SnapshotFetchError),
        ],
    )
    async def test_metadata_errors(self, status: int, error: type[Exception]) -> None:
        overrides = {REPO_PATH: httpx.Response(status, json={"message": "nope"})}
        async with make_provider(route_handler(overrides)) as provider:
            with pytest.raises(error):
                await provider.fetch_snapshot(REF)

    @pytest.mark.asyncio
    async def test_metadata_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_provider(handler) as provider:
            with pytest.raises(SnapshotFetchError, match="connection refused"):
                await provider.fetch_snapshot(REF)

    @pytest.mark.asyncio
    async def test_retries_rate_limited_requests(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == REPO_PATH:
                calls["count"] += 1
                if calls["count"] == 1:
                    return httpx.Response(429, headers={"Retry-After": "2"})
            return route_handler()(request)

        with patch("asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            async with make_provider(handler) as provider:
                snapshot = await provider.fetch_snapshot(REF)

        assert calls["count"] == 2
        assert snapshot.metadata is not None
        mock_sleep.assert_awaited_once()
        assert mock_sleep.await_args.args[0] >= 2.0

    @pytest.mark.asyncio
    async def test_retries_are_bounded(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == REPO_PATH:
                calls["count"] += 1
                return httpx.Response(503)
            return route_handler()(request)

        with patch("asyncio.sleep", new_callable=AsyncMock):
            async with make_provider(handler, max_retries=2) as provider:
                with pytest.raises(SnapshotFetchError) as exc_info:
                    await provider.fetch_snapshot(REF)

        assert calls["count"] == 3
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_aclose_is_idempotent(self) -> None:
        provider = make_provider(route_handler())
        await provider._get_client()
        await provider.aclose()
        await provider.aclose()
        assert provider._client is None
