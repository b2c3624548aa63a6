"""GitHub snapshot provider.

Assembles a RepositorySnapshot from six independent GitHub REST reads issued
concurrently:
- Repository metadata (mandatory, failures are raised)
- Root contents listing
- Commit history (one page)
- Language byte counts
- README
- Releases

Optional reads degrade to empty values so the engine can score with its
documented baselines. Requests retry on 429 and 5xx with exponential backoff
and jitter.
"""

import asyncio
import base64
import binascii
import logging
from datetime import datetime
from typing import Any

import httpx

from repo_evaluator.consts import (
    GITHUB_API_BASE,
    GITHUB_API_TIMEOUT,
    GITHUB_COMMITS_PER_PAGE,
    GITHUB_MAX_RETRIES,
    GITHUB_RELEASES_PER_PAGE,
)
from repo_evaluator.errors import (
    AccessDeniedError,
    RepositoryNotFoundError,
    SnapshotFetchError,
)
from repo_evaluator.models.common import _utc_now
from repo_evaluator.models.model_snapshot import (
    CommitRecord,
    ReadmeDocument,
    ReleaseRecord,
    RepositoryMetadata,
    RepositorySnapshot,
)
from repo_evaluator.scrapers.base_scraper import BaseSnapshotProvider
from repo_evaluator.scrapers.github.rate_limiter import RateLimiter
from repo_evaluator.scrapers.url import RepositoryRef

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def _parse_metadata(data: dict[str, Any]) -> RepositoryMetadata:
    """Map the /repos/{owner}/{repo} payload to metadata."""
    return RepositoryMetadata(
        name=data.get("name") or "",
        url=data.get("html_url") or "",
        stars=data.get("stargazers_count") or 0,
        forks=data.get("forks_count") or 0,
        watchers=data.get("watchers_count") or 0,
        open_issues=data.get("open_issues_count") or 0,
        description=data.get("description") or "",
        has_license=bool(data.get("license")),
        language=data.get("language"),
        size=data.get("size") or 0,
    )


def _parse_commit(item: dict[str, Any]) -> CommitRecord | None:
    """Map one /commits entry, skipping entries without a usable author date."""
    commit = item.get("commit") or {}
    author = commit.get("author") or {}
    date = author.get("date")
    if not date or not isinstance(date, str):
        return None
    try:
        authored_at = datetime.fromisoformat(date.replace("Z", "+00:00"))
    except ValueError:
        logger.info(f"Skipping commit with unparsable author date {date!r}")
        return None
    return CommitRecord(message=commit.get("message") or "", authored_at=authored_at)


def _decode_readme(data: dict[str, Any]) -> ReadmeDocument:
    """Decode the base64 README payload."""
    raw = data.get("content") or ""
    try:
        content = base64.b64decode(raw).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError):
        logger.info("README content is not valid base64, treating it as empty")
        content = ""
    return ReadmeDocument(content=content, size=data.get("size") or len(content.encode("utf-8")))


class GitHubSnapshotProvider(BaseSnapshotProvider):
    """GitHub snapshot provider with retry on rate limits.

    The API token is passed in explicitly; the provider never reads it from
    the environment.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = GITHUB_API_BASE,
        timeout: float = GITHUB_API_TIMEOUT,
        commits_per_page: int = GITHUB_COMMITS_PER_PAGE,
        releases_per_page: int = GITHUB_RELEASES_PER_PAGE,
        max_retries: int = GITHUB_MAX_RETRIES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize GitHub provider.

        Args:
            token: Optional personal access token (raises rate limits, allows private repos).
            base_url: API root, overridable for GitHub Enterprise.
            timeout: Per-request timeout in seconds.
            commits_per_page: Size of the analyzed commit history.
            releases_per_page: Number of releases fetched.
            max_retries: Retries per request on 429 / 5xx.
            transport: Optional httpx transport (used by tests).
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self.commits_per_page = commits_per_page
        self.releases_per_page = releases_per_page
        self.max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> str:
        """Return source identifier."""
        return "github"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "repo-evaluator",
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self._headers(),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make API request with bounded retries.

        Args:
            endpoint: API endpoint (relative to base URL).
            params: Query parameters.

        Returns:
            Decoded JSON response.

        Raises:
            httpx.HTTPStatusError: On non-retryable HTTP errors or when retries run out.
            httpx.RequestError: On transport failures.
        """
        client = await self._get_client()
        limiter = RateLimiter(max_retries=self.max_retries)

        while True:
            response = await client.get(endpoint, params=params)

            if response.status_code in RETRYABLE_STATUS_CODES and not limiter.exhausted:
                delay = limiter.backoff(_retry_after(response))
                logger.warning(
                    f"GitHub returned {response.status_code} for {endpoint}, "
                    f"retrying in {delay:.1f}s"
                )
                await asyncio.sleep(delay)
                continue

            response.raise_for_status()
            return response.json()

    async def _fetch_metadata(self, ref: RepositoryRef) -> RepositoryMetadata:
        """Fetch repository metadata; every failure here is fatal."""
        try:
            data = await self._request(f"/repos/{ref.owner}/{ref.name}")
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                raise RepositoryNotFoundError(
                    f"Repository {ref.full_name} does not exist or is private"
                ) from e
            if status in (401, 403):
                raise AccessDeniedError(
                    f"Access to {ref.full_name} was denied (HTTP {status})"
                ) from e
            raise SnapshotFetchError(
                f"Failed to fetch repository {ref.full_name}: HTTP {status}", status_code=status
            ) from e
        except (httpx.RequestError, ValueError) as e:
            raise SnapshotFetchError(f"Failed to fetch repository {ref.full_name}: {e}") from e

        return _parse_metadata(data)

    async def _fetch_contents(self, ref: RepositoryRef) -> list[str] | None:
        """Fetch root entry names; None means unknown structure."""
        try:
            data = await self._request(f"/repos/{ref.owner}/{ref.name}/contents/")
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"Contents unavailable for {ref.full_name}: {e}")
            return None

        # A file path returns an object instead of a listing
        if not isinstance(data, list):
            return None
        return [entry["name"] for entry in data if isinstance(entry, dict) and entry.get("name")]

    async def _fetch_commits(self, ref: RepositoryRef) -> list[CommitRecord]:
        """Fetch one page of commits; empty on failure (409 = empty repository)."""
        try:
            data = await self._request(
                f"/repos/{ref.owner}/{ref.name}/commits",
                params={"per_page": self.commits_per_page},
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"Commits unavailable for {ref.full_name}: {e}")
            return []

        if not isinstance(data, list):
            return []
        commits = [_parse_commit(item) for item in data if isinstance(item, dict)]
        return [commit for commit in commits if commit is not None]

    async def _fetch_languages(self, ref: RepositoryRef) -> dict[str, int]:
        """Fetch language byte counts; empty on failure."""
        try:
            data = await self._request(f"/repos/{ref.owner}/{ref.name}/languages")
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"Languages unavailable for {ref.full_name}: {e}")
            return {}

        if not isinstance(data, dict):
            return {}
        return {name: int(count) for name, count in data.items() if isinstance(count, int)}

    async def _fetch_readme(self, ref: RepositoryRef) -> ReadmeDocument | None:
        """Fetch and decode the README; None when there is none."""
        try:
            data = await self._request(f"/repos/{ref.owner}/{ref.name}/readme")
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"README unavailable for {ref.full_name}: {e}")
            return None

        if not isinstance(data, dict):
            return None
        return _decode_readme(data)

    async def _fetch_releases(self, ref: RepositoryRef) -> list[ReleaseRecord]:
        """Fetch releases; empty on failure."""
        try:
            data = await self._request(
                f"/repos/{ref.owner}/{ref.name}/releases",
                params={"per_page": self.releases_per_page},
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.info(f"Releases unavailable for {ref.full_name}: {e}")
            return []

        if not isinstance(data, list):
            return []
        return [
            ReleaseRecord(tag_name=item["tag_name"])
            for item in data
            if isinstance(item, dict) and item.get("tag_name")
        ]

    async def fetch_snapshot(self, ref: RepositoryRef) -> RepositorySnapshot:
        """Fetch all six sub-resources concurrently and bundle them.

        Args:
            ref: The repository to fetch

        Returns:
            Snapshot captured at the time the fetch started

        Raises:
            RepositoryNotFoundError: Metadata returned 404
            AccessDeniedError: Metadata returned 401/403
            SnapshotFetchError: Any other metadata failure
        """
        logger.info(f"Fetching snapshot for {ref.full_name}")
        captured_at = _utc_now()

        # All reads settle before a metadata failure is raised
        results = await asyncio.gather(
            self._fetch_metadata(ref),
            self._fetch_contents(ref),
            self._fetch_commits(ref),
            self._fetch_languages(ref),
            self._fetch_readme(ref),
            self._fetch_releases(ref),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        metadata, contents, commits, languages, readme, releases = results

        logger.info(
            f"Snapshot for {ref.full_name}: {len(contents or [])} root entries, "
            f"{len(commits)} commits, {len(languages)} languages, "
            f"readme={'yes' if readme else 'no'}, {len(releases)} releases"
        )

        return RepositorySnapshot(
            metadata=metadata,
            contents=contents,
            commits=commits,
            languages=languages,
            readme=readme,
            releases=releases,
            captured_at=captured_at,
        )


def _retry_after(response: httpx.Response) -> float | None:
    """Read the Retry-After header in seconds, if present and numeric."""
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None
