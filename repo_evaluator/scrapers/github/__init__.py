"""GitHub snapshot provider."""

from repo_evaluator.scrapers.github.github import GitHubSnapshotProvider
from repo_evaluator.scrapers.github.rate_limiter import RateLimiter

__all__ = ["GitHubSnapshotProvider", "RateLimiter"]
