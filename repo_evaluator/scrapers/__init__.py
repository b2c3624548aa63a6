"""Snapshot providers for repository hosting services."""

from repo_evaluator.scrapers.base_scraper import BaseSnapshotProvider
from repo_evaluator.scrapers.github import GitHubSnapshotProvider
from repo_evaluator.scrapers.url import RepositoryRef, parse_repository_url

__all__ = ["BaseSnapshotProvider", "GitHubSnapshotProvider", "RepositoryRef", "parse_repository_url"]
