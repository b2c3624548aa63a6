"""Pipeline orchestration for evaluating a repository end to end.

This module coordinates the steps around the scoring engine:
1. Parse the repository URL
2. Fetch a snapshot from the hosting provider
3. Evaluate the snapshot
"""

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from repo_evaluator.errors import SnapshotError
from repo_evaluator.evaluators.registry import RepositoryEvaluator
from repo_evaluator.models.model_eval import RubricPolicy
from repo_evaluator.models.model_result import EvaluationResult
from repo_evaluator.models.model_snapshot import RepositorySnapshot
from repo_evaluator.scrapers.base_scraper import BaseSnapshotProvider
from repo_evaluator.scrapers.github.github import GitHubSnapshotProvider
from repo_evaluator.scrapers.url import RepositoryRef, parse_repository_url

logger = logging.getLogger(__name__)


async def evaluate_ref(
    ref: RepositoryRef,
    token: str | None = None,
    policy: RubricPolicy | None = None,
    provider: BaseSnapshotProvider | None = None,
) -> EvaluationResult:
    """Fetch a snapshot for an owner/name pair and evaluate it.

    Args:
        ref: Repository to evaluate.
        token: Optional GitHub token, used only when no provider is given.
        policy: Rubric policy. Uses the canonical policy if None.
        provider: Snapshot provider. A GitHub provider is created (and closed) if None.

    Returns:
        The evaluation result.

    Raises:
        SnapshotError: If the snapshot cannot be assembled.
    """
    if provider is None:
        async with GitHubSnapshotProvider(token=token) as github:
            snapshot = await github.fetch_snapshot(ref)
    else:
        snapshot = await provider.fetch_snapshot(ref)

    return RepositoryEvaluator(policy).evaluate(snapshot)


async def evaluate_repository(
    url: str,
    token: str | None = None,
    policy: RubricPolicy | None = None,
    provider: BaseSnapshotProvider | None = None,
) -> EvaluationResult:
    """Parse a repository URL, fetch its snapshot and evaluate it.

    Args:
        url: GitHub repository URL.
        token: Optional GitHub token, used only when no provider is given.
        policy: Rubric policy. Uses the canonical policy if None.
        provider: Snapshot provider. A GitHub provider is created if None.

    Returns:
        The evaluation result.

    Raises:
        InvalidRepositoryUrlError: If the URL cannot be parsed.
        SnapshotError: If the snapshot cannot be assembled.
    """
    ref = parse_repository_url(url)
    logger.info(f"Analyzing repository: {ref.full_name}")
    return await evaluate_ref(ref, token=token, policy=policy, provider=provider)


def run_evaluation(
    url: str,
    token: str | None = None,
    policy: RubricPolicy | None = None,
) -> EvaluationResult:
    """Synchronous wrapper around ``evaluate_repository``."""
    return asyncio.run(evaluate_repository(url, token=token, policy=policy))


def load_snapshot(path: Path | str) -> RepositorySnapshot:
    """Load a snapshot from a JSON file.

    Args:
        path: Path to a JSON document shaped like ``RepositorySnapshot``.

    Returns:
        The validated snapshot.

    Raises:
        SnapshotError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot file {path}: {e}") from e

    try:
        return RepositorySnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot file {path}: {e}") from e


def evaluate_snapshot_file(
    path: Path | str,
    policy: RubricPolicy | None = None,
) -> EvaluationResult:
    """Evaluate a snapshot stored on disk, without any network access."""
    snapshot = load_snapshot(path)
    return RepositoryEvaluator(policy).evaluate(snapshot)
