"""Versioning scorer for releases and semantic version tags."""

import re
from collections.abc import Sequence

from repo_evaluator.evaluators.base import clamp_score
from repo_evaluator.models.model_snapshot import ReleaseRecord, RepositorySnapshot

# Baseline (also the score with no releases)
BASE_SCORE = 30

# (minimum release count, bonus), highest tier first
RELEASE_TIERS: list[tuple[int, int]] = [(5, 40), (2, 30), (1, 20)]

# Tags such as "1.2.3", "v2.0.0-rc.1"
SEMVER_PATTERN = re.compile(r"^v?\d+\.\d+\.\d+")
SEMVER_BONUS = 10


def has_semantic_version(releases: Sequence[ReleaseRecord]) -> bool:
    """Check whether any release tag starts with a MAJOR.MINOR.PATCH version."""
    return any(SEMVER_PATTERN.match(release.tag_name) for release in releases)


def score_versioning(snapshot: RepositorySnapshot) -> int:
    """Score release practice.

    Rules:
        score = 30
              + 40 if >= 5 releases, 30 if >= 2, 20 if 1
              + 10 if any tag is a semantic version

    Args:
        snapshot: The repository snapshot

    Returns:
        Versioning score between 0-100
    """
    releases = snapshot.releases
    if not releases:
        return BASE_SCORE

    score = BASE_SCORE
    for minimum, bonus in RELEASE_TIERS:
        if len(releases) >= minimum:
            score += bonus
            break

    if has_semantic_version(releases):
        score += SEMVER_BONUS

    return clamp_score(score)
