"""Community scorer for engagement signals from repository metadata."""

from repo_evaluator.evaluators.base import clamp_score
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# Baseline applied to every repository
BASE_SCORE = 35

# (minimum count, bonus), highest tier first; a count of 0 earns nothing
STAR_TIERS: list[tuple[int, int]] = [(100, 25), (10, 15), (1, 5)]
FORK_TIERS: list[tuple[int, int]] = [(10, 15), (1, 5)]
WATCHER_TIERS: list[tuple[int, int]] = [(10, 10)]

# Bonus while the open-issue backlog stays below the ceiling
OPEN_ISSUES_CEILING = 20
OPEN_ISSUES_BONUS = 5

# Bonus for a description longer than the minimum
MIN_DESCRIPTION_LENGTH = 20
DESCRIPTION_BONUS = 10


def score_community(snapshot: RepositorySnapshot) -> int:
    """Score community engagement.

    Tiered bonuses on top of a 35 baseline:
    - Stars: >=100 +25, >=10 +15, >0 +5
    - Forks: >=10 +15, >0 +5
    - Watchers: >=10 +10
    - Open issues below 20: +5
    - Description longer than 20 characters: +10

    Args:
        snapshot: The repository snapshot

    Returns:
        Community score between 0-100 (baseline when metadata is absent)
    """
    metadata = snapshot.metadata
    if metadata is None:
        return BASE_SCORE

    score = BASE_SCORE
    score += _tier_bonus(metadata.stars, STAR_TIERS)
    score += _tier_bonus(metadata.forks, FORK_TIERS)
    score += _tier_bonus(metadata.watchers, WATCHER_TIERS)

    if metadata.open_issues < OPEN_ISSUES_CEILING:
        score += OPEN_ISSUES_BONUS

    if len(metadata.description.strip()) > MIN_DESCRIPTION_LENGTH:
        score += DESCRIPTION_BONUS

    return clamp_score(score)


def _tier_bonus(count: int, tiers: list[tuple[int, int]]) -> int:
    """Get the bonus for the highest tier the count reaches."""
    for minimum, bonus in tiers:
        if count >= minimum:
            return bonus
    return 0
