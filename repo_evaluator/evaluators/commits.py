"""Commit history scorer for volume, message quality and recency."""

from datetime import timedelta

from repo_evaluator.consts import PLACEHOLDER_COMMIT_PREFIXES
from repo_evaluator.evaluators.base import clamp_score
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# Score when the commit list is empty
NO_COMMITS_SCORE = 20

# (minimum commit count, bonus), highest tier first
COUNT_TIERS: list[tuple[int, int]] = [
    (100, 20),
    (50, 16),
    (20, 12),
    (10, 8),
]
MIN_COUNT_BONUS = 4

# Scaled by the fraction of meaningful messages
MESSAGE_QUALITY_MAX_BONUS = 60
MIN_MEANINGFUL_LENGTH = 10  # characters, exclusive

# Flat bonus for any commit inside the recency window
RECENT_ACTIVITY_BONUS = 20
RECENT_ACTIVITY_WINDOW = timedelta(days=90)


def score_commits(snapshot: RepositorySnapshot) -> int:
    """Score commit volume, message quality and recent activity.

    Algorithm:
        if no commits: score = 20
        else:
            score = count_tier_bonus                       (4..20)
                  + 60 * meaningful_commits / total_commits
                  + 20 if any commit within 90 days of the snapshot

    Recency is measured against ``snapshot.captured_at``, never the wall clock.

    Args:
        snapshot: The repository snapshot

    Returns:
        Commit score between 0-100
    """
    commits = snapshot.commits
    if not commits:
        return NO_COMMITS_SCORE

    # Volume
    score = float(_count_bonus(len(commits)))

    # Message quality
    meaningful = sum(1 for commit in commits if is_meaningful_message(commit.message))
    score += meaningful / len(commits) * MESSAGE_QUALITY_MAX_BONUS

    # Recent activity
    cutoff = snapshot.captured_at - RECENT_ACTIVITY_WINDOW
    if any(commit.authored_at > cutoff for commit in commits):
        score += RECENT_ACTIVITY_BONUS

    return clamp_score(score)


def is_meaningful_message(message: str) -> bool:
    """Check whether a commit message describes a change.

    A message is meaningful when it is longer than 10 characters after
    stripping whitespace and does not start with a placeholder ("wip", "temp").
    """
    text = message.strip()
    if len(text) <= MIN_MEANINGFUL_LENGTH:
        return False
    return not text.lower().startswith(PLACEHOLDER_COMMIT_PREFIXES)


def _count_bonus(count: int) -> int:
    """Get the bonus for the highest count tier reached."""
    for minimum, bonus in COUNT_TIERS:
        if count >= minimum:
            return bonus
    return MIN_COUNT_BONUS
