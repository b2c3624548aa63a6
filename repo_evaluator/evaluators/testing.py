"""Testing scorer based on test and CI indicators at the repository root."""

from repo_evaluator.consts import CI_INDICATORS, TEST_INDICATORS
from repo_evaluator.evaluators.base import clamp_score, lowercase_names
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# Baseline (also used when the root listing is unknown)
BASE_SCORE = 30

TEST_INDICATOR_BONUS = 60
CI_INDICATOR_BONUS = 10


def score_testing(snapshot: RepositorySnapshot) -> int:
    """Score evidence of automated testing.

    A root entry containing any testing keyword ("test", "spec", "pytest",
    "jest", ...) earns the large bonus; a CI configuration entry
    (".github", ".travis.yml", ...) earns a small one.

    Args:
        snapshot: The repository snapshot

    Returns:
        Testing score between 0-100
    """
    names = lowercase_names(snapshot.contents)
    if not names:
        return BASE_SCORE

    score = BASE_SCORE
    if any(indicator in name for name in names for indicator in TEST_INDICATORS):
        score += TEST_INDICATOR_BONUS
    if any(name in CI_INDICATORS for name in names):
        score += CI_INDICATOR_BONUS

    return clamp_score(score)
