"""Structure scorer for project layout conventions."""

from repo_evaluator.consts import (
    DOCS_DIRECTORIES,
    IGNORE_FILES,
    MANIFEST_FILES,
    SOURCE_DIRECTORIES,
    TEST_DIRECTORIES,
)
from repo_evaluator.evaluators.base import clamp_score, lowercase_names
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# Baseline (also used when the root listing is unknown)
BASE_SCORE = 50

# (convention entries, bonus) in evaluation order
CONVENTION_BONUSES: list[tuple[frozenset[str], int]] = [
    (SOURCE_DIRECTORIES, 10),
    (TEST_DIRECTORIES, 10),
    (DOCS_DIRECTORIES, 5),
    (IGNORE_FILES, 5),
    (MANIFEST_FILES, 10),
]


def score_structure(snapshot: RepositorySnapshot) -> int:
    """Score the root listing against canonical layout conventions.

    Each convention (source dir, test dir, docs dir, ignore file, manifest)
    adds its bonus once, no matter how many matching entries exist.

    Args:
        snapshot: The repository snapshot

    Returns:
        Structure score between 0-100
    """
    names = set(lowercase_names(snapshot.contents))
    if not names:
        return BASE_SCORE

    score = BASE_SCORE
    for entries, bonus in CONVENTION_BONUSES:
        if names & entries:
            score += bonus

    return clamp_score(score)
