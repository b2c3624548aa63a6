"""Documentation scorer for README quality and completeness."""

from repo_evaluator.consts import (
    README_CONTRIBUTING_KEYWORDS,
    README_INSTALL_KEYWORDS,
    README_LICENSE_KEYWORDS,
    README_USAGE_KEYWORDS,
)
from repo_evaluator.evaluators.base import clamp_score
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# Baseline applied to every repository (also the score with no README)
BASE_SCORE = 35

# README size bonus: scales linearly up to the cap at the reference size
README_SIZE_BONUS_MAX = 30
README_REFERENCE_SIZE = 500  # bytes

# Keyword category bonuses
INSTALL_BONUS = 10
USAGE_BONUS = 10
LICENSE_SECTION_BONUS = 5
CONTRIBUTING_BONUS = 5

# Metadata bonuses
DESCRIPTION_BONUS = 5
LICENSE_FILE_BONUS = 10


def score_documentation(snapshot: RepositorySnapshot) -> int:
    """Score README presence, size and coverage of the usual sections.

    Rules:
        score = 35
              + min(30, readme_size / 500 * 30)
              + 10 if install/setup mentioned
              + 10 if usage/example mentioned
              + 5 if license mentioned
              + 5 if contributing mentioned
              + 5 if the repository has a description
              + 10 if a license was detected

    Args:
        snapshot: The repository snapshot

    Returns:
        Documentation score between 0-100
    """
    score = float(BASE_SCORE)

    readme = snapshot.readme
    if readme is not None:
        content = readme.content.lower()

        # Size bonus (capped)
        score += min(
            README_SIZE_BONUS_MAX,
            readme.size / README_REFERENCE_SIZE * README_SIZE_BONUS_MAX,
        )

        # One fixed bonus per keyword category found
        if _mentions(content, README_INSTALL_KEYWORDS):
            score += INSTALL_BONUS
        if _mentions(content, README_USAGE_KEYWORDS):
            score += USAGE_BONUS
        if _mentions(content, README_LICENSE_KEYWORDS):
            score += LICENSE_SECTION_BONUS
        if _mentions(content, README_CONTRIBUTING_KEYWORDS):
            score += CONTRIBUTING_BONUS

    metadata = snapshot.metadata
    if metadata is not None:
        if metadata.description.strip():
            score += DESCRIPTION_BONUS
        if metadata.has_license:
            score += LICENSE_FILE_BONUS

    return clamp_score(score)


def _mentions(content: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in content for keyword in keywords)
