"""Language mix scorer based on the byte distribution."""

from repo_evaluator.consts import WELL_KNOWN_LANGUAGES
from repo_evaluator.evaluators.base import clamp_score
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# Score when no language data is available
NO_DATA_SCORE = 30

BASE_SCORE = 20

# A language is dominant when its share of total bytes reaches this fraction
DOMINANT_SHARE = 0.10

# Diversity bonuses (cumulative)
TWO_DOMINANT_BONUS = 30
THREE_DOMINANT_BONUS = 10

# Any dominant language on the allow-list
WELL_KNOWN_BONUS = 40


def dominant_languages(languages: dict[str, int]) -> list[str]:
    """Return languages whose byte share reaches the dominance threshold.

    Args:
        languages: Language name -> byte count

    Returns:
        Dominant language names, largest first (ties broken by name)
    """
    total = sum(languages.values())
    if total <= 0:
        return []

    ranked = sorted(languages.items(), key=lambda item: (-item[1], item[0]))
    return [name for name, count in ranked if count / total >= DOMINANT_SHARE]


def score_languages(snapshot: RepositorySnapshot) -> int:
    """Score the language mix.

    Rules:
        no data (or zero bytes): 30
        otherwise: 20
                 + 30 if >= 2 dominant languages
                 + 10 if >= 3 dominant languages
                 + 40 if any dominant language is well known

    Args:
        snapshot: The repository snapshot

    Returns:
        Language score between 0-100
    """
    dominant = dominant_languages(snapshot.languages)
    if not dominant:
        return NO_DATA_SCORE

    score = BASE_SCORE
    if len(dominant) >= 2:
        score += TWO_DOMINANT_BONUS
    if len(dominant) >= 3:
        score += THREE_DOMINANT_BONUS

    if any(name.lower() in WELL_KNOWN_LANGUAGES for name in dominant):
        score += WELL_KNOWN_BONUS

    return clamp_score(score)
