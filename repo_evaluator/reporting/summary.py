"""Narrative summary generation from dimension scores."""

from repo_evaluator.models.model_eval import Dimension, NarrativeThresholds
from repo_evaluator.models.model_result import DimensionScores, Level
from repo_evaluator.models.model_snapshot import RepositorySnapshot

# (dimension, strength phrase, gap phrase) in narrative priority order.
# None means the dimension is never mentioned on that side.
NARRATIVE_PHRASES: list[tuple[Dimension, str | None, str | None]] = [
    (
        Dimension.DOCUMENTATION,
        "comprehensive documentation",
        "improve README with setup and usage instructions",
    ),
    (Dimension.TESTING, "solid test coverage", "add unit and integration tests"),
    (
        Dimension.COMMITS,
        "consistent commit history",
        "establish more consistent commit practices",
    ),
    (Dimension.STRUCTURE, "well-organized project structure", "better organize project structure"),
    (Dimension.VERSIONING, "disciplined release versioning", "create releases and version tags"),
    (Dimension.COMMUNITY, "good community engagement", None),
    (Dimension.LANGUAGES, None, None),
]

# Gaps beyond this count are left to the roadmap
MAX_GAPS_MENTIONED = 2

WELL_MAINTAINED_SENTENCE = "This is a well-maintained project with good practices applied."


def collect_strengths_and_gaps(
    scores: DimensionScores, thresholds: NarrativeThresholds
) -> tuple[list[str], list[str]]:
    """Select strength and gap phrases in narrative priority order.

    Args:
        scores: Dimension scores
        thresholds: Strength (>=) and gap (<) marks

    Returns:
        Tuple of (strength phrases, gap phrases)
    """
    strengths: list[str] = []
    gaps: list[str] = []

    for dimension, strength_phrase, gap_phrase in NARRATIVE_PHRASES:
        score = scores.score_for(dimension)
        if strength_phrase and score >= thresholds.strength:
            strengths.append(strength_phrase)
        elif gap_phrase and score < thresholds.gap:
            gaps.append(gap_phrase)

    return strengths, gaps


def generate_summary(
    scores: DimensionScores,
    level: Level,
    snapshot: RepositorySnapshot,
    thresholds: NarrativeThresholds,
) -> str:
    """Build the prose summary.

    Sentences, in order:
    1. Opening naming the primary language and level
    2. Strengths (all matched), if any
    3. Gaps (first two matched), or a "well-maintained" sentence if none
    4. Closing citing star and commit counts

    Args:
        scores: Dimension scores
        level: Classified level
        snapshot: Snapshot the scores were computed from (metadata required)
        thresholds: Narrative high/low-water marks

    Returns:
        Summary text
    """
    metadata = snapshot.metadata
    language = metadata.language if metadata and metadata.language else None
    stars = metadata.stars if metadata else 0

    strengths, gaps = collect_strengths_and_gaps(scores, thresholds)

    level_word = level.value.lower()
    sentences = [
        f"This {language or 'general'} repository demonstrates "
        f"{_article(level_word)} {level_word}-level project."
    ]

    if strengths:
        sentences.append(f"Strengths include: {', '.join(strengths)}.")

    if gaps:
        sentences.append(f"To improve, focus on: {' and '.join(gaps[:MAX_GAPS_MENTIONED])}.")
    else:
        sentences.append(WELL_MAINTAINED_SENTENCE)

    commit_count = len(snapshot.commits)
    sentences.append(
        f"The repository has {_plural(stars, 'star')} and "
        f"{_plural(commit_count, 'commit')} in the analyzed history."
    )

    return " ".join(sentences)


def _article(word: str) -> str:
    return "an" if word[:1] in "aeiou" else "a"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
