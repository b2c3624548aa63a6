"""Evaluators module for scoring repositories across multiple dimensions.

Repositories are evaluated on seven dimensions:
- Documentation (README size and sections, description, license)
- Structure (layout conventions at the root)
- Commits (volume, message quality, recency)
- Languages (dominant languages in the byte distribution)
- Community (stars, forks, watchers, issues, description)
- Testing (test and CI indicators)
- Versioning (releases and semantic version tags)

All scorers are stateless pure functions: RepositorySnapshot -> int.
"""

from repo_evaluator.evaluators.base import DimensionScorer, clamp_score, round_half_up
from repo_evaluator.evaluators.commits import is_meaningful_message, score_commits
from repo_evaluator.evaluators.community import score_community
from repo_evaluator.evaluators.composite import calculate_overall_score, classify_level
from repo_evaluator.evaluators.documentation import score_documentation
from repo_evaluator.evaluators.languages import dominant_languages, score_languages
from repo_evaluator.evaluators.registry import (
    DIMENSION_SCORERS,
    RepositoryEvaluator,
    score_dimensions,
)
from repo_evaluator.evaluators.structure import score_structure
from repo_evaluator.evaluators.testing import score_testing
from repo_evaluator.evaluators.versioning import has_semantic_version, score_versioning

__all__ = [
    # Protocol
    "DimensionScorer",
    # Individual scorers
    "score_documentation",
    "score_structure",
    "score_commits",
    "score_languages",
    "score_community",
    "score_testing",
    "score_versioning",
    # Orchestration
    "DIMENSION_SCORERS",
    "RepositoryEvaluator",
    "score_dimensions",
    # Composite scoring
    "calculate_overall_score",
    "classify_level",
    # Utilities
    "clamp_score",
    "dominant_languages",
    "has_semantic_version",
    "is_meaningful_message",
    "round_half_up",
]
