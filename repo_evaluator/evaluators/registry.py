"""Evaluator registry orchestrating the dimension scorers and text generators."""

import logging
from types import MappingProxyType

from repo_evaluator.errors import MissingMetadataError
from repo_evaluator.evaluators.base import DimensionScorer
from repo_evaluator.evaluators.commits import score_commits
from repo_evaluator.evaluators.community import score_community
from repo_evaluator.evaluators.composite import calculate_overall_score, classify_level
from repo_evaluator.evaluators.documentation import score_documentation
from repo_evaluator.evaluators.languages import score_languages
from repo_evaluator.evaluators.structure import score_structure
from repo_evaluator.evaluators.testing import score_testing
from repo_evaluator.evaluators.versioning import score_versioning
from repo_evaluator.models.model_eval import DEFAULT_POLICY, Dimension, RubricPolicy
from repo_evaluator.models.model_result import DimensionScores, EvaluationResult, ResultMetadata
from repo_evaluator.models.model_snapshot import RepositorySnapshot
from repo_evaluator.reporting.roadmap import generate_roadmap
from repo_evaluator.reporting.summary import generate_summary

logger = logging.getLogger(__name__)

# The rubric is closed: exactly one scorer per dimension.
DIMENSION_SCORERS: MappingProxyType[Dimension, DimensionScorer] = MappingProxyType(
    {
        Dimension.DOCUMENTATION: score_documentation,
        Dimension.STRUCTURE: score_structure,
        Dimension.COMMITS: score_commits,
        Dimension.LANGUAGES: score_languages,
        Dimension.COMMUNITY: score_community,
        Dimension.TESTING: score_testing,
        Dimension.VERSIONING: score_versioning,
    }
)


def score_dimensions(snapshot: RepositorySnapshot) -> DimensionScores:
    """Run every dimension scorer against the snapshot.

    Args:
        snapshot: The repository snapshot

    Returns:
        Scores for all seven dimensions
    """
    return DimensionScores(
        **{dimension.value: scorer(snapshot) for dimension, scorer in DIMENSION_SCORERS.items()}
    )


class RepositoryEvaluator:
    """Turns a snapshot into a complete evaluation.

    This evaluator is the whole engine. It handles:
    - Running all dimension scorers
    - Calculating the composite score and level
    - Generating the narrative summary
    - Generating the improvement roadmap

    It holds no state besides the rubric policy, so one instance can score
    any number of snapshots.
    """

    def __init__(self, policy: RubricPolicy | None = None) -> None:
        """Initialize evaluator.

        Args:
            policy: Rubric policy to apply. Defaults to the canonical policy.
        """
        self.policy = policy or DEFAULT_POLICY

    def evaluate(self, snapshot: RepositorySnapshot) -> EvaluationResult:
        """Evaluate one snapshot.

        Args:
            snapshot: The repository snapshot; metadata is mandatory

        Returns:
            Complete evaluation result

        Raises:
            MissingMetadataError: If the snapshot carries no metadata
        """
        metadata = snapshot.metadata
        if metadata is None:
            raise MissingMetadataError("Snapshot has no repository metadata; refusing to evaluate")

        # 1. Score each dimension
        scores = score_dimensions(snapshot)
        logger.debug(
            f"Dimension scores for {metadata.name}: "
            + ", ".join(f"{dimension.value}={score}" for dimension, score in scores.items())
        )

        # 2. Composite score and level
        overall = calculate_overall_score(scores, self.policy.weights)
        level = classify_level(overall, self.policy.levels)

        # 3. Narrative and roadmap
        summary = generate_summary(scores, level, snapshot, self.policy.narrative)
        roadmap = generate_roadmap(scores, self.policy.actions)

        logger.info(
            f"Evaluated {metadata.name}: overall={overall} level={level.value} "
            f"roadmap_items={len(roadmap)} (policy {self.policy.version})"
        )

        return EvaluationResult(
            overall=overall,
            level=level,
            scores=scores,
            summary=summary,
            roadmap=roadmap,
            metadata=ResultMetadata.from_metadata(metadata),
            policy_version=self.policy.version,
        )


def main() -> None:
    """Demonstrate the full evaluation on a sample snapshot."""
    from datetime import UTC, datetime, timedelta

    from repo_evaluator.models.model_snapshot import (
        CommitRecord,
        ReadmeDocument,
        ReleaseRecord,
        RepositoryMetadata,
    )

    print("Repository Evaluator Demo")
    print("=" * 50)

    captured_at = datetime.now(UTC)
    snapshot = RepositorySnapshot(
        metadata=RepositoryMetadata(
            name="demo-project",
            url="https://github.com/example/demo-project",
            stars=42,
            forks=3,
            watchers=42,
            open_issues=4,
            description="A small demo project used to show the scoring rubric",
            has_license=True,
            language="Python",
        ),
        contents=["src", "tests", "README.md", "pyproject.toml", ".gitignore"],
        commits=[
            CommitRecord(
                message=f"Add feature number {i}",
                authored_at=captured_at - timedelta(days=i),
            )
            for i in range(25)
        ],
        languages={"Python": 48_000, "Shell": 2_000},
        readme=ReadmeDocument(content="# Demo\n\n## Install\n\n## Usage\n", size=320),
        releases=[ReleaseRecord(tag_name="v0.1.0")],
        captured_at=captured_at,
    )

    result = RepositoryEvaluator().evaluate(snapshot)

    print(f"\nOverall: {result.overall}/100 ({result.level.value})")
    for dimension, score in result.scores.items():
        print(f"  {dimension.value:<14} {score:>3}")
    print(f"\nSummary: {result.summary}")
    print("\nRoadmap:")
    for item in result.roadmap:
        print(f"  [{item.priority.value}] {item.title}")


if __name__ == "__main__":
    main()
