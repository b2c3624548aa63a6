"""Composite scoring functions for combining dimension scores."""

from repo_evaluator.evaluators.base import clamp_score
from repo_evaluator.models.model_eval import Dimension, LevelThresholds, ScoreWeights
from repo_evaluator.models.model_result import DimensionScores, Level


def calculate_overall_score(scores: DimensionScores, weights: ScoreWeights) -> int:
    """Calculate weighted composite score.

    Args:
        scores: Individual dimension scores (0-100 each)
        weights: Dimension weights (must sum to 1.0)

    Returns:
        Weighted composite score between 0-100, rounded half up
    """
    total = sum(
        weights.weight_for(dimension) * scores.score_for(dimension) for dimension in Dimension
    )
    return clamp_score(total)


def classify_level(overall: int, thresholds: LevelThresholds) -> Level:
    """Classify the overall score into a level.

    Args:
        overall: Composite score (0-100)
        thresholds: Level cut points (inclusive lower bounds)

    Returns:
        Advanced, Intermediate or Beginner
    """
    if overall >= thresholds.advanced:
        return Level.ADVANCED
    if overall >= thresholds.intermediate:
        return Level.INTERMEDIATE
    return Level.BEGINNER


def main() -> None:
    """Demonstrate composite scoring and level classification."""
    print("Composite Scoring Demo")
    print("=" * 50)

    test_cases = [
        (
            "Well-rounded project",
            DimensionScores(
                documentation=100, structure=90, commits=96, languages=90,
                community=100, testing=90, versioning=80,
            ),
        ),
        (
            "No releases",
            DimensionScores(
                documentation=100, structure=90, commits=96, languages=90,
                community=100, testing=90, versioning=30,
            ),
        ),
        (
            "Empty repository (all baselines)",
            DimensionScores(
                documentation=35, structure=50, commits=20, languages=30,
                community=40, testing=30, versioning=30,
            ),
        ),
    ]

    weights = ScoreWeights()
    thresholds = LevelThresholds()

    print("\n## Default Weights")
    for dimension in Dimension:
        print(f"  {dimension.value:<14} {weights.weight_for(dimension):.2f}")

    print("\n## Test Cases")
    for description, scores in test_cases:
        overall = calculate_overall_score(scores, weights)
        level = classify_level(overall, thresholds)
        print(f"\n{description}:")
        print("  " + ", ".join(f"{dim.value[:4]}={score}" for dim, score in scores.items()))
        print(f"  Overall: {overall}/100 ({level.value})")


if __name__ == "__main__":
    main()
