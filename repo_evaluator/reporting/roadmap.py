"""Improvement roadmap generation from dimension scores."""

from repo_evaluator.models.model_eval import ActionThresholds, Dimension
from repo_evaluator.models.model_result import DimensionScores, Priority, RoadmapItem

# Static catalog in evaluation order. Consumers render items in emission
# order, so this order is part of the output contract.
ROADMAP_CATALOG: list[tuple[Dimension, RoadmapItem]] = [
    (
        Dimension.DOCUMENTATION,
        RoadmapItem(
            priority=Priority.HIGH,
            title="Improve Documentation",
            description=(
                "Create or enhance README with clear setup instructions, usage examples, "
                "and contribution guidelines"
            ),
            impact="Helps users understand and use your project",
        ),
    ),
    (
        Dimension.TESTING,
        RoadmapItem(
            priority=Priority.HIGH,
            title="Add Test Coverage",
            description=(
                "Write unit and integration tests. Aim for at least 60-70% code coverage "
                "using Jest, Pytest, or similar tools"
            ),
            impact="Ensures code quality and prevents regressions",
        ),
    ),
    (
        Dimension.COMMITS,
        RoadmapItem(
            priority=Priority.MEDIUM,
            title="Improve Commit Practices",
            description=(
                "Write meaningful commit messages that describe what changed and why. "
                "Use conventional commits format (feat:, fix:, etc.)"
            ),
            impact="Makes project history cleaner and more useful",
        ),
    ),
    (
        Dimension.STRUCTURE,
        RoadmapItem(
            priority=Priority.MEDIUM,
            title="Organize Project Structure",
            description=(
                "Create clear directories like /src, /tests, /docs. Separate concerns "
                "and follow language-specific conventions"
            ),
            impact="Improves code maintainability and readability",
        ),
    ),
    (
        Dimension.VERSIONING,
        RoadmapItem(
            priority=Priority.MEDIUM,
            title="Implement Versioning",
            description=(
                "Create releases on GitHub and use semantic versioning (v1.0.0). "
                "Add changelog documenting major changes"
            ),
            impact="Helps users track changes and understand breaking changes",
        ),
    ),
    (
        Dimension.COMMUNITY,
        RoadmapItem(
            priority=Priority.LOW,
            title="Increase Community Engagement",
            description=(
                "Add badges, improve project description, enable issues/discussions, "
                "and create contribution guidelines"
            ),
            impact="Attracts users and contributors to your project",
        ),
    ),
]

MAINTAIN_EXCELLENCE_ITEM = RoadmapItem(
    priority=Priority.LOW,
    title="Maintain Excellence",
    description=(
        "Continue following best practices and keep the project updated and "
        "responsive to community feedback"
    ),
    impact="Ensures long-term project success and user satisfaction",
)


def generate_roadmap(scores: DimensionScores, thresholds: ActionThresholds) -> list[RoadmapItem]:
    """Build the ordered improvement roadmap.

    One catalog item per dimension scoring below its action threshold, in
    catalog order (not re-sorted by priority). When nothing triggers, the
    roadmap is the single "Maintain Excellence" item, so it is never empty.

    Args:
        scores: Dimension scores
        thresholds: Per-dimension action thresholds

    Returns:
        Non-empty list of roadmap items
    """
    roadmap: list[RoadmapItem] = []

    for dimension, item in ROADMAP_CATALOG:
        threshold = thresholds.threshold_for(dimension)
        if threshold is not None and scores.score_for(dimension) < threshold:
            roadmap.append(item)

    if not roadmap:
        roadmap.append(MAINTAIN_EXCELLENCE_ITEM)

    return roadmap
