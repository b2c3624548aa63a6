"""Pydantic models for repo-evaluator."""

from repo_evaluator.models.model_eval import (
    DEFAULT_POLICY,
    ActionThresholds,
    Dimension,
    LevelThresholds,
    NarrativeThresholds,
    RubricPolicy,
    ScoreWeights,
    load_policy,
)
from repo_evaluator.models.model_result import (
    DimensionScores,
    EvaluationResult,
    Level,
    Priority,
    ResultMetadata,
    RoadmapItem,
)
from repo_evaluator.models.model_snapshot import (
    CommitRecord,
    ReadmeDocument,
    ReleaseRecord,
    RepositoryMetadata,
    RepositorySnapshot,
)

__all__ = [
    # Snapshot models
    "CommitRecord",
    "ReadmeDocument",
    "ReleaseRecord",
    "RepositoryMetadata",
    "RepositorySnapshot",
    # Policy models
    "ActionThresholds",
    "DEFAULT_POLICY",
    "Dimension",
    "LevelThresholds",
    "NarrativeThresholds",
    "RubricPolicy",
    "ScoreWeights",
    "load_policy",
    # Result models
    "DimensionScores",
    "EvaluationResult",
    "Level",
    "Priority",
    "ResultMetadata",
    "RoadmapItem",
]
