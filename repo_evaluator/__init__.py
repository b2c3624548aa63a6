"""repo-evaluator: deterministic quality scoring for source repositories."""

from repo_evaluator.errors import MissingMetadataError, RepoEvaluatorError, SnapshotError
from repo_evaluator.evaluators.registry import RepositoryEvaluator
from repo_evaluator.models import (
    DEFAULT_POLICY,
    EvaluationResult,
    RepositorySnapshot,
    RubricPolicy,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_POLICY",
    "EvaluationResult",
    "MissingMetadataError",
    "RepoEvaluatorError",
    "RepositoryEvaluator",
    "RepositorySnapshot",
    "RubricPolicy",
    "SnapshotError",
    "__version__",
]
