"""Base scorer protocol defining the contract for all dimension scorers."""

import math
from collections.abc import Sequence
from typing import Protocol

from repo_evaluator.models.model_snapshot import RepositorySnapshot

MIN_SCORE = 0
MAX_SCORE = 100


class DimensionScorer(Protocol):
    """Protocol defining the scorer contract.

    Every dimension is scored by a plain function that takes the snapshot and
    returns an integer between 0-100. Scorers:
    - Never fail on missing data (each has a documented baseline)
    - Never perform I/O or read the clock (time comes from the snapshot)
    - Always return the same score for the same snapshot
    """

    def __call__(self, snapshot: RepositorySnapshot) -> int:
        """Score the snapshot on this dimension.

        Args:
            snapshot: The repository snapshot to score

        Returns:
            Score between 0-100 for this dimension
        """
        ...


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round a raw score and clamp it to [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(value)))


def lowercase_names(contents: Sequence[str] | None) -> list[str]:
    """Lowercased root entry names, empty for an unknown listing."""
    if not contents:
        return []
    return [name.lower() for name in contents]
