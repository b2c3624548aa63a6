"""Rubric policy models: weights, level cut points and action thresholds."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from repo_evaluator.errors import PolicyError


class Dimension(str, Enum):
    """Quality dimensions in canonical order."""

    DOCUMENTATION = "documentation"
    STRUCTURE = "structure"
    COMMITS = "commits"
    LANGUAGES = "languages"
    COMMUNITY = "community"
    TESTING = "testing"
    VERSIONING = "versioning"


class ScoreWeights(BaseModel):
    """Configurable dimension weights for the overall score.

    All weights must sum to 1.0 for proper score calculation.
    """

    model_config = ConfigDict(frozen=True)

    documentation: float = Field(default=0.20, ge=0.0, le=1.0)
    structure: float = Field(default=0.15, ge=0.0, le=1.0)
    commits: float = Field(default=0.15, ge=0.0, le=1.0)
    languages: float = Field(default=0.10, ge=0.0, le=1.0)
    community: float = Field(default=0.15, ge=0.0, le=1.0)
    testing: float = Field(default=0.15, ge=0.0, le=1.0)
    versioning: float = Field(default=0.10, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "ScoreWeights":
        """Validate that weights sum to 1.0."""
        total = sum(self.weight_for(dimension) for dimension in Dimension)
        if abs(total - 1.0) > 0.001:
            msg = f"Weights must sum to 1.0, got {total}"
            raise ValueError(msg)
        return self

    def weight_for(self, dimension: Dimension) -> float:
        """Return the weight of a single dimension."""
        return getattr(self, dimension.value)


class LevelThresholds(BaseModel):
    """Cut points for classifying the overall score into a level."""

    model_config = ConfigDict(frozen=True)

    advanced: int = Field(default=75, ge=0, le=100, description="Minimum overall for Advanced")
    intermediate: int = Field(
        default=50, ge=0, le=100, description="Minimum overall for Intermediate"
    )

    @model_validator(mode="after")
    def ordered(self) -> "LevelThresholds":
        """Validate that the Intermediate cut point does not exceed Advanced."""
        if self.intermediate > self.advanced:
            msg = (
                f"Intermediate threshold ({self.intermediate}) must not exceed "
                f"advanced threshold ({self.advanced})"
            )
            raise ValueError(msg)
        return self


class NarrativeThresholds(BaseModel):
    """High- and low-water marks for summary strengths and gaps."""

    model_config = ConfigDict(frozen=True)

    strength: int = Field(default=70, ge=0, le=100, description="Score at or above is a strength")
    gap: int = Field(default=50, ge=0, le=100, description="Score below is a gap")

    @model_validator(mode="after")
    def ordered(self) -> "NarrativeThresholds":
        """A dimension must never be both a strength and a gap."""
        if self.gap > self.strength:
            msg = f"Gap mark ({self.gap}) must not exceed strength mark ({self.strength})"
            raise ValueError(msg)
        return self


class ActionThresholds(BaseModel):
    """Per-dimension roadmap thresholds: a score below triggers an item."""

    model_config = ConfigDict(frozen=True)

    documentation: int = Field(default=70, ge=0, le=100)
    structure: int = Field(default=70, ge=0, le=100)
    commits: int = Field(default=70, ge=0, le=100)
    community: int = Field(default=70, ge=0, le=100)
    testing: int = Field(default=70, ge=0, le=100)
    versioning: int = Field(default=70, ge=0, le=100)

    def threshold_for(self, dimension: Dimension) -> int | None:
        """Return the action threshold, or None for dimensions without roadmap items."""
        return getattr(self, dimension.value, None)


class RubricPolicy(BaseModel):
    """Versioned rubric configuration.

    Bundles every tunable number of the rubric so it can be revised (or loaded
    from a JSON file) without touching scorer code. The version string is
    echoed in every evaluation result.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(default="2024.1", description="Rubric revision identifier")
    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    levels: LevelThresholds = Field(default_factory=LevelThresholds)
    narrative: NarrativeThresholds = Field(default_factory=NarrativeThresholds)
    actions: ActionThresholds = Field(default_factory=ActionThresholds)


DEFAULT_POLICY = RubricPolicy()


def load_policy(path: Path | str) -> RubricPolicy:
    """Load and validate a rubric policy from a JSON file.

    Omitted sections fall back to the canonical defaults.

    Args:
        path: Path to a JSON document shaped like ``RubricPolicy``

    Returns:
        The validated policy

    Raises:
        PolicyError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PolicyError(f"Cannot read policy file {path}: {e}") from e

    try:
        return RubricPolicy.model_validate_json(raw)
    except ValidationError as e:
        raise PolicyError(f"Invalid policy file {path}: {e}") from e
