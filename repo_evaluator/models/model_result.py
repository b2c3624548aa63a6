"""Evaluation output models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from repo_evaluator.models.model_eval import Dimension
from repo_evaluator.models.model_snapshot import RepositoryMetadata


class Level(str, Enum):
    """Coarse skill level derived from the overall score."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Priority(str, Enum):
    """Roadmap item priority."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class DimensionScores(BaseModel):
    """Per-dimension scores, each an integer in [0, 100]."""

    model_config = ConfigDict(frozen=True)

    documentation: int = Field(ge=0, le=100)
    structure: int = Field(ge=0, le=100)
    commits: int = Field(ge=0, le=100)
    languages: int = Field(ge=0, le=100)
    community: int = Field(ge=0, le=100)
    testing: int = Field(ge=0, le=100)
    versioning: int = Field(ge=0, le=100)

    def score_for(self, dimension: Dimension) -> int:
        """Return the score of a single dimension."""
        return getattr(self, dimension.value)

    def items(self) -> list[tuple[Dimension, int]]:
        """Return (dimension, score) pairs in canonical order."""
        return [(dimension, self.score_for(dimension)) for dimension in Dimension]


class RoadmapItem(BaseModel):
    """One prioritized improvement recommendation."""

    model_config = ConfigDict(frozen=True)

    priority: Priority
    title: str
    description: str
    impact: str


class ResultMetadata(BaseModel):
    """Projection of the snapshot metadata echoed back to callers."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    stars: int = Field(ge=0)
    forks: int = Field(ge=0)
    language: str | None = None

    @classmethod
    def from_metadata(cls, metadata: RepositoryMetadata) -> "ResultMetadata":
        return cls(
            name=metadata.name,
            url=metadata.url,
            stars=metadata.stars,
            forks=metadata.forks,
            language=metadata.language,
        )


class EvaluationResult(BaseModel):
    """Complete evaluation of one snapshot."""

    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100, description="Weighted composite score")
    level: Level
    scores: DimensionScores
    summary: str
    roadmap: list[RoadmapItem] = Field(min_length=1)
    metadata: ResultMetadata
    policy_version: str = Field(description="Rubric revision used for scoring")

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the JSON transport record.

        The overall score is reported both as ``score`` and inside ``scores``.
        """
        scores = self.scores.model_dump()
        scores["overall"] = self.overall
        return {
            "score": self.overall,
            "level": self.level.value,
            "scores": scores,
            "summary": self.summary,
            "roadmap": [item.model_dump(mode="json") for item in self.roadmap],
            "metadata": self.metadata.model_dump(mode="json"),
        }
