"""Text generation: narrative summary and improvement roadmap."""

from repo_evaluator.reporting.roadmap import (
    MAINTAIN_EXCELLENCE_ITEM,
    ROADMAP_CATALOG,
    generate_roadmap,
)
from repo_evaluator.reporting.summary import collect_strengths_and_gaps, generate_summary

__all__ = [
    "MAINTAIN_EXCELLENCE_ITEM",
    "ROADMAP_CATALOG",
    "collect_strengths_and_gaps",
    "generate_roadmap",
    "generate_summary",
]
