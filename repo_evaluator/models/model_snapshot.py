"""Snapshot models: the immutable bundle of repository facts fed into the engine."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from repo_evaluator.models.common import _as_utc, _utc_now


class RepositoryMetadata(BaseModel):
    """Repository metadata from the single mandatory metadata fetch."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Repository name")
    url: str = Field(description="Canonical web URL of the repository")
    stars: int = Field(default=0, ge=0, description="Star count")
    forks: int = Field(default=0, ge=0, description="Fork count")
    watchers: int = Field(default=0, ge=0, description="Watcher count")
    open_issues: int = Field(default=0, ge=0, description="Open issue count")
    description: str = Field(default="", description="Free-text description")
    has_license: bool = Field(default=False, description="Whether a license was detected")
    language: str | None = Field(default=None, description="Primary language tag")
    size: int = Field(default=0, ge=0, description="Repository size as reported (KB)")

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: object) -> object:
        """Hosting APIs report a missing description as null."""
        return "" if value is None else value


class ReadmeDocument(BaseModel):
    """Decoded README text and its reported size."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(default="", description="Decoded README text")
    size: int = Field(default=0, ge=0, description="README size in bytes")


class CommitRecord(BaseModel):
    """A single commit from the commit log."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(default="", description="Full commit message")
    authored_at: datetime = Field(description="Author timestamp (naive values are UTC)")

    @field_validator("authored_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        return _as_utc(value)


class ReleaseRecord(BaseModel):
    """A published release."""

    model_config = ConfigDict(frozen=True)

    tag_name: str = Field(description="Git tag the release points at")


class RepositorySnapshot(BaseModel):
    """Immutable input bundle for one evaluation.

    Every collection may be empty independently. ``contents`` is None when the
    root listing could not be obtained ("unknown structure"), ``readme`` is None
    when no README exists. ``metadata`` is mandatory for evaluation; a snapshot
    without it is rejected by the engine rather than scored with defaults.

    ``captured_at`` anchors time-relative signals (recent commit activity), so
    scoring the same snapshot twice always gives the same result.
    """

    model_config = ConfigDict(frozen=True)

    metadata: RepositoryMetadata | None = Field(default=None)
    contents: tuple[str, ...] | None = Field(
        default=None, description="Top-level entry names at the repository root"
    )
    commits: tuple[CommitRecord, ...] = Field(default_factory=tuple)
    languages: dict[str, int] = Field(
        default_factory=dict, description="Language name -> byte count"
    )
    readme: ReadmeDocument | None = Field(default=None)
    releases: tuple[ReleaseRecord, ...] = Field(default_factory=tuple)
    captured_at: datetime = Field(default_factory=_utc_now, description="Snapshot timestamp")

    @field_validator("captured_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @field_validator("languages")
    @classmethod
    def _non_negative_bytes(cls, value: dict[str, int]) -> dict[str, int]:
        for language, count in value.items():
            if count < 0:
                msg = f"Byte count for {language!r} must be >= 0, got {count}"
                raise ValueError(msg)
        return value
