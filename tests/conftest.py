"""Pytest configuration and fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from repo_evaluator.models.model_snapshot import (
    CommitRecord,
    ReadmeDocument,
    ReleaseRecord,
    RepositoryMetadata,
    RepositorySnapshot,
)

CAPTURED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _readme_text(size: int) -> str:
    """README mentioning install, usage and license, padded to ``size`` characters."""
    head = "# Widget\n\n## Install\n\npip install widget\n\n## Usage\n\nRun it.\n\n## License\n\nMIT\n"
    return head + "x" * (size - len(head))


@pytest.fixture
def captured_at() -> datetime:
    return CAPTURED_AT


@pytest.fixture
def empty_snapshot() -> RepositorySnapshot:
    """Bare repository: metadata only, every optional read empty."""
    return RepositorySnapshot(
        metadata=RepositoryMetadata(
            name="empty",
            url="https://github.com/example/empty",
        ),
        captured_at=CAPTURED_AT,
    )


@pytest.fixture
def mature_snapshot() -> RepositorySnapshot:
    """Well-kept repository that clears every action threshold."""
    content = _readme_text(2000)
    commits = [
        CommitRecord(
            message=f"Add widget feature number {i}",
            authored_at=CAPTURED_AT - timedelta(days=7 + i * 5),
        )
        for i in range(60)
    ]
    return RepositorySnapshot(
        metadata=RepositoryMetadata(
            name="widget",
            url="https://github.com/example/widget",
            stars=120,
            forks=15,
            watchers=120,
            open_issues=3,
            description="A widget toolkit for building dashboards",
            has_license=True,
            language="TypeScript",
            size=2048,
        ),
        contents=["src", "tests", "docs", ".gitignore", "package.json", "README.md"],
        commits=commits,
        languages={"TypeScript": 80_000, "CSS": 20_000},
        readme=ReadmeDocument(content=content, size=len(content)),
        releases=[ReleaseRecord(tag_name=f"v1.{i}.0") for i in range(5)],
        captured_at=CAPTURED_AT,
    )


@pytest.fixture
def unreleased_snapshot(mature_snapshot: RepositorySnapshot) -> RepositorySnapshot:
    """The mature repository without any releases."""
    return mature_snapshot.model_copy(update={"releases": []})


@pytest.fixture
def snapshot_factory(mature_snapshot: RepositorySnapshot):
    """Build variants of the mature snapshot; ``metadata`` kwargs patch metadata fields."""

    def factory(metadata: dict | None = None, **updates) -> RepositorySnapshot:
        if metadata is not None:
            updates["metadata"] = mature_snapshot.metadata.model_copy(update=metadata)
        return mature_snapshot.model_copy(update=updates)

    return factory
