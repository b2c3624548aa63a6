"""Base snapshot provider abstract class defining the provider contract."""

from abc import ABC, abstractmethod

from repo_evaluator.models.model_snapshot import RepositorySnapshot
from repo_evaluator.scrapers.url import RepositoryRef


class BaseSnapshotProvider(ABC):
    """Abstract base class for all snapshot providers.

    Providers assemble a complete ``RepositorySnapshot`` before the engine
    runs. Optional sub-resources degrade to empty values; only a failure to
    obtain repository metadata is raised to the caller.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the source identifier (e.g., 'github')."""
        ...

    @abstractmethod
    async def fetch_snapshot(self, ref: RepositoryRef) -> RepositorySnapshot:
        """Fetch every sub-resource of a repository and bundle them.

        Args:
            ref: The repository to fetch

        Returns:
            Snapshot with metadata always present

        Raises:
            SnapshotError: If the mandatory metadata cannot be fetched
        """
        ...

    async def aclose(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None

    async def __aenter__(self) -> "BaseSnapshotProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
