"""Exception hierarchy for repo-evaluator."""


class RepoEvaluatorError(Exception):
    """Base class for all repo-evaluator errors."""


class MissingMetadataError(RepoEvaluatorError):
    """Snapshot lacks the mandatory repository metadata."""


class PolicyError(RepoEvaluatorError):
    """A rubric policy could not be loaded or failed validation."""


class SnapshotError(RepoEvaluatorError):
    """A snapshot could not be assembled by its provider."""


class InvalidRepositoryUrlError(SnapshotError):
    """The given URL does not identify a GitHub repository."""


class RepositoryNotFoundError(SnapshotError):
    """The repository does not exist or is not visible with the given credentials."""


class AccessDeniedError(SnapshotError):
    """The hosting API refused access (private repository or rate limit)."""


class SnapshotFetchError(SnapshotError):
    """Any other failure while fetching mandatory repository data."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
