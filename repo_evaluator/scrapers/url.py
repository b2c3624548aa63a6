"""GitHub repository URL parsing."""

import re
from dataclasses import dataclass

from repo_evaluator.errors import InvalidRepositoryUrlError

# Matches https://github.com/owner/repo, git@github.com:owner/repo.git, github.com/owner/repo/tree/main
_GITHUB_URL_PATTERN = re.compile(r"github\.com[:/]([^/\s]+)/([^/\s#?]+)", re.IGNORECASE)


@dataclass(frozen=True)
class RepositoryRef:
    """Owner/name pair identifying a GitHub repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


def parse_repository_url(url: str) -> RepositoryRef:
    """Parse a GitHub repository URL into an owner/name pair.

    Args:
        url: Repository URL (https, ssh, or with extra path segments)

    Returns:
        The repository reference

    Raises:
        InvalidRepositoryUrlError: If the URL does not point at a GitHub repository
    """
    match = _GITHUB_URL_PATTERN.search(url.strip())
    if not match:
        raise InvalidRepositoryUrlError(
            f"Invalid GitHub URL '{url}'. Expected e.g. https://github.com/owner/repo"
        )

    owner, name = match.group(1), match.group(2)
    if name.lower().endswith(".git"):
        name = name[: -len(".git")]
    if not owner or not name:
        raise InvalidRepositoryUrlError(f"Invalid GitHub URL '{url}'")

    return RepositoryRef(owner=owner, name=name)
