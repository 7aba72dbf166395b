"""Configuration models for the changelog generator."""

from dataclasses import dataclass, field
from pathlib import Path

from github_changelog.utils.github import derive_web_host


@dataclass(frozen=True)
class ChangelogConfig:
    """Reconciled configuration for a changelog run."""

    token: str = field(repr=False)
    owner: str
    repo_name: str
    github_api_url: str
    changelog_path: Path
    debug: bool = False

    @property
    def web_host(self) -> str:
        """Host serving the repository's web pages, used in comparison links."""
        return derive_web_host(self.github_api_url)
