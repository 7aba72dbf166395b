"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from datetime import datetime

from github_changelog.changelog.models import Issue, PullRequest, Release


class ChangelogClientBase(ABC):
    """Base ABC for the GitHub operations a changelog run needs."""

    owner: str
    repo_name: str

    @abstractmethod
    async def list_releases(self) -> list[Release]:
        """List releases for a repository, newest first."""
        pass

    @abstractmethod
    async def list_closed_issues(self, since: datetime) -> list[Issue]:
        """List closed issues updated at or after ``since``."""
        pass

    @abstractmethod
    async def list_closed_pull_requests(self) -> list[PullRequest]:
        """List closed pull requests, merged or not."""
        pass
