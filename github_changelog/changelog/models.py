"""Data models for changelog generation."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Release(BaseModel):
    """A published (or draft) release of a repository."""

    model_config = ConfigDict(frozen=True)

    tag_name: str
    html_url: str
    published_at: datetime | None = None


class Issue(BaseModel):
    """A closed issue of a repository.

    GitHub's issue listing also returns pull requests; those carry
    ``is_pull_request=True`` and never appear in a changelog's issue list.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    number: int
    html_url: str
    closed_at: datetime | None = None
    is_pull_request: bool = False


class PullRequest(BaseModel):
    """A closed pull request of a repository. ``merged_at`` is None when it was closed without merging."""

    model_config = ConfigDict(frozen=True)

    title: str
    number: int
    html_url: str
    merged_at: datetime | None = None
    author_login: str
    author_html_url: str


class ChangelogSection(BaseModel):
    """Everything rendered into a single changelog fragment."""

    model_config = ConfigDict(frozen=True)

    previous_release: Release | None
    next_release: Release
    issues: tuple[Issue, ...] = ()
    pull_requests: tuple[PullRequest, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Whether the section lists no issues and no pull requests."""
        return not self.issues and not self.pull_requests


class ChangelogStatus(str, Enum):
    """Outcome of a changelog generation run."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    DRY_RUN = "dry_run"


class ChangelogResult(BaseModel):
    """Result of changelog generation."""

    status: ChangelogStatus
    version: str | None = None
    path: str | None = None
    fragment: str | None = None
