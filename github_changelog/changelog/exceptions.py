"""Custom exceptions for the changelog module."""

from pathlib import Path


class ChangelogError(Exception):
    """Base class for errors raised while building a changelog."""

    pass


class NoReleaseFoundError(ChangelogError):
    """Raised when the repository has no releases to build a changelog for."""

    def __init__(self, owner: str, repo_name: str) -> None:
        """Initializes the exception with the repository that has no releases."""
        super().__init__(f"No releases found for repository {owner}/{repo_name}")
        self.owner = owner
        self.repo_name = repo_name


class InvalidReleaseError(ChangelogError):
    """Raised when a release lacks the publish timestamp needed for comparison."""

    def __init__(self, tag_name: str) -> None:
        """Initializes the exception with the tag of the unpublished release."""
        super().__init__(f"Release {tag_name} has no publish timestamp (is it a draft?)")
        self.tag_name = tag_name


class ChangelogFileError(ChangelogError):
    """Raised when the changelog document cannot be read or written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        """Initializes the exception with the offending path and the underlying error."""
        super().__init__(f"Failed to access changelog file {path}: {cause}")
        self.path = path
        self.cause = cause
