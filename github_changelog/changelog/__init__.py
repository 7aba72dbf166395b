"""Changelog generation module."""

from .document import ChangelogDocument
from .exceptions import ChangelogError, ChangelogFileError, InvalidReleaseError, NoReleaseFoundError
from .markdown import render_section, splice_fragment
from .models import (
    ChangelogResult,
    ChangelogSection,
    ChangelogStatus,
    Issue,
    PullRequest,
    Release,
)
from .resolver import resolve_releases
from .window import filter_issues, filter_pulls

__all__ = [
    "ChangelogDocument",
    "ChangelogError",
    "ChangelogFileError",
    "InvalidReleaseError",
    "NoReleaseFoundError",
    "ChangelogResult",
    "ChangelogSection",
    "ChangelogStatus",
    "Issue",
    "PullRequest",
    "Release",
    "render_section",
    "splice_fragment",
    "resolve_releases",
    "filter_issues",
    "filter_pulls",
]
