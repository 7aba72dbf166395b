"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_CHANGELOG_PATH,
    DEFAULT_CHANGELOG_TITLE,
    DEFAULT_GITHUB_API_URL,
)
from .logging import configure_logging

__all__ = [
    "DEFAULT_CHANGELOG_PATH",
    "DEFAULT_CHANGELOG_TITLE",
    "DEFAULT_GITHUB_API_URL",
    "configure_logging",
]
