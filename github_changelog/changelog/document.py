"""Reading and writing of the persisted changelog document."""

from pathlib import Path

import structlog

from ..utils.constants import DEFAULT_CHANGELOG_TITLE, RELEASE_HEADER_PREFIX
from .exceptions import ChangelogFileError
from .markdown import splice_fragment
from .models import ChangelogSection

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class ChangelogDocument:
    """A changelog markdown file on disk: a title line followed by sections, newest first."""

    def __init__(self, path: Path, title: str = DEFAULT_CHANGELOG_TITLE) -> None:
        """Initialize with the path of the changelog file."""
        self.path = path
        self.title = title

    def read(self) -> str | None:
        """Return the current content, or None when the file does not exist yet."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Changelog file does not exist yet", path=str(self.path))
            return None
        except OSError as exc:
            raise ChangelogFileError(self.path, exc) from exc
        logger.debug("Read changelog file", path=str(self.path), length=len(content))
        return content

    def write(self, content: str) -> None:
        """Replace the whole file with ``content``."""
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ChangelogFileError(self.path, exc) from exc
        logger.info("Wrote changelog file", path=str(self.path))

    @staticmethod
    def is_documented(existing: str | None, tag_name: str) -> bool:
        """Whether the document already has a section for ``tag_name``."""
        if existing is None:
            return False
        header_prefix = RELEASE_HEADER_PREFIX.format(tag_name=tag_name)
        return any(line.startswith(header_prefix) for line in existing.split("\n"))

    @classmethod
    def should_write(cls, existing: str | None, section: ChangelogSection) -> bool:
        """Whether a run with ``section`` should touch the file.

        An empty section is only worth writing when it creates the document, and a
        release that already has a section is never written twice.
        """
        if existing is None:
            return True
        return not section.is_empty and not cls.is_documented(existing, section.next_release.tag_name)

    def update(self, section: ChangelogSection, fragment: str) -> bool:
        """Splice ``fragment`` into the document and write it back if the write guard allows.

        Returns:
            True if the file was written, False if it was left unchanged.
        """
        existing = self.read()
        if self.should_write(existing, section):
            self.write(splice_fragment(existing, fragment, self.title))
            return True
        if self.is_documented(existing, section.next_release.tag_name):
            logger.info("Release already has a section, leaving changelog unchanged", version=section.next_release.tag_name, path=str(self.path))
        else:
            logger.info("No new issues or pull requests, leaving changelog unchanged", path=str(self.path))
        return False
