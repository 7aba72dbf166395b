"""Unit tests for the changelog.document module."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from github_changelog.changelog.document import ChangelogDocument
from github_changelog.changelog.exceptions import ChangelogFileError
from github_changelog.changelog.models import ChangelogSection, Issue, Release

PREVIOUS = Release(tag_name="v1.0", html_url="https://github.com/o/r/releases/tag/v1.0", published_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
NEXT = Release(tag_name="v2.0", html_url="https://github.com/o/r/releases/tag/v2.0", published_at=datetime(2024, 3, 1, tzinfo=timezone.utc))
ISSUE = Issue(title="Bug", number=1, html_url="https://github.com/o/r/issues/1", closed_at=datetime(2024, 2, 1, tzinfo=timezone.utc))

EMPTY_SECTION = ChangelogSection(previous_release=PREVIOUS, next_release=NEXT)
NON_EMPTY_SECTION = ChangelogSection(previous_release=PREVIOUS, next_release=NEXT, issues=(ISSUE,))


def test_read_missing_file_returns_none(tmp_path: Path) -> None:
    """Test that reading a changelog that doesn't exist yet returns None."""
    assert ChangelogDocument(tmp_path / "CHANGELOG.md").read() is None


def test_read_directory_raises(tmp_path: Path) -> None:
    """Test that a changelog path pointing at a directory raises ChangelogFileError."""
    document = ChangelogDocument(tmp_path)
    with pytest.raises(ChangelogFileError) as exc_info:
        document.read()
    assert exc_info.value.path == tmp_path


def test_write_into_missing_directory_raises(tmp_path: Path) -> None:
    """Test that a failed write raises ChangelogFileError with the path."""
    path = tmp_path / "missing" / "CHANGELOG.md"
    with pytest.raises(ChangelogFileError) as exc_info:
        ChangelogDocument(path).write("# Changelog\n")
    assert str(path) in str(exc_info.value)


@pytest.mark.parametrize(
    "existing,section,expected",
    [
        pytest.param(None, EMPTY_SECTION, True, id="empty section creates document"),
        pytest.param(None, NON_EMPTY_SECTION, True, id="non-empty section creates document"),
        pytest.param("# Changelog\n", EMPTY_SECTION, False, id="empty section on existing document"),
        pytest.param("# Changelog\n", NON_EMPTY_SECTION, True, id="non-empty section on existing document"),
        pytest.param(
            "# Changelog\n\n## [v2.0](link) (2024-03-01)\n",
            NON_EMPTY_SECTION,
            False,
            id="release already documented",
        ),
        pytest.param("# Changelog\n\n## [v2.0.1](link) (2024-03-02)\n", NON_EMPTY_SECTION, True, id="tag prefix of another release"),
    ],
)
def test_should_write(existing: str | None, section: ChangelogSection, expected: bool) -> None:
    """Test the write guard."""
    assert ChangelogDocument.should_write(existing, section) is expected


def test_update_creates_document(tmp_path: Path) -> None:
    """Test that an update on a missing file creates it, even for an empty section."""
    path = tmp_path / "CHANGELOG.md"

    written = ChangelogDocument(path).update(EMPTY_SECTION, "\n## [v2.0](link) (2024-03-01)")

    assert written is True
    assert path.read_text(encoding="utf-8") == "# Changelog\n\n## [v2.0](link) (2024-03-01)\n"


def test_update_empty_section_leaves_document_unchanged(tmp_path: Path) -> None:
    """Test that repeated no-op runs never add empty sections."""
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\n\n## [v1.0](link) (2024-01-01)\n", encoding="utf-8")
    document = ChangelogDocument(path)

    assert document.update(EMPTY_SECTION, "\n## [v2.0](link) (2024-03-01)") is False
    assert document.update(EMPTY_SECTION, "\n## [v2.0](link) (2024-03-01)") is False
    assert path.read_text(encoding="utf-8") == "# Changelog\n\n## [v1.0](link) (2024-01-01)\n"


def test_update_prepends_section(tmp_path: Path) -> None:
    """Test that a non-empty section is written directly below the title."""
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\n\n## [v1.0](link) (2024-01-01)\n", encoding="utf-8")

    written = ChangelogDocument(path).update(NON_EMPTY_SECTION, "\n## [v2.0](link) (2024-03-01)")

    assert written is True
    assert path.read_text(encoding="utf-8") == "# Changelog\n\n## [v2.0](link) (2024-03-01)\n\n## [v1.0](link) (2024-01-01)\n"


def test_update_skips_already_documented_release(tmp_path: Path) -> None:
    """Test that a release with an existing section is not written a second time."""
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\n\n## [v2.0](link) (2024-03-01)\n", encoding="utf-8")

    written = ChangelogDocument(path).update(NON_EMPTY_SECTION, "\n## [v2.0](link) (2024-03-01)\n\n- Bug")

    assert written is False
    assert path.read_text(encoding="utf-8") == "# Changelog\n\n## [v2.0](link) (2024-03-01)\n"
