"""Unit tests for console formatting helpers."""

import logging

from lps.models.package import PackageRecord, UpgradeCandidate
from lps.utils.formatting import configure_logging, create_candidate_table, format_candidate_row
from rich.logging import RichHandler


class TestCandidateTable:
    """Tests for candidate table helpers."""

    def test_columns(self) -> None:
        """The table has one column per candidate field."""
        table = create_candidate_table()

        assert [c.header for c in table.columns] == [
            "Package",
            "Version",
            "Repository",
            "Size",
            "Description",
        ]

    def test_row(self) -> None:
        """Rows carry the record fields with markup."""
        candidate = UpgradeCandidate(
            record=PackageRecord(
                name="vim",
                version="9.1-1",
                installed_size=2048,
                description="Vi Improved",
                repository="extra",
            )
        )

        name, version, repo, size, description = format_candidate_row(candidate)

        assert "vim" in name
        assert "9.1-1" in version
        assert "extra" in repo
        assert "2.0 KiB" in size
        assert "Vi Improved" in description

    def test_row_escapes_markup(self) -> None:
        """Descriptions containing brackets are escaped."""
        candidate = UpgradeCandidate(
            record=PackageRecord(name="odd", description="[bold]not markup[/bold]")
        )

        description = format_candidate_row(candidate)[4]

        assert "\\[bold]" in description

    def test_row_placeholders(self) -> None:
        """Missing fields show a dash."""
        candidate = UpgradeCandidate(record=PackageRecord(name="odd"))

        _, version, repo, _, description = format_candidate_row(candidate)

        assert "-" in version
        assert "-" in repo
        assert "-" in description


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level(self) -> None:
        """Warnings and above are shown by default."""
        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_verbose(self) -> None:
        """--verbose enables debug output."""
        configure_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG
