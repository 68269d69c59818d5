"""Unit tests for cleanup domain models."""

from pathlib import Path

import pytest
from forceclean.cleanup.models import (
    ActionReport,
    ClassifiedFile,
    CleanupOptions,
    CleanupResult,
    Diagnostics,
    FileActionResult,
    FileStatus,
    IgnoreListUpdate,
    SkipReason,
)


class TestClassifiedFile:
    """Tests for ClassifiedFile validation."""

    def test_actionable(self) -> None:
        """Actionable files report is_actionable."""
        f = ClassifiedFile(Path("/p/a.xml"), FileStatus.ACTIONABLE)
        assert f.is_actionable is True

    def test_skipped_requires_reason(self) -> None:
        """A skipped file without a reason is rejected."""
        with pytest.raises(ValueError, match="Skip reason"):
            ClassifiedFile(Path("/p/a.xml"), FileStatus.SKIPPED)

    def test_reason_only_for_skipped(self) -> None:
        """A classified file cannot carry a skip reason."""
        with pytest.raises(ValueError, match="Skip reason"):
            ClassifiedFile(Path("/p/a.xml"), FileStatus.COMPLIANT, SkipReason.READ_ERROR)

    def test_skipped_not_actionable(self) -> None:
        """Skipped files are never actionable."""
        f = ClassifiedFile(Path("/p/a.xml"), FileStatus.SKIPPED, SkipReason.STAT_ERROR, "boom")
        assert f.is_actionable is False


class TestDiagnostics:
    """Tests for the skip collector."""

    def test_record_and_filter(self) -> None:
        """Recorded skips are kept in order and filterable by reason."""
        diagnostics = Diagnostics()
        diagnostics.record(Path("/a"), SkipReason.LIST_ERROR, "denied")
        diagnostics.record(Path("/b"), SkipReason.READ_ERROR, "io")

        assert len(diagnostics) == 2
        assert [s.path for s in diagnostics.skipped] == [Path("/a"), Path("/b")]
        assert diagnostics.by_reason(SkipReason.READ_ERROR)[0].error == "io"

    def test_empty_collector(self) -> None:
        """A fresh collector holds nothing."""
        assert Diagnostics().skipped == ()


class TestCleanupOptions:
    """Tests for CleanupOptions."""

    def test_defaults_are_dry_run(self) -> None:
        """Both actions are off by default."""
        options = CleanupOptions()
        assert options.delete is False
        assert options.update_ignore_list is False
        assert options.dry_run is True

    @pytest.mark.parametrize(
        ("delete", "update"), [(True, False), (False, True), (True, True)]
    )
    def test_any_action_is_not_dry_run(self, delete: bool, update: bool) -> None:
        """Enabling any action leaves dry-run."""
        assert CleanupOptions(delete=delete, update_ignore_list=update).dry_run is False


class TestReports:
    """Tests for ActionReport and CleanupResult helpers."""

    def test_action_report_partitions(self) -> None:
        """deleted excludes dry-runs and failures; failed lists failures."""
        report = ActionReport(
            deletions=[
                FileActionResult(Path("/a"), success=True),
                FileActionResult(Path("/b"), success=False, error="denied"),
                FileActionResult(Path("/c"), success=True, dry_run=True),
            ]
        )

        assert report.deleted == [Path("/a")]
        assert [r.path for r in report.failed] == [Path("/b")]

    def test_ignore_list_update_changed(self) -> None:
        """An update is a change only when entries were added."""
        assert IgnoreListUpdate(Path("/r/.forceignore")).changed is False
        assert IgnoreListUpdate(Path("/r/.forceignore"), added=("x",)).changed is True

    def test_cleanup_result_grouping(self) -> None:
        """Files are grouped by their target directory."""
        d1, d2 = Path("/r/a/dataSourceObjects"), Path("/r/b/dataSourceObjects")
        result = CleanupResult(
            root=Path("/r"),
            target_dirs=(d1, d2),
            files=(
                ClassifiedFile(d1 / "x.xml", FileStatus.COMPLIANT),
                ClassifiedFile(d1 / "y.xml", FileStatus.ACTIONABLE),
                ClassifiedFile(d2 / "z.xml", FileStatus.ACTIONABLE),
            ),
            report=ActionReport(),
        )

        assert result.actionable == [d1 / "y.xml", d2 / "z.xml"]
        assert [f.path.name for f in result.files_in(d1)] == ["x.xml", "y.xml"]
