"""Action applier for actionable files.

Deletes actionable files (or reports what would be deleted) and records
them into the ignore-list file. Deletions are best-effort per file and
are not rolled back when the ignore-list update fails.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from forceclean.cleanup.ignore_list import IgnoreListError, IgnoreListWriter
from forceclean.cleanup.models import ActionReport, CleanupOptions, FileActionResult
from forceclean.core.config import CleanupConfig

logger = logging.getLogger(__name__)


class CleanupOperator:
    """Applies the enabled actions to a set of actionable files.

    With both actions disabled nothing on disk changes; every file gets a
    dry-run result describing what deletion would do.

    Attributes:
        _options: Enabled actions.
        _config: Cleanup configuration passed to the ignore-list writer.
    """

    def __init__(self, options: CleanupOptions, config: CleanupConfig) -> None:
        """Initialize the CleanupOperator.

        Args:
            options: Which actions (delete, ignore-list update) are enabled.
            config: Cleanup configuration.
        """
        self._options = options
        self._config = config

    def apply(self, files: Sequence[Path], root: Path) -> ActionReport:
        """Apply the enabled actions to files.

        Args:
            files: Actionable files.
            root: Project root holding the ignore-list file.

        Returns:
            ActionReport with one deletion result per file and the
            ignore-list outcome.
        """
        report = ActionReport()
        for path in files:
            report.deletions.append(self._delete_single(path))

        if self._options.update_ignore_list and files:
            writer = IgnoreListWriter(root, self._config)
            try:
                report.ignore_list = writer.record(files)
            except IgnoreListError as e:
                logger.error("Ignore-list update aborted: %s", e)
                report.ignore_list_error = str(e)

        return report

    def _delete_single(self, path: Path) -> FileActionResult:
        """Delete a single file, or simulate it when delete is disabled.

        Args:
            path: File to delete.

        Returns:
            FileActionResult indicating success or failure.
        """
        if not self._options.delete:
            logger.debug("Dry-run: would delete %s", path)
            return FileActionResult(path=path, success=True, dry_run=True)

        try:
            path.unlink()
        except OSError as e:
            logger.warning("Error deleting %s: %s", path, e)
            return FileActionResult(path=path, success=False, error=str(e))

        logger.info("Deleted %s", path)
        return FileActionResult(path=path, success=True)
