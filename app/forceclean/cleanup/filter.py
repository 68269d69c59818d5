"""Criterion filter for files inside a target directory.

Only the direct children of a matched directory are inspected. Each
regular file is read as UTF-8 and tested for literal containment of the
criterion marker; files without the marker are actionable.
"""

import logging
import stat
from pathlib import Path

from forceclean.cleanup.models import ClassifiedFile, Diagnostics, FileStatus, SkipReason
from forceclean.core.config import CleanupConfig

logger = logging.getLogger(__name__)


class CriterionFilter:
    """Classifies the flat files of a target directory.

    Files that cannot be stat-ed or read are reported as SKIPPED and are
    never actionable; one bad file does not affect its siblings.

    Args:
        config: Cleanup configuration (criterion marker).
        diagnostics: Optional collector for skipped entries.
    """

    def __init__(self, config: CleanupConfig, diagnostics: Diagnostics | None = None) -> None:
        self._config = config
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    @property
    def diagnostics(self) -> Diagnostics:
        """Collector receiving skipped entries."""
        return self._diagnostics

    def classify(self, directory: Path) -> list[ClassifiedFile]:
        """Classify every regular file directly inside directory.

        Subdirectories and other non-regular entries are ignored.

        Args:
            directory: Target directory to inspect.

        Returns:
            One ClassifiedFile per regular or unreadable entry, sorted by path.
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Error reading directory %s: %s", directory, e)
            self._diagnostics.record(directory, SkipReason.LIST_ERROR, str(e))
            return []

        results: list[ClassifiedFile] = []
        for entry in entries:
            result = self._classify_entry(entry)
            if result is not None:
                results.append(result)
        return results

    def filter_non_conforming(self, directory: Path) -> list[Path]:
        """Return files in directory that do not contain the criterion marker.

        Args:
            directory: Target directory to inspect.

        Returns:
            Paths of actionable files, sorted.
        """
        return [f.path for f in self.classify(directory) if f.is_actionable]

    def _classify_entry(self, entry: Path) -> ClassifiedFile | None:
        """Classify a single directory entry.

        Args:
            entry: Path of the entry.

        Returns:
            ClassifiedFile, or None if the entry is not a regular file.
        """
        try:
            entry_stat = entry.stat()
        except OSError as e:
            self._diagnostics.record(entry, SkipReason.STAT_ERROR, str(e))
            return ClassifiedFile(entry, FileStatus.SKIPPED, SkipReason.STAT_ERROR, str(e))

        if not stat.S_ISREG(entry_stat.st_mode):
            return None

        try:
            # Undecodable bytes are replaced; the marker test still applies
            content = entry.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self._diagnostics.record(entry, SkipReason.READ_ERROR, str(e))
            return ClassifiedFile(entry, FileStatus.SKIPPED, SkipReason.READ_ERROR, str(e))

        if self._config.criterion_marker in content:
            return ClassifiedFile(entry, FileStatus.COMPLIANT)
        return ClassifiedFile(entry, FileStatus.ACTIONABLE)
