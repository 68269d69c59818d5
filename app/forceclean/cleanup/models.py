"""Cleanup domain models.

This module defines the data structures passed between the scanner,
the criterion filter and the operator: per-file classifications,
per-item skip records, action results and the report of a run.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStatus(str, Enum):
    """Classification of a candidate file.

    Attributes:
        ACTIONABLE: The file lacks the criterion marker and is subject to action.
        COMPLIANT: The file contains the criterion marker.
        SKIPPED: The file could not be stat-ed or read and was not classified.
    """

    ACTIONABLE = "actionable"
    COMPLIANT = "compliant"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    """Reason an entry was skipped during scanning or filtering.

    Attributes:
        LIST_ERROR: The directory could not be listed.
        STAT_ERROR: The entry could not be stat-ed (permissions, broken link).
        READ_ERROR: The file could not be read.
        ALREADY_VISITED: The directory was already descended into through
            another path and is not listed again.
    """

    LIST_ERROR = "list_error"
    STAT_ERROR = "stat_error"
    READ_ERROR = "read_error"
    ALREADY_VISITED = "already_visited"


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """An entry left out of a run because of an error.

    Attributes:
        path: Path of the skipped entry.
        reason: Why the entry was skipped.
        error: Error message from the failing operation, if any.
    """

    path: Path
    reason: SkipReason
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ClassifiedFile:
    """Result of testing one candidate file against the criterion.

    Attributes:
        path: Path of the candidate file.
        status: Classification status.
        reason: Skip reason, set only when status is SKIPPED.
        error: Error message, set only when status is SKIPPED.
    """

    path: Path
    status: FileStatus
    reason: SkipReason | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate that only skipped files carry a skip reason."""
        if (self.status == FileStatus.SKIPPED) != (self.reason is not None):
            msg = f"Skip reason must be set if and only if status is skipped: {self.path}"
            raise ValueError(msg)

    @property
    def is_actionable(self) -> bool:
        """Check if the file is subject to action."""
        return self.status == FileStatus.ACTIONABLE


class Diagnostics:
    """Collector for entries skipped during a run.

    Passed to the scanner and filter so callers (and tests) can inspect
    skip reasons without capturing log output.
    """

    def __init__(self) -> None:
        self._skipped: list[SkippedEntry] = []

    def record(self, path: Path, reason: SkipReason, error: str | None = None) -> SkippedEntry:
        """Record a skipped entry.

        Args:
            path: Path of the skipped entry.
            reason: Why the entry was skipped.
            error: Error message from the failing operation.

        Returns:
            The recorded SkippedEntry.
        """
        entry = SkippedEntry(path=path, reason=reason, error=error)
        self._skipped.append(entry)
        logger.debug("Skipping %s (%s): %s", path, reason.value, error)
        return entry

    @property
    def skipped(self) -> tuple[SkippedEntry, ...]:
        """All skipped entries in the order they were recorded."""
        return tuple(self._skipped)

    def by_reason(self, reason: SkipReason) -> list[SkippedEntry]:
        """Return skipped entries with the given reason."""
        return [s for s in self._skipped if s.reason == reason]

    def __len__(self) -> int:
        return len(self._skipped)


@dataclass(frozen=True, slots=True)
class CleanupOptions:
    """Actions enabled for a run. Both default to off (dry-run).

    Attributes:
        delete: Delete actionable files.
        update_ignore_list: Append actionable files to the ignore-list file.
    """

    delete: bool = False
    update_ignore_list: bool = False

    @property
    def dry_run(self) -> bool:
        """Check if no mutating action is enabled."""
        return not (self.delete or self.update_ignore_list)


@dataclass(frozen=True, slots=True)
class FileActionResult:
    """Result of deleting (or dry-run deleting) a single file.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: Path
    success: bool
    error: str | None = None
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class IgnoreListUpdate:
    """Outcome of recording entries into the ignore-list file.

    Attributes:
        path: Ignore-list file path.
        added: Relative paths appended, in order.
        created: Whether the file did not exist before the update.
        header_added: Whether the managed header line was inserted.
    """

    path: Path
    added: tuple[str, ...] = ()
    created: bool = False
    header_added: bool = False

    @property
    def changed(self) -> bool:
        """Check if the file was written."""
        return bool(self.added)


@dataclass(slots=True)
class ActionReport:
    """Summary of what the operator did during one run.

    Attributes:
        deletions: One result per actionable file (dry-run when delete is off).
        ignore_list: Ignore-list update, None if the update did not run.
        ignore_list_error: Error message if the ignore-list update failed.
    """

    deletions: list[FileActionResult] = field(default_factory=list)
    ignore_list: IgnoreListUpdate | None = None
    ignore_list_error: str | None = None

    @property
    def deleted(self) -> list[Path]:
        """Paths that were actually removed."""
        return [r.path for r in self.deletions if r.success and not r.dry_run]

    @property
    def failed(self) -> list[FileActionResult]:
        """Deletions that failed."""
        return [r for r in self.deletions if not r.success]


@dataclass(frozen=True, slots=True)
class CleanupResult:
    """Everything found and done during one cleanup run.

    Attributes:
        root: Absolute search root.
        target_dirs: Matched target directories in traversal order.
        files: Classification of every candidate file, grouped by directory order.
        report: What the operator did with the actionable files.
        skipped: Entries skipped by the scanner and filter.
    """

    root: Path
    target_dirs: tuple[Path, ...]
    files: tuple[ClassifiedFile, ...]
    report: ActionReport
    skipped: tuple[SkippedEntry, ...] = ()

    @property
    def actionable(self) -> list[Path]:
        """Paths of files lacking the criterion marker."""
        return [f.path for f in self.files if f.is_actionable]

    def files_in(self, directory: Path) -> list[ClassifiedFile]:
        """Return classified files located directly in a target directory."""
        return [f for f in self.files if f.path.parent == directory]
