"""Append-only writer for the project ignore-list file.

Records project-relative, forward-slash paths into the ignore-list file
at the search root (``.forceignore`` by default). Existing content is
never rewritten: new entries are deduplicated against the file and the
batch, then appended in a single block under a managed header comment.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path, PurePath

from forceclean.cleanup.models import IgnoreListUpdate
from forceclean.core.config import CleanupConfig

logger = logging.getLogger(__name__)


class IgnoreListError(Exception):
    """Raised when the ignore-list file cannot be read or written."""


class IgnoreListWriter:
    """Appends entries to the ignore-list file of a project root.

    Args:
        root: Project root containing the ignore-list file.
        config: Cleanup configuration (file name, header, comment prefix).
    """

    def __init__(self, root: Path, config: CleanupConfig) -> None:
        self._root = root
        self._config = config
        self._path = root / config.ignore_list_filename

    @property
    def path(self) -> Path:
        """Ignore-list file path."""
        return self._path

    def relative_entry(self, path: Path) -> str:
        """Convert a path to its ignore-list entry.

        Args:
            path: Absolute path below the project root.

        Returns:
            Path relative to the root with forward-slash separators.
        """
        return PurePath(os.path.relpath(path, self._root)).as_posix()

    def record(self, paths: Iterable[Path]) -> IgnoreListUpdate:
        """Append paths not yet present in the ignore-list file.

        An empty batch, or one whose entries are all present already,
        leaves the file untouched.

        Args:
            paths: Absolute paths to record.

        Returns:
            IgnoreListUpdate describing what was appended.

        Raises:
            IgnoreListError: If the existing file cannot be read or the
                append fails.
        """
        existed = self._path.exists()
        content = self._read() if existed else ""
        lines = content.splitlines()
        present = self._existing_entries(lines)

        new_entries: list[str] = []
        for path in paths:
            entry = self.relative_entry(path)
            if entry not in present:
                new_entries.append(entry)
                present.add(entry)

        if not new_entries:
            logger.debug("No new entries for %s", self._path)
            return IgnoreListUpdate(path=self._path, created=False)

        header = self._config.ignore_list_header
        header_exists = any(line.strip() == header.strip() for line in lines)

        block = ""
        if content and not content.endswith(("\n", "\r")):
            block += "\n"
        if not header_exists:
            # Blank separator line after existing non-blank content
            if lines and lines[-1].strip():
                block += "\n"
            block += header + "\n"
        block += "\n".join(new_entries) + "\n"

        try:
            with open(self._path, "a", encoding="utf-8", newline="") as f:
                f.write(block)
        except OSError as e:
            msg = f"Error appending to {self._path}: {e}"
            raise IgnoreListError(msg) from e

        logger.info("Appended %d entr(y/ies) to %s", len(new_entries), self._path)
        return IgnoreListUpdate(
            path=self._path,
            added=tuple(new_entries),
            created=not existed,
            header_added=not header_exists,
        )

    def _read(self) -> str:
        """Read the existing file content.

        Raises:
            IgnoreListError: If the file cannot be read.
        """
        try:
            with open(self._path, encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Error reading {self._path}: {e}"
            raise IgnoreListError(msg) from e

    def _existing_entries(self, lines: list[str]) -> set[str]:
        """Collect trimmed entries, ignoring blank and comment lines."""
        entries: set[str] = set()
        for line in lines:
            stripped = line.strip()
            if stripped and not stripped.startswith(self._config.comment_prefix):
                entries.add(stripped)
        return entries
