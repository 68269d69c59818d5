"""Recursive search for target directories.

Walks a project tree depth-first in sorted order and collects every
directory whose base name matches the configured target name, without
descending into ignored directories (version control, dependency caches,
IDE metadata).
"""

import logging
import stat
from pathlib import Path

from forceclean.cleanup.models import Diagnostics, SkipReason
from forceclean.core.config import CleanupConfig

logger = logging.getLogger(__name__)


class TreeScanner:
    """Finds directories named ``config.target_name`` below a root.

    The scan is best-effort: entries that cannot be listed or stat-ed are
    recorded in the diagnostics collector and skipped, and ``scan()``
    never raises for them.

    Args:
        config: Cleanup configuration (target name and ignored directories).
        diagnostics: Optional collector for skipped entries.
    """

    def __init__(self, config: CleanupConfig, diagnostics: Diagnostics | None = None) -> None:
        self._config = config
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        # (st_dev, st_ino) of directories already descended into, valid for one scan
        self._visited: set[tuple[int, int]] = set()

    @property
    def diagnostics(self) -> Diagnostics:
        """Collector receiving skipped entries."""
        return self._diagnostics

    def scan(self, root: Path) -> list[Path]:
        """Collect all target directories below root.

        Args:
            root: Directory to start searching from.

        Returns:
            Matched directories in depth-first, lexically sorted order.
            Empty if nothing matched or the root could not be read.
        """
        self._visited = set()
        found: list[Path] = []

        try:
            root_stat = root.stat()
        except OSError as e:
            self._diagnostics.record(root, SkipReason.STAT_ERROR, str(e))
            return found

        self._visited.add((root_stat.st_dev, root_stat.st_ino))
        self._walk(root, found)

        logger.debug(
            "Found %d '%s' director(y/ies) below %s", len(found), self._config.target_name, root
        )
        return found

    def _walk(self, directory: Path, found: list[Path]) -> None:
        """Recurse into directory, appending matches to found.

        Symlinked directories are followed. A directory already reached
        through another path is still matched by name but not descended
        into again, so link cycles terminate.

        Args:
            directory: Directory whose entries are examined.
            found: Accumulator for matched directories.
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            self._diagnostics.record(directory, SkipReason.LIST_ERROR, str(e))
            return

        for entry in entries:
            try:
                entry_stat = entry.stat()
            except OSError as e:
                self._diagnostics.record(entry, SkipReason.STAT_ERROR, str(e))
                continue

            if not stat.S_ISDIR(entry_stat.st_mode):
                continue

            # Matching is by name only; every alias of a target is emitted
            if entry.name == self._config.target_name:
                found.append(entry)

            if entry.name in self._config.ignored_dirs:
                continue

            key = (entry_stat.st_dev, entry_stat.st_ino)
            if key in self._visited:
                self._diagnostics.record(entry, SkipReason.ALREADY_VISITED)
                continue
            self._visited.add(key)

            self._walk(entry, found)
