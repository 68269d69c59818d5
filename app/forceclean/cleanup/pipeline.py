"""Single-pass cleanup pipeline: scan, filter, apply."""

import logging
from pathlib import Path

from forceclean.cleanup.filter import CriterionFilter
from forceclean.cleanup.models import ClassifiedFile, CleanupOptions, CleanupResult, Diagnostics
from forceclean.cleanup.operator import CleanupOperator
from forceclean.cleanup.scanner import TreeScanner
from forceclean.core.config import CleanupConfig

logger = logging.getLogger(__name__)


def run_cleanup(
    root: Path,
    options: CleanupOptions,
    config: CleanupConfig | None = None,
    diagnostics: Diagnostics | None = None,
) -> CleanupResult:
    """Run one cleanup pass over a project tree.

    Target directories are processed in traversal order; the actions are
    applied once, to the actionable files of all directories together.

    Args:
        root: Absolute search root. Must be an existing directory.
        options: Enabled actions.
        config: Cleanup configuration. Defaults to CleanupConfig().
        diagnostics: Optional collector for skipped entries.

    Returns:
        CleanupResult describing what was found and done.
    """
    config = config if config is not None else CleanupConfig()
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    target_dirs = TreeScanner(config, diagnostics).scan(root)
    criterion = CriterionFilter(config, diagnostics)

    files: list[ClassifiedFile] = []
    for directory in target_dirs:
        classified = criterion.classify(directory)
        logger.debug(
            "%s: %d file(s), %d actionable",
            directory,
            len(classified),
            sum(1 for f in classified if f.is_actionable),
        )
        files.extend(classified)

    actionable = [f.path for f in files if f.is_actionable]
    report = CleanupOperator(options, config).apply(actionable, root)

    return CleanupResult(
        root=root,
        target_dirs=tuple(target_dirs),
        files=tuple(files),
        report=report,
        skipped=diagnostics.skipped,
    )
