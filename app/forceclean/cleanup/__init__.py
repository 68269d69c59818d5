"""Target-directory cleanup module.

This module provides the tree scanner, the criterion filter, the
action operator and the ignore-list writer, plus the pipeline that
runs them once over a project tree.
"""

from forceclean.cleanup.filter import CriterionFilter
from forceclean.cleanup.ignore_list import IgnoreListError, IgnoreListWriter
from forceclean.cleanup.models import (
    ActionReport,
    ClassifiedFile,
    CleanupOptions,
    CleanupResult,
    Diagnostics,
    FileActionResult,
    FileStatus,
    IgnoreListUpdate,
    SkippedEntry,
    SkipReason,
)
from forceclean.cleanup.operator import CleanupOperator
from forceclean.cleanup.pipeline import run_cleanup
from forceclean.cleanup.scanner import TreeScanner

__all__ = [
    "ActionReport",
    "ClassifiedFile",
    "CleanupOperator",
    "CleanupOptions",
    "CleanupResult",
    "CriterionFilter",
    "Diagnostics",
    "FileActionResult",
    "FileStatus",
    "IgnoreListError",
    "IgnoreListUpdate",
    "IgnoreListWriter",
    "SkipReason",
    "SkippedEntry",
    "TreeScanner",
    "run_cleanup",
]
