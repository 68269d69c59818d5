"""Rich display functions for cleanup runs.

Prints the effective settings, the directories and files found, the
outcome of each action and closing reminders. Paths below the search
root are shown relative to it.
"""

import json
import os
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from forceclean.cleanup.models import (
    CleanupOptions,
    CleanupResult,
    FileActionResult,
    FileStatus,
    SkippedEntry,
)
from forceclean.core.config import CleanupConfig
from forceclean.utils.formatting import console, print_info, print_success, print_warning


def _rel(path: Path, root: Path) -> str:
    """Format path relative to root for display."""
    return escape(Path(os.path.relpath(path, root)).as_posix())


def print_settings(options: CleanupOptions, config: CleanupConfig, root: Path) -> None:
    """Print the effective settings of a run.

    Args:
        options: Enabled actions.
        config: Cleanup configuration.
        root: Search root.
    """
    if options.delete:
        console.print("[warning]ACTION:[/] File deletion is ENABLED.")
    else:
        print_info("File deletion is DISABLED (dry-run). Use --delete to enable.")

    if options.update_ignore_list:
        name = escape(config.ignore_list_filename)
        console.print(f"[warning]ACTION:[/] {name} update is ENABLED.")
    else:
        print_info(
            f"{config.ignore_list_filename} update is DISABLED. Use --update-ignore-list to enable."
        )

    console.print(
        f"Criteria: files NOT containing [bold]{escape(config.criterion_marker)}[/bold] "
        f"in folders named [bold]{escape(config.target_name)}[/bold] will be targeted.",
        soft_wrap=True,
    )
    console.print(f"Searching from: {escape(str(root))}\n", soft_wrap=True)


def print_findings(
    result: CleanupResult,
    options: CleanupOptions,
    config: CleanupConfig,
    verbose: bool = False,
) -> None:
    """Print target directories and their actionable files.

    Args:
        result: Result of the cleanup run.
        options: Enabled actions.
        config: Cleanup configuration.
        verbose: Also list the files that contain the criterion marker.
    """
    count = len(result.target_dirs)
    console.print(f"Found {count} '{escape(config.target_name)}' director(y/ies):")
    for directory in result.target_dirs:
        console.print(f"  - {_rel(directory, result.root)}", soft_wrap=True)

    deletions = {r.path: r for r in result.report.deletions}
    for directory in result.target_dirs:
        files = result.files_in(directory)
        actionable = [f.path for f in files if f.is_actionable]
        console.print(f"\n[header]{_rel(directory, result.root)}[/]", soft_wrap=True)
        if verbose:
            for f in files:
                if f.status == FileStatus.COMPLIANT:
                    console.print(
                        f"    - [compliant]{_rel(f.path, result.root)}[/] [muted](compliant)[/]",
                        soft_wrap=True,
                    )
        if not actionable:
            console.print("  [muted]No files in this folder met the criteria for action.[/]")
            continue
        console.print(f"  {len(actionable)} file(s) do NOT contain the criterion marker:")
        for path in actionable:
            action = _describe_action(deletions.get(path), options, config)
            console.print(
                f"    - [actionable]{_rel(path, result.root)}[/] [muted]({action})[/]",
                soft_wrap=True,
            )


def _describe_action(
    deletion: FileActionResult | None, options: CleanupOptions, config: CleanupConfig
) -> str:
    """Summarize what happened to one actionable file."""
    if options.dry_run:
        return "No action enabled"
    parts: list[str] = []
    if deletion is not None and not deletion.dry_run:
        if deletion.success:
            parts.append("DELETED")
        else:
            parts.append(f"ERROR DELETING: {escape(deletion.error or 'unknown error')}")
    if options.update_ignore_list:
        parts.append(f"added to {escape(config.ignore_list_filename)}")
    return ", ".join(parts)


def print_ignore_list_outcome(result: CleanupResult, config: CleanupConfig) -> None:
    """Print what happened to the ignore-list file.

    Args:
        result: Result of the cleanup run.
        config: Cleanup configuration.
    """
    report = result.report
    if report.ignore_list_error is not None:
        print_warning(f"Ignore list not updated: {escape(report.ignore_list_error)}")
        return

    update = report.ignore_list
    if update is None:
        print_info(
            f"\nNo files identified for action, so {config.ignore_list_filename} was not modified."
        )
        return

    if not update.changed:
        print_info(f"\nNo new unique file paths to add to {config.ignore_list_filename}.")
        return

    print_success(
        f"\nAppended {len(update.added)} new entr(y/ies) to {config.ignore_list_filename}"
    )
    for entry in update.added:
        console.print(f"  Added: {escape(entry)}", soft_wrap=True)


def print_deletion_summary(result: CleanupResult) -> None:
    """Print deletion counts when deletion was enabled."""
    deleted = len(result.report.deleted)
    failed = len(result.report.failed)
    if failed:
        print_warning(f"{deleted} file(s) deleted, {failed} failed")
    elif deleted:
        print_success(f"Deleted {deleted} file(s).")


def create_skipped_table(skipped: tuple[SkippedEntry, ...], root: Path) -> Table:
    """Create a Rich table listing skipped entries.

    Args:
        skipped: Entries skipped during the run.
        root: Search root for relative display.

    Returns:
        Rich Table configured for skip display.
    """
    table = Table(
        title="Skipped Entries",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="skipped")
    table.add_column("Reason", width=16)
    table.add_column("Error", style="muted")

    for entry in skipped:
        table.add_row(_rel(entry.path, root), entry.reason.value, escape(entry.error or "-"))

    return table


def print_reminders(options: CleanupOptions, config: CleanupConfig) -> None:
    """Print reminders for actions that were not enabled."""
    if not options.delete:
        print_info("REMINDER: Deletion was in dry-run mode. Use --delete to actually delete files.")
    if not options.update_ignore_list:
        print_info(
            f"REMINDER: {config.ignore_list_filename} was not updated. "
            "Use --update-ignore-list to enable."
        )


def print_json(result: CleanupResult) -> None:
    """Print the result of a run as JSON."""
    report = result.report
    update = report.ignore_list
    data = {
        "root": str(result.root),
        "target_dirs": [str(d) for d in result.target_dirs],
        "files": [
            {
                "path": str(f.path),
                "status": f.status.value,
                "reason": f.reason.value if f.reason else None,
                "error": f.error,
            }
            for f in result.files
        ],
        "deletions": [
            {
                "path": str(r.path),
                "success": r.success,
                "error": r.error,
                "dry_run": r.dry_run,
            }
            for r in report.deletions
        ],
        "ignore_list": (
            {
                "path": str(update.path),
                "added": list(update.added),
                "created": update.created,
                "header_added": update.header_added,
            }
            if update is not None
            else None
        ),
        "ignore_list_error": report.ignore_list_error,
        "skipped": [
            {"path": str(s.path), "reason": s.reason.value, "error": s.error}
            for s in result.skipped
        ],
    }
    console.print_json(json.dumps(data))
