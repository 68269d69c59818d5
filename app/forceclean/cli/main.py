"""Main CLI application entry point.

Defines the Typer application: a single command that scans a project
tree, reports non-conforming files and applies the enabled actions.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from forceclean import __version__
from forceclean.cleanup.models import CleanupOptions, Diagnostics
from forceclean.cleanup.pipeline import run_cleanup
from forceclean.cli import display
from forceclean.core.config import ConfigError, load_config
from forceclean.utils.formatting import console, err_console, print_error, print_warning

USAGE = "forceclean [--delete|--no-delete] [--update-ignore-list|--no-update-ignore-list] [ROOT]"

app = typer.Typer(
    name="forceclean",
    help="Find, delete and ignore non-conforming metadata files.",
    rich_markup_mode="rich",
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"forceclean version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _split_arguments(args: list[str]) -> Path | None:
    """Pick the search root out of the positional arguments.

    Unknown options end up here as well; they are warned about and
    ignored, as are extra paths after the first.
    """
    paths: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            print_warning(f"Unknown option {escape(arg)} will be ignored.")
        else:
            paths.append(arg)

    if not paths:
        return None
    if len(paths) > 1:
        print_warning(
            f"Multiple path arguments found. Using the first one: {escape(paths[0])}. "
            f"The rest are ignored: {escape(', '.join(paths[1:]))}"
        )
    return Path(paths[0])


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    }
)
def main(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[ROOT]",
            help="Directory to search from. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    delete: Annotated[
        bool,
        typer.Option("--delete/--no-delete", help="Delete files missing the criterion marker."),
    ] = False,
    update_ignore_list: Annotated[
        bool,
        typer.Option(
            "--update-ignore-list/--no-update-ignore-list",
            help="Append files missing the criterion marker to the ignore-list file.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file (TOML)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress non-essential output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Clean up files that lack the criterion marker in target folders.

    Searches ROOT for folders named like the configured target (default
    [bold]dataSourceObjects[/bold]) and reports files inside them that do not
    contain the criterion marker. Nothing is changed unless --delete or
    --update-ignore-list is given.
    """
    _configure_logging(verbose)

    root_arg = _split_arguments(args or [])
    try:
        root = root_arg.resolve() if root_arg is not None else Path.cwd()
        root_is_dir = root.is_dir()
    except OSError as e:
        print_error(f"Error accessing starting directory: {escape(str(e))}")
        err_console.print(f"Usage: {escape(USAGE)}", soft_wrap=True)
        raise typer.Exit(code=1) from e

    if not root_is_dir:
        print_error(f"Starting directory not found or is not a directory: {escape(str(root))}")
        err_console.print(f"Usage: {escape(USAGE)}", soft_wrap=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    options = CleanupOptions(delete=delete, update_ignore_list=update_ignore_list)
    table_output = output_format == OutputFormat.TABLE

    if table_output and not quiet:
        display.print_settings(options, config, root)

    diagnostics = Diagnostics()
    result = run_cleanup(root, options, config, diagnostics)

    if not table_output:
        display.print_json(result)
        return

    if not result.target_dirs:
        console.print(f"No '{escape(config.target_name)}' directories found in the specified path.")
    else:
        display.print_findings(result, options, config, verbose=verbose)
        if options.delete:
            display.print_deletion_summary(result)
        if options.update_ignore_list:
            display.print_ignore_list_outcome(result, config)

    if verbose and result.skipped:
        console.print(display.create_skipped_table(result.skipped, root))

    if not quiet:
        display.print_reminders(options, config)
    console.print("Done.")


if __name__ == "__main__":
    app()
