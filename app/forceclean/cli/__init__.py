"""CLI package for forceclean.

This package contains the Typer application and its display helpers.
"""

from forceclean.cli.main import app

__all__ = ["app"]
