"""forceclean - cleanup of non-conforming metadata files in project trees."""

__version__ = "0.1.0"
