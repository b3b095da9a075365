"""Directory tree rendering utilities.

This package renders a directory's contents as an annotated tree with
human-readable file sizes and configurable exclusion of entries.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2tree")
except PackageNotFoundError:
    __version__ = "unknown"
